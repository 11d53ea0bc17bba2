"""Normalização de logs de eventos em sequências ordenadas de atividades."""

from __future__ import annotations

from dependency_miner.lib.event_log.exceptions import (
    EventLogError,
    MissingColumnsError,
)
from dependency_miner.lib.event_log.traces import Trace, Traces, TraceStore, as_traces

__all__ = [
    "EventLogError",
    "MissingColumnsError",
    "Trace",
    "Traces",
    "TraceStore",
    "as_traces",
]
