"""Relatórios consolidados sobre logs de eventos."""

from __future__ import annotations

from dependency_miner.lib.analysis.summary import LogSummary, summarize_log

__all__ = ["LogSummary", "summarize_log"]
