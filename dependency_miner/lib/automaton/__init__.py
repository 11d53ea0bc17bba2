"""Autômato de prefixos estendido e métricas de entropia de variantes."""

from __future__ import annotations

from dependency_miner.lib.automaton.builder import (
    ROOT,
    ExtendedPrefixAutomaton,
    events_from_traces,
)
from dependency_miner.lib.automaton.entropy import (
    entropy_from_partition_sizes,
    normalized_variant_entropy,
    variant_entropy,
)
from dependency_miner.lib.automaton.exceptions import (
    AutomatonError,
    UnknownStateError,
)
from dependency_miner.lib.automaton.models import CaseEvent, State, Transition

__all__ = [
    "AutomatonError",
    "UnknownStateError",
    "CaseEvent",
    "State",
    "Transition",
    "ROOT",
    "ExtendedPrefixAutomaton",
    "events_from_traces",
    "variant_entropy",
    "normalized_variant_entropy",
    "entropy_from_partition_sizes",
]
