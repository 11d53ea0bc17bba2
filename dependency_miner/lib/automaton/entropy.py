"""Entropia de variantes sobre a distribuição de tamanhos das partições."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dependency_miner.lib.automaton.builder import ExtendedPrefixAutomaton


def effective_state_count(state_count: int) -> int:
    """Número de estados sem a raiz (ou a contagem bruta com um único estado)."""
    return state_count - 1 if state_count > 1 else state_count


def _xlogx(n: int) -> float:
    return n * math.log10(n) if n > 0 else 0.0


def entropy_from_partition_sizes(
    sizes: Iterable[int], state_count: int
) -> tuple[float, float]:
    """Calcula ``(entropia, entropia normalizada)``.

    ``state_count`` inclui a raiz. A entropia normalizada é ``0.0`` quando o
    denominador ``S·log10(S)`` é nulo (autômato vazio ou com um único estado
    além da raiz).
    """
    s = effective_state_count(state_count)
    normalizer = _xlogx(s)
    entropy = normalizer - sum(_xlogx(n) for n in sizes)
    if normalizer == 0:
        return entropy, 0.0
    return entropy, entropy / normalizer


def variant_entropy(automaton: ExtendedPrefixAutomaton) -> float:
    """``S·log10(S) − Σ n_p·log10(n_p)`` sobre as partições do autômato."""
    entropy, _ = entropy_from_partition_sizes(
        automaton.partition_sizes().values(), automaton.state_count
    )
    return entropy


def normalized_variant_entropy(automaton: ExtendedPrefixAutomaton) -> float:
    _, normalized = entropy_from_partition_sizes(
        automaton.partition_sizes().values(), automaton.state_count
    )
    return normalized
