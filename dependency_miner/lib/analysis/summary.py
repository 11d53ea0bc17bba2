"""Relatório consolidado de um log: matriz de dependências, razões de
variantes e entropias do autômato de prefixos."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from dependency_miner.lib.automaton.builder import ExtendedPrefixAutomaton
from dependency_miner.lib.constants import DEFAULT_THRESHOLD
from dependency_miner.lib.dependencies.matrix import (
    DependencyMatrix,
    build_dependency_matrix,
)
from dependency_miner.lib.dependencies.threshold import Threshold
from dependency_miner.lib.event_log.traces import Traces, TraceStore
from dependency_miner.lib.variants.counter import variant_statistics
from dependency_miner.lib.variants.models import VariantStatistics

logger = logging.getLogger(__name__)

_LABEL_WIDTH = 48
_VALUE_WIDTH = 10


@dataclass(frozen=True)
class LogSummary:
    """Resultado de :func:`summarize_log`.

    Attributes:
        matrix: matriz de dependências (com suas estatísticas).
        variants: contagens e razões de variantes.
        variant_entropy: entropia de variantes do autômato.
        normalized_variant_entropy: entropia normalizada em [0, 1].
    """

    matrix: DependencyMatrix
    variants: VariantStatistics
    variant_entropy: float
    normalized_variant_entropy: float

    def to_dict(self) -> dict[str, Any]:
        data = self.matrix.statistics.to_dict()
        data.update(self.variants.to_dict())
        data["variant_entropy"] = self.variant_entropy
        data["normalized_variant_entropy"] = self.normalized_variant_entropy
        return data

    def render(self) -> str:
        """Grade de dependências seguida das estatísticas em largura fixa."""
        stats = self.matrix.statistics
        rows: list[tuple[str, Any]] = [
            ("#relations:", stats.relations),
            ("#independence / #relations:", stats.independence_ratio),
            (
                "#temporal independence / #relations:",
                stats.temporal_independence_ratio,
            ),
            (
                "max. frequency of variants / total #traces:",
                self.variants.max_frequency_ratio,
            ),
            ("#variants / total #traces:", self.variants.variants_per_trace),
            ("#(Eventual, <=>):", stats.eventual_equivalence),
            ("#(Direct, <=>):", stats.direct_equivalence),
            ("#variants:", self.variants.variant_count),
            (
                "max. frequency of variants / #variants:",
                self.variants.max_frequency_per_variant,
            ),
            ("Variant Entropy:", self.variant_entropy),
            ("Normalized Variant Entropy:", self.normalized_variant_entropy),
        ]
        lines = [self.matrix.render()]
        for label, value in rows:
            text = f"{value:.4f}" if isinstance(value, float) else str(value)
            lines.append(f"{label:<{_LABEL_WIDTH}}{text:<{_VALUE_WIDTH}}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()


def summarize_log(
    traces: Traces,
    threshold: float | Threshold = DEFAULT_THRESHOLD,
    *,
    truncate_labels: bool = False,
) -> LogSummary:
    """Executa todas as análises sobre o mesmo snapshot de traces.

    :raises InvalidThresholdError: se ``threshold`` estiver fora de [0, 1].
    """
    limit = Threshold.of(threshold)
    store = TraceStore.coerce(traces)

    matrix = build_dependency_matrix(store, limit)
    automaton = ExtendedPrefixAutomaton.from_traces(
        store, truncate_labels=truncate_labels
    )
    summary = LogSummary(
        matrix=matrix,
        variants=variant_statistics(store),
        variant_entropy=automaton.variant_entropy(),
        normalized_variant_entropy=automaton.normalized_variant_entropy(),
    )
    logger.debug(
        "summarize_log: traces=%d, atividades=%d, estados=%d",
        len(store),
        len(matrix.activities),
        automaton.state_count,
    )
    return summary
