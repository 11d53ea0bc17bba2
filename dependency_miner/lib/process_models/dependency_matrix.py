import logging
from typing import Any

from dependency_miner.lib.constants import DEFAULT_THRESHOLD
from dependency_miner.lib.dependencies.matrix import (
    DependencyMatrix,
    build_dependency_matrix,
)
from dependency_miner.lib.dependencies.threshold import Threshold
from dependency_miner.lib.event_log.traces import TraceStore

from .base import BaseProcessModel

LOGGER = logging.getLogger(__name__)


class DependencyMatrixModel(BaseProcessModel):
    """Matriz de dependências temporais e existenciais entre atividades.

    O limiar é validado na construção do modelo, antes de qualquer análise.
    """

    def __init__(self, threshold: "float | Threshold" = DEFAULT_THRESHOLD) -> None:
        self.threshold = Threshold.of(threshold)

    def compute(self, log: TraceStore) -> DependencyMatrix:
        LOGGER.debug(
            "Calculando matriz de dependências (threshold=%.3f, traces=%d)",
            self.threshold.value,
            len(log),
        )
        return build_dependency_matrix(log, self.threshold)

    def quality_metrics(
        self, log: TraceStore, model: Any
    ) -> "dict[str, float | None]":
        stats = model.statistics
        return {
            "relations": stats.relations,
            "pure_existence": stats.pure_existence,
            "full_independence": stats.full_independence,
            "eventual_equivalence": stats.eventual_equivalence,
            "direct_equivalence": stats.direct_equivalence,
            "independence_ratio": stats.independence_ratio,
            "temporal_independence_ratio": stats.temporal_independence_ratio,
        }
