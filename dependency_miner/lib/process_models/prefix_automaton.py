import logging
from typing import Any

from dependency_miner.lib.automaton.builder import ExtendedPrefixAutomaton
from dependency_miner.lib.event_log.traces import TraceStore

from .base import BaseProcessModel

LOGGER = logging.getLogger(__name__)


class PrefixAutomatonModel(BaseProcessModel):
    """Autômato de prefixos estendido; as métricas são as entropias de variantes.

    Parameters
    ----------
    truncate_labels : bool
        Usa apenas o primeiro caractere de cada atividade como símbolo.
    """

    def __init__(self, truncate_labels: bool = False) -> None:
        self.truncate_labels = bool(truncate_labels)

    def compute(self, log: TraceStore) -> ExtendedPrefixAutomaton:
        return ExtendedPrefixAutomaton.from_traces(
            log, truncate_labels=self.truncate_labels
        )

    def quality_metrics(
        self, log: TraceStore, model: Any
    ) -> "dict[str, float | None]":
        metrics = {
            "variant_entropy": model.variant_entropy(),
            "normalized_variant_entropy": model.normalized_variant_entropy(),
            "states": model.state_count,
            "partitions": model.max_partition,
        }
        LOGGER.debug("Métricas do autômato: %s", metrics)
        return metrics
