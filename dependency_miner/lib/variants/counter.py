"""Contagem de variantes (sequências de atividades distintas) de um log."""

from __future__ import annotations

import logging
from collections import Counter

import pandas as pd

from dependency_miner.lib.event_log.traces import Trace, Traces, as_traces
from dependency_miner.lib.variants.models import (
    VARIANT_JOINER,
    VariantInfo,
    VariantStatistics,
)

logger = logging.getLogger(__name__)


def variants_of_traces(traces: Traces) -> dict[Trace, int]:
    """Conta quantos traces seguem cada sequência exata de atividades.

    Duas sequências com as mesmas atividades em ordem diferente são variantes
    distintas. As chaves aparecem na ordem da primeira ocorrência.
    """
    counts: Counter[Trace] = Counter(tuple(trace) for trace in as_traces(traces))
    return dict(counts)


def variant_infos(traces: Traces) -> list[VariantInfo]:
    """Variantes ordenadas por frequência decrescente.

    Empates preservam a ordem de primeira ocorrência no log. Os IDs seguem a
    mesma ordem: ``"variant 1"`` é a mais frequente.
    """
    counts = Counter(variants_of_traces(traces))
    infos = [
        VariantInfo(
            variant_id=f"variant {idx}",
            variant=variant,
            frequency=int(frequency),
            length=len(variant),
        )
        for idx, (variant, frequency) in enumerate(counts.most_common(), start=1)
    ]
    logger.debug("variant_infos: variantes=%d", len(infos))
    return infos


def variant_statistics(traces: Traces) -> VariantStatistics:
    seqs = as_traces(traces)
    counts = variants_of_traces(seqs)
    return VariantStatistics(
        trace_count=len(seqs),
        variant_count=len(counts),
        max_frequency=max(counts.values(), default=0),
    )


def variant_frame(traces: Traces, *, joiner: str = VARIANT_JOINER) -> pd.DataFrame:
    """Tabela de variantes (uma linha por variante, mais frequente primeiro)."""
    rows = [
        {
            "variant_id": info.variant_id,
            "variant": info.label(joiner),
            "frequency": info.frequency,
            "length": info.length,
        }
        for info in variant_infos(traces)
    ]
    return pd.DataFrame(rows, columns=["variant_id", "variant", "frequency", "length"])
