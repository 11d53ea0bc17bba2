"""Variantes de processo: contagem, ranking e razões derivadas."""

from __future__ import annotations

from dependency_miner.lib.variants.counter import (
    variant_frame,
    variant_infos,
    variant_statistics,
    variants_of_traces,
)
from dependency_miner.lib.variants.models import VariantInfo, VariantStatistics

__all__ = [
    "VariantInfo",
    "VariantStatistics",
    "variants_of_traces",
    "variant_infos",
    "variant_statistics",
    "variant_frame",
]
