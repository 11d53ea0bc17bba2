"""Data models for variants."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

VARIANT_JOINER = ">"


@dataclass(frozen=True)
class VariantInfo:
    """Informações sobre uma variante de processo.

    Attributes:
        variant_id: ID sequencial por frequência decrescente ("variant 1", ...).
        variant: sequência de atividades da variante.
        frequency: número de traces com essa variante.
        length: quantidade de atividades na variante.
    """

    variant_id: str
    variant: tuple[str, ...]
    frequency: int
    length: int

    def label(self, joiner: str = VARIANT_JOINER) -> str:
        """Representação textual da variante (ex.: ``"A>B>C"``)."""
        return joiner.join(self.variant)


@dataclass(frozen=True)
class VariantStatistics:
    """Razões derivadas da contagem de variantes de um log.

    Todas as razões valem ``0.0`` para um log sem traces.
    """

    trace_count: int = 0
    variant_count: int = 0
    max_frequency: int = 0

    @property
    def max_frequency_ratio(self) -> float:
        """Frequência da variante mais comum sobre o número de traces."""
        return self.max_frequency / self.trace_count if self.trace_count else 0.0

    @property
    def variants_per_trace(self) -> float:
        return self.variant_count / self.trace_count if self.trace_count else 0.0

    @property
    def max_frequency_per_variant(self) -> float:
        if not self.variant_count:
            return 0.0
        return self.max_frequency_ratio / self.variant_count

    def to_dict(self) -> dict[str, Any]:
        return {
            "trace_count": self.trace_count,
            "variant_count": self.variant_count,
            "max_frequency": self.max_frequency,
            "max_frequency_ratio": self.max_frequency_ratio,
            "variants_per_trace": self.variants_per_trace,
            "max_frequency_per_variant": self.max_frequency_per_variant,
        }
