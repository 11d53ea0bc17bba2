"""Limiar de tolerância a ruído validado uma única vez por análise."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

from dependency_miner.lib.constants import DEFAULT_THRESHOLD
from dependency_miner.lib.dependencies.exceptions import InvalidThresholdError


@dataclass(frozen=True)
class Threshold:
    """Fração mínima de traces que precisam sustentar uma dependência.

    ``1.0`` exige que a relação valha em literalmente todos os traces
    qualificados; valores menores toleram ruído. Construir um ``Threshold``
    fora de ``[0, 1]`` falha imediatamente com ``InvalidThresholdError``.
    """

    value: float = DEFAULT_THRESHOLD

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, numbers.Real):
            raise InvalidThresholdError(
                f"Threshold deve ser numérico, recebido: {self.value!r}"
            )
        value = float(self.value)
        if math.isnan(value) or not 0.0 <= value <= 1.0:
            raise InvalidThresholdError("Threshold deve estar entre 0 e 1")
        object.__setattr__(self, "value", value)

    @classmethod
    def of(cls, value: float | Threshold) -> Threshold:
        if isinstance(value, Threshold):
            return value
        return cls(value)

    def accepts(self, ratio: float) -> bool:
        return ratio >= self.value

    def __float__(self) -> float:
        return self.value
