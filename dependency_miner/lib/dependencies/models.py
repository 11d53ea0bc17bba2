"""Taxonomia de dependências (temporais e existenciais) entre atividades.

``Direction`` possui apenas ``FORWARD`` e ``BACKWARD``: uma implicação nos dois
sentidos é, por definição, uma equivalência, então a combinação
implicação/bidirecional não é representável.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from dependency_miner.lib.constants import MISSING_PART, NO_DEPENDENCY


class Direction(Enum):
    """Sentido da dependência relativo ao par ``(from, to)`` consultado."""

    FORWARD = "forward"
    BACKWARD = "backward"

    def mirrored(self) -> Direction:
        if self is Direction.FORWARD:
            return Direction.BACKWARD
        return Direction.FORWARD


class TemporalType(Enum):
    DIRECT = "direct"
    EVENTUAL = "eventual"


class ExistentialType(Enum):
    IMPLICATION = "implication"
    EQUIVALENCE = "equivalence"
    NEGATED_EQUIVALENCE = "negated_equivalence"
    # Reservados: ainda não são produzidos pelo analisador existencial.
    NAND = "nand"
    OR = "or"


_TEMPORAL_DIRECTION_SYMBOLS = {
    Direction.FORWARD: "≺",
    Direction.BACKWARD: "≻",
}

_TEMPORAL_TYPE_SYMBOLS = {
    TemporalType.DIRECT: "d",
    TemporalType.EVENTUAL: "",
}

_IMPLICATION_SYMBOLS = {
    Direction.FORWARD: "=>",
    Direction.BACKWARD: "<=",
}

_EXISTENTIAL_TYPE_SYMBOLS = {
    ExistentialType.EQUIVALENCE: "⇔",
    ExistentialType.NEGATED_EQUIVALENCE: "⇎",
    ExistentialType.NAND: "⊼",
    ExistentialType.OR: "∨",
}


@dataclass(frozen=True)
class TemporalDependency:
    """Ordem consistente entre duas atividades.

    Attributes:
        from_activity: atividade de origem do par consultado.
        to_activity: atividade de destino do par consultado.
        dependency_type: ``DIRECT`` (sempre adjacentes) ou ``EVENTUAL``.
        direction: ``FORWARD`` quando ``from`` precede ``to``.
    """

    from_activity: str
    to_activity: str
    dependency_type: TemporalType
    direction: Direction

    def mirrored(self) -> TemporalDependency:
        return TemporalDependency(
            self.to_activity,
            self.from_activity,
            self.dependency_type,
            self.direction.mirrored(),
        )

    def __str__(self) -> str:
        return (
            _TEMPORAL_DIRECTION_SYMBOLS[self.direction]
            + _TEMPORAL_TYPE_SYMBOLS[self.dependency_type]
        )


@dataclass(frozen=True)
class ExistentialDependency:
    """Relação de ocorrência entre duas atividades, ignorando a ordem.

    Attributes:
        from_activity: atividade de origem do par consultado.
        to_activity: atividade de destino do par consultado.
        dependency_type: tipo da relação existencial.
        direction: sentido da implicação; ``FORWARD`` para os demais tipos
            quando ``from`` implica ``to``.
    """

    from_activity: str
    to_activity: str
    dependency_type: ExistentialType
    direction: Direction

    def __str__(self) -> str:
        if self.dependency_type is ExistentialType.IMPLICATION:
            return _IMPLICATION_SYMBOLS[self.direction]
        return _EXISTENTIAL_TYPE_SYMBOLS[self.dependency_type]


@dataclass(frozen=True)
class Dependency:
    """Combinação das dependências temporal e existencial de um par."""

    from_activity: str
    to_activity: str
    temporal: TemporalDependency | None = None
    existential: ExistentialDependency | None = None

    @property
    def is_temporally_independent(self) -> bool:
        return self.temporal is None

    @property
    def is_independent(self) -> bool:
        return self.temporal is None and self.existential is None

    def __str__(self) -> str:
        if self.is_independent:
            return NO_DEPENDENCY
        temporal = str(self.temporal) if self.temporal is not None else MISSING_PART
        existential = (
            str(self.existential) if self.existential is not None else MISSING_PART
        )
        return f"{temporal},{existential}"
