"""Data models for the extended prefix automaton."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CaseEvent:
    """Evento de um case na ordem de execução.

    Attributes:
        case_id: identificador do case.
        activity: símbolo da atividade no alfabeto do autômato.
        predecessor: referência ao case cujo último estado precede este
            evento; ``None`` apenas para o primeiro evento do case.
    """

    case_id: str
    activity: str
    predecessor: str | None = None


@dataclass(slots=True)
class State:
    """Estado do autômato; ``partition`` é ``None`` apenas na raiz."""

    state_id: int
    partition: int | None = None
    events: list[CaseEvent] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.partition is None


@dataclass(frozen=True)
class Transition:
    source: int
    symbol: str
    target: int
