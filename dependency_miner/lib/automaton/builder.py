"""Autômato de prefixos estendido construído a partir de eventos por case.

Os estados ficam em uma arena indexada por inteiros (``0`` é a raiz), as
transições em um índice ``(estado, símbolo) -> destino`` e o último estado de
cada case em um mapeamento próprio. A construção percorre os cases e seus
eventos estritamente na ordem de entrada, o que determina a numeração das
partições.
"""

from __future__ import annotations

import logging
from collections import Counter, defaultdict
from collections.abc import Iterable

from dependency_miner.lib.automaton.entropy import (
    normalized_variant_entropy,
    variant_entropy,
)
from dependency_miner.lib.automaton.exceptions import UnknownStateError
from dependency_miner.lib.automaton.models import CaseEvent, State, Transition
from dependency_miner.lib.event_log.traces import Traces, TraceStore

logger = logging.getLogger(__name__)

ROOT = 0


class ExtendedPrefixAutomaton:
    """Autômato determinístico cujos estados carregam um rótulo de partição.

    Após :meth:`build` o autômato deve ser tratado como somente leitura.
    """

    def __init__(self) -> None:
        self._states: list[State] = [State(ROOT)]
        self._index: dict[tuple[int, str], int] = {}
        self._out_degree: Counter[int] = Counter()
        self._last_state: dict[str, int] = {}
        self._max_partition = 0

    @classmethod
    def build(
        cls, streams: Iterable[Iterable[CaseEvent]]
    ) -> ExtendedPrefixAutomaton:
        """Constrói o autômato a partir de um fluxo de eventos por case."""
        automaton = cls()
        events = 0
        for stream in streams:
            for event in stream:
                automaton._add_event(event)
                events += 1
        logger.debug(
            "ExtendedPrefixAutomaton.build: eventos=%d, estados=%d, particoes=%d",
            events,
            automaton.state_count,
            automaton.max_partition,
        )
        return automaton

    @classmethod
    def from_traces(
        cls, traces: Traces, *, truncate_labels: bool = False
    ) -> ExtendedPrefixAutomaton:
        return cls.build(events_from_traces(traces, truncate_labels=truncate_labels))

    def _add_event(self, event: CaseEvent) -> State:
        if event.predecessor is None:
            source = ROOT
        else:
            source = self._last_state.get(event.predecessor, ROOT)

        target = self._index.get((source, event.activity))
        if target is None:
            target = self._new_state(source)
            self._index[(source, event.activity)] = target
            self._out_degree[source] += 1

        state = self._states[target]
        state.events.append(event)
        self._last_state[event.case_id] = target
        return state

    def _new_state(self, source: int) -> int:
        if source == ROOT:
            partition = 1
        elif self._out_degree[source] > 0:
            partition = self._max_partition + 1
        else:
            partition = self._states[source].partition
        self._max_partition = max(self._max_partition, partition)

        state_id = len(self._states)
        self._states.append(State(state_id, partition))
        return state_id

    # --- Consultas ------------------------------------------------------------
    @property
    def state_count(self) -> int:
        """Número de estados, raiz incluída."""
        return len(self._states)

    @property
    def max_partition(self) -> int:
        return self._max_partition

    @property
    def states(self) -> tuple[State, ...]:
        return tuple(self._states)

    @property
    def alphabet(self) -> frozenset[str]:
        return frozenset(symbol for _, symbol in self._index)

    def state(self, state_id: int) -> State:
        if not 0 <= state_id < len(self._states):
            raise UnknownStateError(state_id)
        return self._states[state_id]

    def successor(self, state_id: int, symbol: str) -> int | None:
        self.state(state_id)
        return self._index.get((state_id, symbol))

    def transitions(self) -> list[Transition]:
        """Transições na ordem de criação."""
        return [
            Transition(source, symbol, target)
            for (source, symbol), target in self._index.items()
        ]

    def last_state(self, case_id: str) -> int:
        """Último estado alcançado pelo case (raiz se o case é desconhecido)."""
        return self._last_state.get(case_id, ROOT)

    def partition_sizes(self) -> dict[int, int]:
        """Quantidade de estados por partição, raiz excluída."""
        sizes: defaultdict[int, int] = defaultdict(int)
        for state in self._states:
            if state.partition is not None:
                sizes[state.partition] += 1
        return dict(sorted(sizes.items()))

    def states_in_partition(self, partition: int) -> list[int]:
        return [s.state_id for s in self._states if s.partition == partition]

    def variant_entropy(self) -> float:
        return variant_entropy(self)

    def normalized_variant_entropy(self) -> float:
        return normalized_variant_entropy(self)

    def __len__(self) -> int:
        return self.state_count


def events_from_traces(
    traces: Traces, *, truncate_labels: bool = False
) -> list[list[CaseEvent]]:
    """Converte traces em fluxos de ``CaseEvent`` (um fluxo por case).

    Cada evento após o primeiro referencia o próprio case como predecessor.
    Com ``truncate_labels=True`` apenas o primeiro caractere de cada
    atividade é usado como símbolo; um aviso é registrado quando rótulos
    distintos colapsam no mesmo símbolo.
    """
    store = TraceStore.coerce(traces)

    if truncate_labels:
        symbols: defaultdict[str, set[str]] = defaultdict(set)
        for activity in store.alphabet:
            symbols[activity[:1]].add(activity)
        collisions = {s: sorted(a) for s, a in symbols.items() if len(a) > 1}
        if collisions:
            logger.warning(
                "Truncamento de rótulos funde atividades distintas: %s", collisions
            )

    streams: list[list[CaseEvent]] = []
    for case_id, trace in zip(store.case_ids, store.traces):
        streams.append(
            [
                CaseEvent(
                    case_id=case_id,
                    activity=activity[:1] if truncate_labels else activity,
                    predecessor=case_id if position > 0 else None,
                )
                for position, activity in enumerate(trace)
            ]
        )
    return streams
