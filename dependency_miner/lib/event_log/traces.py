"""Trace store: normaliza a entrada em uma sequência ordenada de traces."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

import pandas as pd
import pm4py

from dependency_miner.lib.constants import (
    CASE_ID_PREFIX,
    COLUMN_ACTIVITY,
    COLUMN_CASE_ID,
    COLUMN_END_TS,
    COLUMN_LIFECYCLE,
    COLUMN_START_TS,
    LIFECYCLE_COMPLETE,
    PM_ACTIVITY_KEY,
    PM_CASE_KEY,
    PM_LIFECYCLE_KEY,
    PM_TIMESTAMP_KEY,
)
from dependency_miner.lib.event_log.exceptions import EventLogError, MissingColumnsError

logger = logging.getLogger(__name__)

Trace = tuple[str, ...]

_CASE_ORDER = "__CASE_ORDER__"


@dataclass(frozen=True)
class TraceStore:
    """Snapshot imutável de um log: traces ordenados e seus identificadores.

    Cada trace é uma tupla de rótulos de atividade na ordem de execução do
    case; repetições dentro do trace são permitidas (laços). Os construtores
    ``from_*`` aceitam as representações já decodificadas do log.

    Attributes:
        traces: traces na ordem de entrada.
        case_ids: identificador de cada trace (mesmo comprimento de ``traces``).
    """

    traces: tuple[Trace, ...] = ()
    case_ids: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.case_ids and self.traces:
            generated = tuple(f"{CASE_ID_PREFIX}{i}" for i in range(len(self.traces)))
            object.__setattr__(self, "case_ids", generated)
        if len(self.case_ids) != len(self.traces):
            raise EventLogError(
                "case_ids e traces devem ter o mesmo tamanho "
                f"({len(self.case_ids)} != {len(self.traces)})"
            )

    # --- Construtores ---------------------------------------------------------
    @classmethod
    def from_traces(cls, traces: Iterable[Iterable[str]]) -> TraceStore:
        """Constrói a partir de sequências de atividades já ordenadas."""
        return cls(tuple(tuple(str(a) for a in trace) for trace in traces))

    @classmethod
    def from_text(cls, text: str, *, separator: str = ",") -> TraceStore:
        """Uma linha por trace, atividades separadas por ``separator``.

        Linhas vazias e entradas só com espaços são descartadas; as demais
        entradas são mantidas sem aparar, de modo que ``"A, B,\\n\\nC,"``
        produz os traces ``("A", " B")`` e ``("C",)``.
        """
        traces: list[Trace] = []
        for line in text.splitlines():
            trace = tuple(item for item in line.split(separator) if item.strip())
            if trace:
                traces.append(trace)
        return cls(tuple(traces))

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> TraceStore:
        """Extrai os traces de um DataFrame de eventos.

        Aceita tanto colunas no padrão pm4py (``case:concept:name``,
        ``concept:name``, ``time:timestamp``, ``lifecycle:transition``) quanto
        as colunas do domínio (``CASE_ID``, ``ACTIVITY``, ``END_TIMESTAMP`` /
        ``START_TIMESTAMP``, ``LIFECYCLE``).

        Regras por case:
          - se algum evento do case possui ``lifecycle`` exatamente igual a
            ``"complete"``, apenas esses eventos são mantidos;
          - eventos sem atividade (ou sem timestamp, quando a coluna existe)
            são descartados;
          - os eventos são ordenados por timestamp de forma estável.

        A ordem dos cases segue a primeira aparição no DataFrame. Um case cujos
        eventos foram todos descartados permanece como trace vazio.

        :raises MissingColumnsError: se não houver coluna de case ou atividade.
        """
        prepared = _prepare_frame(df)

        prepared = prepared.loc[prepared[PM_CASE_KEY].notna()].copy()
        codes, uniques = pd.factorize(prepared[PM_CASE_KEY])
        prepared[_CASE_ORDER] = codes

        if PM_LIFECYCLE_KEY in prepared.columns:
            is_complete = (
                prepared[PM_LIFECYCLE_KEY].astype("string") == LIFECYCLE_COMPLETE
            ).fillna(False).astype(bool)
            case_has_complete = is_complete.groupby(prepared[_CASE_ORDER]).transform(
                "any"
            )
            prepared = prepared.loc[~case_has_complete | is_complete]

        required = [PM_ACTIVITY_KEY]
        sort_keys = [_CASE_ORDER]
        if PM_TIMESTAMP_KEY in prepared.columns:
            prepared = prepared.assign(
                **{
                    PM_TIMESTAMP_KEY: pd.to_datetime(
                        prepared[PM_TIMESTAMP_KEY], errors="coerce", format="mixed"
                    )
                }
            )
            required.append(PM_TIMESTAMP_KEY)
            sort_keys.append(PM_TIMESTAMP_KEY)
        prepared = prepared.dropna(subset=required)
        prepared = prepared.assign(
            **{PM_ACTIVITY_KEY: prepared[PM_ACTIVITY_KEY].astype(str)}
        )

        ordered = prepared.sort_values(sort_keys, kind="mergesort")
        sequences = (
            ordered.groupby(_CASE_ORDER)[PM_ACTIVITY_KEY]
            .agg(list)
            .to_dict()
        )

        traces = tuple(
            tuple(sequences.get(code, ())) for code in range(len(uniques))
        )
        case_ids = tuple(str(case_id) for case_id in uniques)
        logger.debug(
            "TraceStore.from_dataframe: eventos=%d, cases=%d",
            len(ordered),
            len(traces),
        )
        return cls(traces, case_ids)

    @classmethod
    def from_event_log(cls, log: Any) -> TraceStore:
        """Converte um ``pm4py.objects.log.obj.EventLog`` já carregado."""
        df = pm4py.convert_to_dataframe(log)
        return cls.from_dataframe(df)

    @classmethod
    def coerce(cls, log: Any) -> TraceStore:
        """Normaliza ``TraceStore``, DataFrame ou sequência de traces."""
        if isinstance(log, TraceStore):
            return log
        if isinstance(log, pd.DataFrame):
            return cls.from_dataframe(log)
        if isinstance(log, str):
            raise TypeError("Use TraceStore.from_text para entradas textuais")
        if isinstance(log, Iterable):
            return cls.from_traces(log)
        raise TypeError(
            "log deve ser um TraceStore, pandas.DataFrame ou sequência de traces"
        )

    # --- Consultas ------------------------------------------------------------
    @property
    def alphabet(self) -> frozenset[str]:
        """Conjunto de atividades distintas observadas no log."""
        return frozenset(a for trace in self.traces for a in trace)

    def activities(self) -> list[str]:
        """Alfabeto ordenado (ordem estável para renderização)."""
        return sorted(self.alphabet)

    def is_empty(self) -> bool:
        return not self.traces

    def __len__(self) -> int:
        return len(self.traces)

    def __iter__(self) -> Iterator[Trace]:
        return iter(self.traces)

    def __getitem__(self, index: int) -> Trace:
        return self.traces[index]


Traces = TraceStore | Sequence[Sequence[str]]


def as_traces(traces: Traces) -> Sequence[Sequence[str]]:
    """Devolve a sequência de traces subjacente sem cópia quando possível."""
    if isinstance(traces, TraceStore):
        return traces.traces
    return traces


def _prepare_frame(df: pd.DataFrame) -> pd.DataFrame:
    """Renomeia colunas do domínio para o padrão pm4py em uma cópia."""
    prepared = df.copy()

    def _rename_first_available(candidates: tuple[str, ...], target: str) -> None:
        for column in candidates:
            if column in prepared.columns:
                if column != target:
                    prepared.rename(columns={column: target}, inplace=True)
                return

    _rename_first_available((PM_CASE_KEY, COLUMN_CASE_ID), PM_CASE_KEY)
    _rename_first_available((PM_ACTIVITY_KEY, COLUMN_ACTIVITY), PM_ACTIVITY_KEY)
    _rename_first_available(
        (PM_TIMESTAMP_KEY, COLUMN_END_TS, COLUMN_START_TS), PM_TIMESTAMP_KEY
    )
    _rename_first_available((PM_LIFECYCLE_KEY, COLUMN_LIFECYCLE), PM_LIFECYCLE_KEY)

    missing = [c for c in (PM_CASE_KEY, PM_ACTIVITY_KEY) if c not in prepared.columns]
    if missing:
        raise MissingColumnsError(f"Colunas ausentes: {missing}")
    return prepared
