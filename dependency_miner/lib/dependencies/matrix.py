"""Matriz de dependências: analisa todos os pares ordenados de atividades."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

import pandas as pd

from dependency_miner.lib.constants import (
    DEFAULT_THRESHOLD,
    DEPENDENCY_LABEL_WIDTH,
    GRID_CELL_WIDTH,
    NOT_APPLICABLE,
)
from dependency_miner.lib.dependencies.exceptions import UnknownActivityError
from dependency_miner.lib.dependencies.existential import check_existential_dependency
from dependency_miner.lib.dependencies.models import (
    Dependency,
    ExistentialType,
    TemporalType,
)
from dependency_miner.lib.dependencies.temporal import check_temporal_dependency
from dependency_miner.lib.dependencies.threshold import Threshold
from dependency_miner.lib.event_log.traces import Traces, TraceStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatrixStatistics:
    """Métricas globais de qualidade da matriz (não são resultados por par).

    Attributes:
        activity_count: tamanho do alfabeto.
        pure_existence: pares sem dependência temporal.
        full_independence: pares sem dependência temporal nem existencial.
        eventual_equivalence: pares equivalentes com dependência temporal eventual.
        direct_equivalence: pares equivalentes com dependência temporal direta.
    """

    activity_count: int = 0
    pure_existence: int = 0
    full_independence: int = 0
    eventual_equivalence: int = 0
    direct_equivalence: int = 0

    @property
    def relations(self) -> int:
        """Número de células da matriz, diagonal incluída."""
        return self.activity_count * self.activity_count

    @property
    def independence_ratio(self) -> float:
        return self.full_independence / self.relations if self.relations else 0.0

    @property
    def temporal_independence_ratio(self) -> float:
        return self.pure_existence / self.relations if self.relations else 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "activity_count": self.activity_count,
            "relations": self.relations,
            "pure_existence": self.pure_existence,
            "full_independence": self.full_independence,
            "eventual_equivalence": self.eventual_equivalence,
            "direct_equivalence": self.direct_equivalence,
            "independence_ratio": self.independence_ratio,
            "temporal_independence_ratio": self.temporal_independence_ratio,
        }


@dataclass(frozen=True)
class DependencyMatrix:
    """Resultado imutável da análise par a par.

    ``dependencies`` contém uma entrada para cada par ordenado de atividades
    distintas; a diagonal não é analisada.
    """

    activities: tuple[str, ...]
    dependencies: Mapping[tuple[str, str], Dependency]
    threshold: Threshold = field(default_factory=Threshold)
    statistics: MatrixStatistics = field(default_factory=MatrixStatistics)

    def get(self, from_activity: str, to_activity: str) -> Dependency | None:
        """Dependência do par, ou ``None`` na diagonal."""
        for activity in (from_activity, to_activity):
            if activity not in self.activities:
                raise UnknownActivityError(activity)
        if from_activity == to_activity:
            return None
        return self.dependencies[(from_activity, to_activity)]

    def cell(self, from_activity: str, to_activity: str) -> str:
        dependency = self.get(from_activity, to_activity)
        if dependency is None:
            return NOT_APPLICABLE
        return f"{str(dependency):<{DEPENDENCY_LABEL_WIDTH}}"

    def render(self) -> str:
        """Grade textual de largura fixa (linhas = origem, colunas = destino)."""
        lines = [
            f"{' ':<{GRID_CELL_WIDTH}}"
            + "".join(f"{a:<{GRID_CELL_WIDTH}}" for a in self.activities)
        ]
        for from_activity in self.activities:
            row = f"{from_activity:<{GRID_CELL_WIDTH}}"
            for to_activity in self.activities:
                row += f"{self.cell(from_activity, to_activity):<{GRID_CELL_WIDTH}}"
            lines.append(row)
        return "\n".join(lines) + "\n"

    def to_frame(self) -> pd.DataFrame:
        """Rótulos das células como DataFrame (índice = origem, colunas = destino)."""
        return pd.DataFrame(
            [
                [self.cell(f, t).strip() for t in self.activities]
                for f in self.activities
            ],
            index=pd.Index(self.activities, name="from"),
            columns=pd.Index(self.activities, name="to"),
        )

    def __str__(self) -> str:
        return self.render()


def build_dependency_matrix(
    traces: Traces,
    threshold: float | Threshold = DEFAULT_THRESHOLD,
) -> DependencyMatrix:
    """Executa os analisadores temporal e existencial para todos os pares.

    O padrão ``threshold=1.0`` corresponde a dependências exatas, sem
    tolerância a ruído.

    :raises InvalidThresholdError: se ``threshold`` estiver fora de [0, 1].
    """
    limit = Threshold.of(threshold)
    store = TraceStore.coerce(traces)
    activities = tuple(store.activities())

    dependencies: dict[tuple[str, str], Dependency] = {}
    pure_existence = full_independence = 0
    eventual_equivalence = direct_equivalence = 0

    for from_activity in activities:
        for to_activity in activities:
            if from_activity == to_activity:
                continue
            dependency = Dependency(
                from_activity,
                to_activity,
                check_temporal_dependency(from_activity, to_activity, store, limit),
                check_existential_dependency(from_activity, to_activity, store, limit),
            )
            dependencies[(from_activity, to_activity)] = dependency

            if dependency.is_temporally_independent:
                pure_existence += 1
                if dependency.is_independent:
                    full_independence += 1

            existential = dependency.existential
            temporal = dependency.temporal
            if (
                existential is not None
                and temporal is not None
                and existential.dependency_type is ExistentialType.EQUIVALENCE
            ):
                if temporal.dependency_type is TemporalType.EVENTUAL:
                    eventual_equivalence += 1
                else:
                    direct_equivalence += 1

    statistics = MatrixStatistics(
        activity_count=len(activities),
        pure_existence=pure_existence,
        full_independence=full_independence,
        eventual_equivalence=eventual_equivalence,
        direct_equivalence=direct_equivalence,
    )
    logger.debug(
        "build_dependency_matrix: atividades=%d, pares=%d, threshold=%.3f",
        len(activities),
        len(dependencies),
        limit.value,
    )
    return DependencyMatrix(
        activities,
        MappingProxyType(dependencies),
        limit,
        statistics,
    )
