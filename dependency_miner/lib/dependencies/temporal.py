"""Dependências temporais: uma atividade precede sistematicamente a outra,
de forma direta (adjacente) ou eventual."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence

from dependency_miner.lib.constants import DEFAULT_THRESHOLD
from dependency_miner.lib.dependencies.models import (
    Direction,
    TemporalDependency,
    TemporalType,
)
from dependency_miner.lib.dependencies.threshold import Threshold
from dependency_miner.lib.event_log.traces import Traces, as_traces

logger = logging.getLogger(__name__)
Observation = tuple[TemporalType, Direction]


def check_temporal_dependency(
    from_activity: str,
    to_activity: str,
    traces: Traces,
    threshold: float | Threshold = DEFAULT_THRESHOLD,
) -> TemporalDependency | None:
    """Verifica a dependência temporal entre ``from_activity`` e ``to_activity``.

    Todas as combinações de posições das duas atividades, em todos os traces,
    são classificadas (ver :func:`classify_positions`) e agregadas. A
    dependência só é reportada quando todas as observações concordam no
    sentido e a razão do sentido dominante atinge ``threshold``. O tipo é
    ``DIRECT`` apenas se todas as observações forem adjacentes.

    Retorna ``None`` se as atividades nunca coocorrem, se os sentidos
    divergem ou para pares reflexivos.

    :raises InvalidThresholdError: se ``threshold`` estiver fora de [0, 1].
    """
    limit = Threshold.of(threshold)
    seqs = as_traces(traces)

    if from_activity == to_activity:
        logger.debug("Par reflexivo ignorado: %s", from_activity)
        return None

    observations: Counter[Observation] = Counter()
    for trace in seqs:
        observations.update(classify_positions(from_activity, to_activity, trace))

    forward = sum(n for (_, d), n in observations.items() if d is Direction.FORWARD)
    backward = sum(n for (_, d), n in observations.items() if d is Direction.BACKWARD)
    total = forward + backward
    if total == 0:
        return None

    dominant_ratio = max(forward, backward) / total
    if not limit.accepts(dominant_ratio) or (forward and backward):
        return None

    all_direct = all(kind is TemporalType.DIRECT for kind, _ in observations)
    return TemporalDependency(
        from_activity,
        to_activity,
        TemporalType.DIRECT if all_direct else TemporalType.EVENTUAL,
        Direction.FORWARD if forward > backward else Direction.BACKWARD,
    )


def classify_positions(
    from_activity: str, to_activity: str, trace: Sequence[str]
) -> list[Observation]:
    """Classifica cada par (posição de ``from``, posição de ``to``) do trace.

    ``from`` antes de ``to`` é ``FORWARD``; depois é ``BACKWARD``; posições
    adjacentes são ``DIRECT`` e as demais ``EVENTUAL``. Posições iguais são
    ignoradas.
    """
    from_positions = [i for i, a in enumerate(trace) if a == from_activity]
    if not from_positions:
        return []
    to_positions = [i for i, a in enumerate(trace) if a == to_activity]

    observations: list[Observation] = []
    for i in from_positions:
        for j in to_positions:
            if i == j:
                continue
            kind = TemporalType.DIRECT if abs(i - j) == 1 else TemporalType.EVENTUAL
            observations.append(
                (kind, Direction.FORWARD if i < j else Direction.BACKWARD)
            )
    return observations
