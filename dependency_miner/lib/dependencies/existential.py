"""Dependências existenciais: a ocorrência de uma atividade implica (ou exclui)
a ocorrência de outra no mesmo trace, independentemente da ordem."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from dependency_miner.lib.constants import DEFAULT_THRESHOLD
from dependency_miner.lib.dependencies.models import (
    Direction,
    ExistentialDependency,
    ExistentialType,
)
from dependency_miner.lib.dependencies.threshold import Threshold
from dependency_miner.lib.event_log.traces import Traces, as_traces

logger = logging.getLogger(__name__)


def check_existential_dependency(
    from_activity: str,
    to_activity: str,
    traces: Traces,
    threshold: float | Threshold = DEFAULT_THRESHOLD,
) -> ExistentialDependency | None:
    """Verifica a dependência existencial entre ``from_activity`` e ``to_activity``.

    A ordem de verificação é: implicação (em qualquer sentido, promovida a
    equivalência quando vale nos dois), depois equivalência negada. Retorna
    ``None`` quando o par é existencialmente independente, quando não há
    traces ou quando ``from_activity == to_activity``.

    :raises InvalidThresholdError: se ``threshold`` estiver fora de [0, 1].
    """
    limit = Threshold.of(threshold)
    seqs = as_traces(traces)

    if from_activity == to_activity:
        logger.debug("Par reflexivo ignorado: %s", from_activity)
        return None
    if not seqs:
        return None

    forward = has_implication(from_activity, to_activity, seqs, limit)
    backward = has_implication(to_activity, from_activity, seqs, limit)

    if forward or backward:
        kind = (
            ExistentialType.EQUIVALENCE
            if forward and backward
            else ExistentialType.IMPLICATION
        )
        return ExistentialDependency(
            from_activity,
            to_activity,
            kind,
            Direction.FORWARD if forward else Direction.BACKWARD,
        )

    if has_negated_equivalence(from_activity, to_activity, seqs, limit):
        return ExistentialDependency(
            from_activity,
            to_activity,
            ExistentialType.NEGATED_EQUIVALENCE,
            Direction.FORWARD,
        )

    return None


def has_implication(
    from_activity: str,
    to_activity: str,
    traces: Traces,
    threshold: float | Threshold = DEFAULT_THRESHOLD,
) -> bool:
    """``from`` implica ``to``: todo trace com ``from`` também contém ``to``.

    Traces sem ``from`` são conformes por vacuidade, portanto o denominador é
    o total de traces.
    """
    return _compliance(
        traces,
        threshold,
        lambda trace: to_activity in trace if from_activity in trace else True,
    )


def has_negated_equivalence(
    from_activity: str,
    to_activity: str,
    traces: Traces,
    threshold: float | Threshold = DEFAULT_THRESHOLD,
) -> bool:
    """Nenhum trace com ``from`` contém ``to`` (traces sem ``from`` são conformes)."""
    return _compliance(
        traces,
        threshold,
        lambda trace: to_activity not in trace if from_activity in trace else True,
    )


def _compliance(
    traces: Traces,
    threshold: float | Threshold,
    is_valid: Callable[[Sequence[str]], bool],
) -> bool:
    limit = Threshold.of(threshold)
    seqs = as_traces(traces)
    if not seqs:
        return False
    valid = sum(1 for trace in seqs if is_valid(trace))
    return limit.accepts(valid / len(seqs))
