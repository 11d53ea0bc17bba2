from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass, field
from typing import Any

from ..event_log.exceptions import EventLogError
from ..event_log.traces import TraceStore
from .base import BaseProcessModel

LOGGER = logging.getLogger(__name__)


@dataclass
class ProcessModelView:
    """
    Representa uma visão *lazy* de um modelo de processo.

    Combina um log (``TraceStore``, ``pandas.DataFrame`` ou sequência de
    traces) com um :class:`BaseProcessModel`. O modelo somente será calculado
    quando :meth:`compute` for chamado.
    """

    log: Any
    model: BaseProcessModel
    _cached: Any | None = field(default=None, init=False, repr=False)
    _cached_quality: dict[str, float | None] | None = field(
        default=None, init=False, repr=False
    )
    _cached_traces: TraceStore | None = field(default=None, init=False, repr=False)

    def _materialize_traces(self) -> TraceStore:
        """Return the cached TraceStore, materialising it on first use."""

        if self._cached_traces is not None:
            return self._cached_traces

        try:
            traces = TraceStore.coerce(self.log)
        except (EventLogError, TypeError):
            LOGGER.exception(
                "Falha ao normalizar o log para %s.", type(self.model).__name__
            )
            raise

        self._cached_traces = traces
        return traces

    def compute(self) -> Any:
        """
        Materializa o modelo de processo.

        Se o resultado já foi computado anteriormente, utiliza o cache interno.

        :returns: Estrutura de dados retornada pelo modelo.
        """
        if self._cached is not None:
            return self._cached

        traces = self._materialize_traces()
        result = self.model.compute(traces)
        self._cached = result
        self._cached_quality = None
        return result

    def quality_metrics(self) -> dict[str, float | None]:
        """Calcula e retorna métricas do modelo."""

        if self._cached_quality is not None:
            return self._cached_quality

        traces = self._materialize_traces()
        result = self.compute()

        metrics_dict = dict(self.model.quality_metrics(traces, result))

        sanitized: dict[str, float | None] = {}
        for raw_key, value in metrics_dict.items():
            key = str(raw_key)
            if value is None:
                sanitized[key] = None
            elif isinstance(value, numbers.Number):
                sanitized[key] = float(value)
            else:
                raise TypeError("Os valores das métricas devem ser números ou None.")

        self._cached_quality = sanitized
        return sanitized
