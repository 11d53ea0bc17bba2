from __future__ import annotations

from typing import Any

from dependency_miner.lib.event_log.traces import TraceStore


class BaseProcessModel:
    """
    Classe base abstrata para modelos de processo.

    Um modelo de processo aceita um :class:`TraceStore` (traces ordenados por
    case) e retorna uma representação de modelo por meio do método
    :meth:`compute`.

    Subclasses devem sobrescrever os métodos :meth:`compute` e
    :meth:`quality_metrics`.
    """

    def compute(self, log: TraceStore) -> Any:
        """
        Materializa o modelo a partir dos traces do log.

        :param log: traces já normalizados.
        :returns: Objeto representando o modelo de processo.
        :raises NotImplementedError: se não implementado em subclasses.
        """
        raise NotImplementedError("Subclasses devem implementar compute()")

    def quality_metrics(
        self, log: TraceStore, model: Any
    ) -> dict[str, float | None]:
        """
        Calcula métricas associadas ao modelo de processo gerado.

        Cada métrica deve mapear para um valor numérico (ou ``None`` quando não
        aplicável).

        :param log: traces utilizados na geração do modelo.
        :param model: Modelo previamente retornado por :meth:`compute`.
        :returns: Dicionário contendo métricas do modelo.
        :raises NotImplementedError: se não implementado em subclasses.
        """
        raise NotImplementedError(
            "Subclasses devem implementar quality_metrics()"
        )
