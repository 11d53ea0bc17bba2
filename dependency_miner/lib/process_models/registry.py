"""Catálogo de modelos de processo e construção a partir de specs declarativas.

Uma spec é um mapeamento ``{"type": <nome>, "args": {...}}``; ``args`` é
opcional. Os argumentos são conferidos contra a assinatura do construtor do
modelo antes da instanciação, de modo que argumentos desconhecidos ou
ausentes resultam em :class:`RegistryError`. Erros de validação do próprio
modelo (por exemplo ``InvalidThresholdError``) são propagados sem alteração.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from typing import Any

from dependency_miner.lib.process_models.base import BaseProcessModel
from dependency_miner.lib.process_models.dependency_matrix import (
    DependencyMatrixModel,
)
from dependency_miner.lib.process_models.exceptions import RegistryError
from dependency_miner.lib.process_models.prefix_automaton import (
    PrefixAutomatonModel,
)

LOGGER = logging.getLogger(__name__)

MODEL_REGISTRY: dict[str, type[BaseProcessModel]] = {
    "dependency_matrix": DependencyMatrixModel,
    "prefix_automaton": PrefixAutomatonModel,
}


def _model_key(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise RegistryError(f"Nome de modelo inválido: {name!r}")
    return name.strip().lower()


def register_model(name: str, cls: type[BaseProcessModel]) -> None:
    """Registra ``cls`` sob ``name`` (sem distinção de maiúsculas)."""
    key = _model_key(name)
    if not isinstance(cls, type) or not issubclass(cls, BaseProcessModel):
        raise RegistryError("Classe deve herdar de BaseProcessModel")
    if key in MODEL_REGISTRY and MODEL_REGISTRY[key] is not cls:
        LOGGER.debug("Substituindo modelo registrado '%s' por %s", key, cls.__name__)
    MODEL_REGISTRY[key] = cls


def model_names() -> list[str]:
    return sorted(MODEL_REGISTRY)


def _check_arguments(cls: type[BaseProcessModel], args: Mapping[Any, Any]) -> None:
    try:
        signature = inspect.signature(cls)
    except (TypeError, ValueError):  # pragma: no cover - dynamic callables
        return
    try:
        signature.bind(**args)
    except TypeError as exc:
        raise RegistryError(
            f"Argumentos inválidos para o modelo {cls.__name__}: {exc}"
        ) from exc


def build_model_from_spec(
    spec: Mapping[str, Any],
    *,
    registry: Mapping[str, type[BaseProcessModel]] | None = None,
) -> BaseProcessModel:
    """Instancia o modelo descrito por ``spec``.

    :raises RegistryError: spec malformada, tipo não registrado ou argumentos
        incompatíveis com o construtor do modelo.
    """
    if not isinstance(spec, Mapping):
        raise RegistryError("Spec inválida: esperado um mapeamento")

    catalog = MODEL_REGISTRY if registry is None else registry
    key = _model_key(spec.get("type"))
    cls = catalog.get(key)
    if cls is None:
        available = ", ".join(sorted(catalog)) or "nenhum"
        raise RegistryError(
            f"Modelo não suportado: {spec.get('type')} (disponíveis: {available})"
        )

    args = spec.get("args")
    if args is None:
        args = {}
    if not isinstance(args, Mapping):
        raise RegistryError("Spec inválida: 'args' deve ser um dict")

    _check_arguments(cls, args)
    model = cls(**args)
    LOGGER.debug("Modelo '%s' construído com args=%s", key, dict(args))
    return model
