from .base import BaseProcessModel
from .dependency_matrix import DependencyMatrixModel
from .exceptions import ProcessModelError, RegistryError
from .prefix_automaton import PrefixAutomatonModel
from .registry import (
    MODEL_REGISTRY,
    build_model_from_spec,
    model_names,
    register_model,
)
from .view import ProcessModelView

__all__ = [
    "BaseProcessModel",
    "DependencyMatrixModel",
    "PrefixAutomatonModel",
    "ProcessModelView",
    "ProcessModelError",
    "RegistryError",
    "MODEL_REGISTRY",
    "register_model",
    "model_names",
    "build_model_from_spec",
]
