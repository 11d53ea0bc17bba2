"""Descoberta de dependências temporais e existenciais entre atividades.

Este módulo reexporta a API pública distribuída nos submódulos de
`dependency_miner.lib.dependencies`.
"""

from __future__ import annotations

# Exceptions
from dependency_miner.lib.dependencies.exceptions import (
    DependencyError,
    InvalidThresholdError,
    UnknownActivityError,
)

# Existential analyzer
from dependency_miner.lib.dependencies.existential import (
    check_existential_dependency,
    has_implication,
    has_negated_equivalence,
)

# Matrix
from dependency_miner.lib.dependencies.matrix import (
    DependencyMatrix,
    MatrixStatistics,
    build_dependency_matrix,
)

# Data models
from dependency_miner.lib.dependencies.models import (
    Dependency,
    Direction,
    ExistentialDependency,
    ExistentialType,
    TemporalDependency,
    TemporalType,
)

# Temporal analyzer
from dependency_miner.lib.dependencies.temporal import (
    check_temporal_dependency,
    classify_positions,
)
from dependency_miner.lib.dependencies.threshold import Threshold

__all__ = [
    "DependencyError",
    "InvalidThresholdError",
    "UnknownActivityError",
    "Direction",
    "TemporalType",
    "ExistentialType",
    "TemporalDependency",
    "ExistentialDependency",
    "Dependency",
    "Threshold",
    "check_temporal_dependency",
    "classify_positions",
    "check_existential_dependency",
    "has_implication",
    "has_negated_equivalence",
    "DependencyMatrix",
    "MatrixStatistics",
    "build_dependency_matrix",
]
