"""Exceptions for dependency analysis."""

from __future__ import annotations


class DependencyError(Exception):
    """Erro genérico na análise de dependências."""


class InvalidThresholdError(DependencyError, ValueError):
    """Lançada quando o limiar de ruído está fora do intervalo [0, 1]."""


class UnknownActivityError(DependencyError, KeyError):
    """Atividade consultada não pertence ao alfabeto da matriz."""
