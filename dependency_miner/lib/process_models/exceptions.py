"""Exceptions for process models."""

from __future__ import annotations


class ProcessModelError(Exception):
    """Erro genérico na camada de modelos de processo."""


class RegistryError(ProcessModelError):
    """Spec de modelo inválida ou tipo de modelo não registrado."""
