"""Exceptions for the extended prefix automaton."""

from __future__ import annotations


class AutomatonError(Exception):
    """Erro genérico na construção ou consulta do autômato."""


class UnknownStateError(AutomatonError, KeyError):
    """Estado consultado não existe no autômato."""
