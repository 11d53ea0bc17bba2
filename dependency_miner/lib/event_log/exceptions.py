"""Exceções do pacote event_log."""

from __future__ import annotations


class EventLogError(Exception):
    """Erro genérico ao normalizar um log de eventos."""


class MissingColumnsError(EventLogError):
    """Lançada quando o DataFrame não contém as colunas exigidas."""
