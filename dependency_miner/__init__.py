"""Mineração de dependências comportamentais em logs de eventos."""

__version__ = "0.1.0"
