"""Módulo cli: Argumentos de línea de comandos."""

from vigilante_cables.cli.parser import parse_args

__all__ = ["parse_args"]
