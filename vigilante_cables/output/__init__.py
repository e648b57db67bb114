"""Módulo output: Renderizado de consola y formateo."""

from vigilante_cables.output.console import print_health_console
from vigilante_cables.output.formatters import format_number, format_timestamp, truncate

__all__ = ["format_number", "format_timestamp", "print_health_console", "truncate"]
