"""Módulo data: Carga de avisos, preprocesamiento de texto y registro de cables."""

from vigilante_cables.data.loaders import load_warnings_file, warnings_from_payload
from vigilante_cables.data.preprocessing import parse_coordinates, parse_issue_date
from vigilante_cables.data.registry import DEFAULT_REGISTRY, CableRegistry

__all__ = [
    "CableRegistry",
    "DEFAULT_REGISTRY",
    "load_warnings_file",
    "parse_coordinates",
    "parse_issue_date",
    "warnings_from_payload",
]
