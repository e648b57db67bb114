"""Módulo analysis: Resolución, clasificación, síntesis, decaimiento y estado de cables."""

from vigilante_cables.analysis.classifier import (
    DEFAULT_CLASSIFIER,
    ClassifierConfig,
    classify_warning,
    has_ship_name,
    is_cable_related,
    is_fault,
    is_on_station,
)
from vigilante_cables.analysis.decay import effective_signals, group_by_cable, recency_weight
from vigilante_cables.analysis.health import (
    classify_health_map,
    classify_status,
    compute_health_map,
    evaluate_cable,
    health_map_to_dict,
)
from vigilante_cables.analysis.resolver import find_nearest_cable, match_cable_by_name, resolve_cable
from vigilante_cables.analysis.signals import process_nga_signals, synthesize_signals

__all__ = [
    "DEFAULT_CLASSIFIER",
    "ClassifierConfig",
    "classify_health_map",
    "classify_status",
    "classify_warning",
    "compute_health_map",
    "effective_signals",
    "evaluate_cable",
    "find_nearest_cable",
    "group_by_cable",
    "has_ship_name",
    "health_map_to_dict",
    "is_cable_related",
    "is_fault",
    "is_on_station",
    "match_cable_by_name",
    "process_nga_signals",
    "recency_weight",
    "resolve_cable",
    "synthesize_signals",
]
