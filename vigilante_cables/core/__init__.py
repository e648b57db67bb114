"""Módulo core: Modelos de datos y constantes globales."""

from vigilante_cables.core.models import (
    CableAsset,
    CableHealth,
    EffectiveSignal,
    EvidenceItem,
    HealthStatus,
    NavWarning,
    ParsedCoordinate,
    Signal,
    SignalKind,
    StatusRules,
    SynthesisStats,
)

__all__ = [
    "CableAsset",
    "CableHealth",
    "EffectiveSignal",
    "EvidenceItem",
    "HealthStatus",
    "NavWarning",
    "ParsedCoordinate",
    "Signal",
    "SignalKind",
    "StatusRules",
    "SynthesisStats",
]
