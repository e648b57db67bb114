"""
Vigilante Cables - Monitor de salud de cables submarinos.

Convierte avisos de seguridad marítima (NGA) en señales tipadas con
decaimiento temporal, las atribuye a cables conocidos y clasifica el estado
de cada cable (ok / degraded / fault).
"""

__version__ = "1.0.0"
__author__ = "Vigilante Cables Team"

from vigilante_cables.analysis import compute_health_map, process_nga_signals, synthesize_signals
from vigilante_cables.core.models import CableHealth, HealthStatus, Signal, SignalKind

__all__ = [
    "CableHealth",
    "HealthStatus",
    "Signal",
    "SignalKind",
    "compute_health_map",
    "process_nga_signals",
    "synthesize_signals",
    "__version__",
]
