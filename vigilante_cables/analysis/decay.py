"""Decaimiento temporal y ranking de señales por cable."""

from datetime import datetime, timezone
from typing import Dict, Iterable, List

from vigilante_cables.core.models import EffectiveSignal, Signal
from vigilante_cables.data.preprocessing import parse_iso


def recency_weight(age_seconds: float, ttl_seconds: float) -> float:
    """Peso lineal ``clamp(1 - age/ttl, 0, 1)``; exactamente 0 cuando age >= ttl.

    Example:
        >>> recency_weight(0, 100)
        1.0
        >>> recency_weight(50, 100)
        0.5
        >>> recency_weight(150, 100)
        0.0
    """
    if ttl_seconds <= 0:
        return 0.0
    age = max(0.0, float(age_seconds))
    return max(0.0, min(1.0, 1.0 - age / float(ttl_seconds)))


def group_by_cable(signals: Iterable[Signal]) -> Dict[str, List[Signal]]:
    by_cable: Dict[str, List[Signal]] = {}
    for sig in signals:
        by_cable.setdefault(sig.cable_id, []).append(sig)
    return by_cable


def effective_signals(signals: Iterable[Signal], now: datetime) -> List[EffectiveSignal]:
    """Evalúa las señales respecto a ``now`` y las ordena por efectivo descendente.

    Las señales totalmente decaídas (peso <= 0) o con ts ilegible se descartan. El orden es
    estable: a igual efectivo se mantiene el orden de entrada.

    Args:
        signals: Señales de un cable
        now: Instante de evaluación (con tz)

    Returns:
        Lista de EffectiveSignal sobrevivientes
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    survivors: List[EffectiveSignal] = []
    for sig in signals:
        try:
            issued = parse_iso(sig.ts)
        except ValueError:
            # ts ilegible: se trata como señal ya decaída
            continue
        age_sec = max(0.0, (now - issued).total_seconds())
        weight = recency_weight(age_sec, sig.ttl_seconds)
        if weight <= 0:
            continue
        effective = sig.severity * sig.confidence * weight
        survivors.append(EffectiveSignal(signal=sig, effective=effective, recency_weight=weight))
    survivors.sort(key=lambda s: s.effective, reverse=True)
    return survivors
