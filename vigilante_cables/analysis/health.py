"""Clasificación de estado y mapa de salud por cable."""

import math
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from vigilante_cables.analysis.decay import effective_signals, group_by_cable
from vigilante_cables.core.models import (
    CableHealth,
    EffectiveSignal,
    EvidenceItem,
    HealthStatus,
    Signal,
    SignalKind,
    StatusRules,
)

DEFAULT_RULES = StatusRules()


def _round2(value: float) -> float:
    # redondeo half-up, igual que el contrato del dashboard
    return math.floor(value * 100.0 + 0.5) / 100.0


def classify_status(ranked: Sequence[EffectiveSignal], rules: StatusRules = DEFAULT_RULES) -> Tuple[HealthStatus, str]:
    """Aplica las reglas de umbral y corroboración sobre señales ordenadas.

    Reglas, en orden:
        1. top >= fault_score y hay operator_fault fuerte -> FAULT
        2. top >= fault_score y solo hay repair_activity fuerte -> DEGRADED (tope)
        3. top >= degraded_score -> DEGRADED
        4. resto -> OK

    Args:
        ranked: Señales efectivas ordenadas de mayor a menor
        rules: Umbrales

    Returns:
        Tupla (estado, regla aplicada)

    Example:
        >>> classify_status([])
        (<HealthStatus.OK: 'ok'>, 'empty')
    """
    if not ranked:
        return HealthStatus.OK, "empty"

    top = ranked[0].effective
    has_operator_fault = any(
        s.kind == SignalKind.OPERATOR_FAULT and s.effective >= rules.operator_fault_min for s in ranked
    )
    has_repair_activity = any(
        s.kind == SignalKind.REPAIR_ACTIVITY and s.effective >= rules.repair_activity_min for s in ranked
    )

    if top >= rules.fault_score and has_operator_fault:
        return HealthStatus.FAULT, "operator_fault"
    if top >= rules.fault_score and has_repair_activity:
        return HealthStatus.DEGRADED, "repair_cap"
    if top >= rules.degraded_score:
        return HealthStatus.DEGRADED, "score"
    return HealthStatus.OK, "none"


def top_evidence(ranked: Sequence[EffectiveSignal], cap: int = 3) -> List[EvidenceItem]:
    items: List[EvidenceItem] = []
    for s in ranked[:cap]:
        items.extend(s.signal.evidence)
    return items[:cap]


def evaluate_cable(
    signals: Iterable[Signal],
    now: datetime,
    rules: StatusRules = DEFAULT_RULES,
) -> Optional[CableHealth]:
    """Fusiona las señales de un cable; None si ninguna sobrevive al decaimiento."""
    ranked = effective_signals(signals, now)
    if not ranked:
        return None

    status, _ = classify_status(ranked, rules)
    head = ranked[0]
    return CableHealth(
        status=status,
        score=_round2(head.effective),
        confidence=_round2(head.signal.confidence * head.recency_weight),
        last_updated=max(s.ts for s in ranked),
        evidence=top_evidence(ranked, rules.evidence_cap),
    )


def compute_health_map(
    signals: Iterable[Signal],
    now: Optional[datetime] = None,
    rules: StatusRules = DEFAULT_RULES,
) -> Dict[str, CableHealth]:
    """Calcula el mapa de salud (disperso) para todas las señales.

    Se recalcula completo en cada llamada: no hay estado previo ni histéresis.
    Los cables sin señales vivas no aparecen en el resultado.

    Args:
        signals: Señales de todos los cables
        now: Instante de evaluación (por defecto, reloj UTC actual)
        rules: Umbrales del clasificador

    Returns:
        Diccionario cable_id -> CableHealth

    Example:
        >>> compute_health_map([])
        {}
    """
    if now is None:
        now = datetime.now(timezone.utc)

    health: Dict[str, CableHealth] = {}
    for cable_id, cable_signals in group_by_cable(signals).items():
        result = evaluate_cable(cable_signals, now, rules)
        if result is not None:
            health[cable_id] = result
    return health


def classify_health_map(
    signals: Iterable[Signal],
    now: Optional[datetime] = None,
    rules: StatusRules = DEFAULT_RULES,
) -> Dict[str, str]:
    """Regla de decisión aplicada por cable (para resúmenes y logs)."""
    if now is None:
        now = datetime.now(timezone.utc)
    rules_by_cable: Dict[str, str] = {}
    for cable_id, cable_signals in group_by_cable(signals).items():
        ranked = effective_signals(cable_signals, now)
        if ranked:
            rules_by_cable[cable_id] = classify_status(ranked, rules)[1]
    return rules_by_cable


def health_map_to_dict(health: Dict[str, CableHealth]) -> Dict[str, Dict]:
    return {cable_id: h.to_dict() for cable_id, h in health.items()}
