"""Modelos de datos para el motor de salud de cables submarinos."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional, Tuple


class SignalKind(str, Enum):
    """Tipo de señal sintetizada a partir de un aviso."""

    OPERATOR_FAULT = "operator_fault"
    REPAIR_ACTIVITY = "repair_activity"


class HealthStatus(str, Enum):
    """Estado final de un cable."""

    OK = "ok"
    DEGRADED = "degraded"
    FAULT = "fault"


class ParsedCoordinate(NamedTuple):
    """Par (lat, lon) en grados decimales."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class NavWarning:
    """Aviso de seguridad marítima tal como llega del feed NGA.

    Attributes:
        text: Texto libre del aviso
        issue_date: Fecha de emisión (formato DDHHMMZ MON YYYY)
        nav_area: Área NAVAREA
        msg_year: Año del mensaje
        msg_number: Número del mensaje
    """

    text: str = ""
    issue_date: str = ""
    nav_area: str = ""
    msg_year: str = ""
    msg_number: str = ""

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "NavWarning":
        def _s(key: str) -> str:
            value = payload.get(key)
            return "" if value is None else str(value)

        return cls(
            text=_s("text"),
            issue_date=_s("issueDate"),
            nav_area=_s("navArea"),
            msg_year=_s("msgYear"),
            msg_number=_s("msgNumber"),
        )

    @property
    def warning_id(self) -> str:
        return f"{self.nav_area or 'X'}-{self.msg_year}-{self.msg_number}"


@dataclass(frozen=True)
class CableAsset:
    """Cable conocido del registro estático.

    Attributes:
        cable_id: Identificador estable (ej: "marea")
        aliases: Nombres que lo identifican en texto libre
        landing_points: Puntos de aterrizaje (lat, lon)
    """

    cable_id: str
    aliases: Tuple[str, ...] = ()
    landing_points: Tuple[Tuple[float, float], ...] = ()


@dataclass(frozen=True)
class CableMatch:
    """Resultado de emparejamiento geométrico."""

    cable_id: str
    distance_deg: float


@dataclass(frozen=True)
class EvidenceItem:
    """Evidencia trazable de una señal."""

    source: str
    summary: str
    ts: str
    meta: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"source": self.source, "summary": self.summary, "ts": self.ts, "meta": dict(self.meta)}


@dataclass(frozen=True)
class Signal:
    """Señal tipada con severidad, confianza y TTL.

    Attributes:
        cable_id: Cable al que se atribuye la señal
        ts: Timestamp ISO-8601 del aviso origen
        severity: Severidad 0-1
        confidence: Confianza 0-1
        ttl_seconds: Edad a la cual la señal decae a cero
        kind: Tipo de señal
        evidence: Evidencias asociadas

    Raises:
        ValueError: Si severity o confidence quedan fuera de [0, 1]
    """

    cable_id: str
    ts: str
    severity: float
    confidence: float
    ttl_seconds: int
    kind: SignalKind
    evidence: Tuple[EvidenceItem, ...] = ()

    def __post_init__(self) -> None:
        for name in ("severity", "confidence"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} fuera de [0, 1]: {value!r}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cableId": self.cable_id,
            "ts": self.ts,
            "severity": self.severity,
            "confidence": self.confidence,
            "ttlSeconds": self.ttl_seconds,
            "kind": self.kind.value,
            "evidence": [e.to_dict() for e in self.evidence],
        }


@dataclass(frozen=True)
class EffectiveSignal:
    """Señal evaluada respecto a "ahora" (nunca se persiste)."""

    signal: Signal
    effective: float
    recency_weight: float

    @property
    def kind(self) -> SignalKind:
        return self.signal.kind

    @property
    def ts(self) -> str:
        return self.signal.ts


@dataclass(frozen=True)
class CableHealth:
    """Salud fusionada de un cable.

    Attributes:
        status: ok / degraded / fault
        score: Puntaje efectivo máximo (2 decimales)
        confidence: Confianza de la señal principal, con decaimiento (2 decimales)
        last_updated: Timestamp ISO-8601 más reciente entre las señales vivas
        evidence: Hasta 3 evidencias de las señales más fuertes
    """

    status: HealthStatus
    score: float
    confidence: float
    last_updated: str
    evidence: List[EvidenceItem] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "score": self.score,
            "confidence": self.confidence,
            "lastUpdated": self.last_updated,
            "evidence": [e.to_dict() for e in self.evidence],
        }


@dataclass
class SynthesisStats:
    """Contadores de la síntesis de señales (observabilidad)."""

    warnings_total: int = 0
    cable_related: int = 0
    unresolved: int = 0
    unparseable_dates: int = 0
    signals: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "warningsTotal": self.warnings_total,
            "cableRelated": self.cable_related,
            "unresolved": self.unresolved,
            "unparseableDates": self.unparseable_dates,
            "signals": self.signals,
        }


@dataclass(frozen=True)
class StatusRules:
    """Umbrales del clasificador de estado.

    Attributes:
        fault_score: Puntaje mínimo para fault (requiere operator_fault)
        degraded_score: Puntaje mínimo para degraded
        operator_fault_min: Efectivo mínimo para contar un operator_fault
        repair_activity_min: Efectivo mínimo para contar un repair_activity
        evidence_cap: Máximo de evidencias por cable
    """

    fault_score: float = 0.80
    degraded_score: float = 0.50
    operator_fault_min: float = 0.50
    repair_activity_min: float = 0.40
    evidence_cap: int = 3


@dataclass(frozen=True)
class Resolution:
    """Cable resuelto para un aviso y método de unión usado."""

    cable_id: str
    join_method: str
    distance_km: int = 0
    distance_deg: Optional[float] = None
