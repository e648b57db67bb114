"""Síntesis de señales tipadas a partir de avisos NGA."""

import logging
from typing import Any, Iterable, List, Mapping, Tuple, Union

from vigilante_cables.analysis.classifier import DEFAULT_CLASSIFIER, ClassifierConfig, classify_warning
from vigilante_cables.analysis.resolver import JOIN_NAME, resolve_cable
from vigilante_cables.core.constants import (
    ADVISORY_TTL_SECONDS,
    EVIDENCE_SOURCE,
    FAULT_TTL_SECONDS,
    REPAIR_ENROUTE_TTL_SECONDS,
    REPAIR_ON_STATION_TTL_SECONDS,
    SUMMARY_MAX_CHARS,
)
from vigilante_cables.core.models import (
    EvidenceItem,
    NavWarning,
    Resolution,
    Signal,
    SignalKind,
    SynthesisStats,
)
from vigilante_cables.data.preprocessing import is_epoch, parse_coordinates, parse_issue_date, to_iso
from vigilante_cables.data.registry import DEFAULT_REGISTRY, CableRegistry

logger = logging.getLogger(__name__)

WarningLike = Union[NavWarning, Mapping[str, Any]]


def _as_warning(item: WarningLike) -> NavWarning:
    if isinstance(item, NavWarning):
        return item
    return NavWarning.from_dict(item)


def summarize_text(text: str, max_chars: int = SUMMARY_MAX_CHARS) -> str:
    return text[:max_chars] + ("..." if len(text) > max_chars else "")


def fault_confidence(resolution: Resolution, fault: bool) -> float:
    """Confianza según método de unión: alta por nombre, decreciente con la distancia."""
    if fault:
        if resolution.join_method == JOIN_NAME:
            return 0.9
        return max(0.4, 0.8 - resolution.distance_km / 500.0)
    # aviso sin falla
    if resolution.join_method == JOIN_NAME:
        return 0.8
    return max(0.3, 0.7 - resolution.distance_km / 500.0)


def build_warning_signals(
    warning: NavWarning,
    ts: str,
    resolution: Resolution,
    config: ClassifierConfig = DEFAULT_CLASSIFIER,
) -> List[Signal]:
    """Construye la señal de falla/aviso y, si aplica, la de actividad de reparación.

    Args:
        warning: Aviso origen
        ts: Timestamp ISO-8601 de emisión
        resolution: Cable resuelto y método de unión
        config: Tabla del clasificador

    Returns:
        Lista con una o dos señales
    """
    text = warning.text
    klass = classify_warning(text, config)
    summary = summarize_text(text)
    signals: List[Signal] = []

    meta = {
        "warningId": warning.warning_id,
        "joinMethod": resolution.join_method,
        "distanceKm": resolution.distance_km,
    }
    if klass.fault:
        signals.append(
            Signal(
                cable_id=resolution.cable_id,
                ts=ts,
                severity=1.0,
                confidence=fault_confidence(resolution, fault=True),
                ttl_seconds=FAULT_TTL_SECONDS,
                kind=SignalKind.OPERATOR_FAULT,
                evidence=(EvidenceItem(EVIDENCE_SOURCE, f"Fault/damage reported: {summary}", ts, meta),),
            )
        )
    else:
        signals.append(
            Signal(
                cable_id=resolution.cable_id,
                ts=ts,
                severity=0.6,
                confidence=fault_confidence(resolution, fault=False),
                ttl_seconds=ADVISORY_TTL_SECONDS,
                kind=SignalKind.OPERATOR_FAULT,
                evidence=(EvidenceItem(EVIDENCE_SOURCE, f"Cable advisory: {summary}", ts, meta),),
            )
        )

    if klass.repair_ship:
        on_station = klass.on_station
        label = (
            f"Cable repair vessel on station: {summary}" if on_station else f"Cable ship in area: {summary}"
        )
        signals.append(
            Signal(
                cable_id=resolution.cable_id,
                ts=ts,
                severity=0.8 if on_station else 0.5,
                confidence=0.85 if on_station else 0.6,
                ttl_seconds=REPAIR_ON_STATION_TTL_SECONDS if on_station else REPAIR_ENROUTE_TTL_SECONDS,
                kind=SignalKind.REPAIR_ACTIVITY,
                evidence=(
                    EvidenceItem(
                        EVIDENCE_SOURCE,
                        label,
                        ts,
                        {
                            "warningId": warning.warning_id,
                            "joinMethod": resolution.join_method,
                            "status": "on-station" if on_station else "enroute",
                        },
                    ),
                ),
            )
        )
    return signals


def synthesize_signals(
    warnings: Iterable[WarningLike],
    registry: CableRegistry = DEFAULT_REGISTRY,
    config: ClassifierConfig = DEFAULT_CLASSIFIER,
) -> Tuple[List[Signal], SynthesisStats]:
    """Convierte avisos en señales y devuelve contadores de la pasada.

    Avisos no relacionados con cables o sin cable resuelto se omiten sin error.
    Las fechas no parseables se convierten en la época Unix (la señal nace
    decaída) y se cuentan en ``stats.unparseable_dates``.

    Args:
        warnings: Avisos (NavWarning o dicts del feed)
        registry: Registro de cables
        config: Tabla del clasificador

    Returns:
        Tupla (señales, estadísticas)
    """
    stats = SynthesisStats()
    signals: List[Signal] = []

    for item in warnings:
        stats.warnings_total += 1
        warning = _as_warning(item)
        text = warning.text
        if not classify_warning(text, config).cable_related:
            continue
        stats.cable_related += 1

        issued = parse_issue_date(warning.issue_date)
        if is_epoch(issued):
            stats.unparseable_dates += 1
        ts = to_iso(issued)

        resolution = resolve_cable(text, list(parse_coordinates(text)), registry)
        if resolution is None:
            stats.unresolved += 1
            continue

        signals.extend(build_warning_signals(warning, ts, resolution, config))

    stats.signals = len(signals)
    if stats.unparseable_dates:
        logger.warning(f"{stats.unparseable_dates} avisos de cable con issueDate no parseable (decaen de inmediato)")
    if stats.unresolved:
        logger.info(f"{stats.unresolved} avisos de cable sin cable resuelto")
    logger.debug(f"Síntesis: {stats.to_dict()}")
    return signals, stats


def process_nga_signals(
    warnings: Iterable[WarningLike],
    registry: CableRegistry = DEFAULT_REGISTRY,
    config: ClassifierConfig = DEFAULT_CLASSIFIER,
) -> List[Signal]:
    """Igual que :func:`synthesize_signals` pero solo devuelve las señales."""
    signals, _ = synthesize_signals(warnings, registry, config)
    return signals
