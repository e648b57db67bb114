"""Preprocesamiento de texto de avisos: coordenadas y fechas de emisión."""

import re
from datetime import datetime, timezone
from typing import Iterator, Optional, Sequence

from vigilante_cables.core.models import ParsedCoordinate

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_DMS_RE = re.compile(
    r"(\d{1,3})-(\d{1,2}(?:\.\d+)?)\s*([NS])\s+(\d{1,3})-(\d{1,2}(?:\.\d+)?)\s*([EW])",
    re.IGNORECASE,
)
_ISSUE_DATE_RE = re.compile(r"(\d{2})(\d{4})Z\s+([A-Z]{3})\s+(\d{4})", re.IGNORECASE)
_MONTHS = {
    "JAN": 1,
    "FEB": 2,
    "MAR": 3,
    "APR": 4,
    "MAY": 5,
    "JUN": 6,
    "JUL": 7,
    "AUG": 8,
    "SEP": 9,
    "OCT": 10,
    "NOV": 11,
    "DEC": 12,
}


def parse_coordinates(text: str) -> Iterator[ParsedCoordinate]:
    """Extrae pares grados-minutos (ej: ``36-50N 075-58W``) del texto.

    Genera los pares en orden de aparición y en una sola pasada. Los pares
    fuera de [-90, 90] x [-180, 180] se descartan sin error.

    Args:
        text: Texto libre del aviso

    Yields:
        ParsedCoordinate en grados decimales

    Example:
        >>> [round(v, 2) for v in next(parse_coordinates("33-52S 151-13E"))]
        [-33.87, 151.22]
    """
    for m in _DMS_RE.finditer(text or ""):
        lat = int(m.group(1)) + float(m.group(2)) / 60.0
        lon = int(m.group(4)) + float(m.group(5)) / 60.0
        if m.group(3).upper() == "S":
            lat = -lat
        if m.group(6).upper() == "W":
            lon = -lon
        if -90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0:
            yield ParsedCoordinate(lat, lon)


def centroid(coords: Sequence[ParsedCoordinate]) -> Optional[ParsedCoordinate]:
    """Promedio simple de los pares; None si no hay coordenadas."""
    if not coords:
        return None
    lat = sum(c.latitude for c in coords) / len(coords)
    lon = sum(c.longitude for c in coords) / len(coords)
    return ParsedCoordinate(lat, lon)


def parse_issue_date(date_str: Optional[str]) -> datetime:
    """Parsea la fecha de emisión NGA ``DDHHMMZ MON YYYY`` (UTC).

    Cualquier fallo (texto vacío, formato, mes desconocido, fecha imposible)
    devuelve la época Unix: la señal resultante nace ya decaída.

    Args:
        date_str: Fecha del aviso, ej: "151200Z FEB 2026"

    Returns:
        datetime con tz UTC

    Example:
        >>> parse_issue_date("151200Z FEB 2026").isoformat()
        '2026-02-15T12:00:00+00:00'
        >>> parse_issue_date("garbage") == EPOCH
        True
    """
    m = _ISSUE_DATE_RE.search(date_str or "")
    if not m:
        return EPOCH
    month = _MONTHS.get(m.group(3).upper())
    if month is None:
        return EPOCH
    hhmm = m.group(2)
    try:
        return datetime(
            int(m.group(4)),
            month,
            int(m.group(1)),
            int(hhmm[:2]),
            int(hhmm[2:]),
            tzinfo=timezone.utc,
        )
    except ValueError:
        return EPOCH


def is_epoch(dt: datetime) -> bool:
    return dt == EPOCH


def to_iso(dt: datetime) -> str:
    """Formatea en ISO-8601 UTC con milisegundos y sufijo Z (orden lexicográfico = cronológico)."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def parse_iso(ts: str) -> datetime:
    """Parsea un timestamp ISO-8601; sin zona horaria se asume UTC."""
    value = ts.strip()
    if value.endswith("Z") or value.endswith("z"):
        value = value[:-1] + "+00:00"
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt
