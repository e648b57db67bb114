"""Resolución de avisos a cables: por nombre o por proximidad geométrica."""

import math
from typing import Iterable, Optional

import numpy as np

from vigilante_cables.core.constants import KM_PER_DEGREE, MAX_DISTANCE_DEG
from vigilante_cables.core.models import CableMatch, ParsedCoordinate, Resolution
from vigilante_cables.data.preprocessing import centroid, parse_coordinates
from vigilante_cables.data.registry import DEFAULT_REGISTRY, CableRegistry

JOIN_NAME = "name"
JOIN_GEOMETRY = "geometry"


def match_cable_by_name(text: str, registry: CableRegistry = DEFAULT_REGISTRY) -> Optional[str]:
    """Busca un alias conocido dentro del texto (sin distinguir mayúsculas).

    Gana el primer alias de la tabla que aparezca, no el de mayor severidad.

    Example:
        >>> match_cable_by_name("SMW6 maintenance window")
        'seamewe6'
        >>> match_cable_by_name("unknown cable system") is None
        True
    """
    upper = (text or "").upper()
    for name, cable_id in registry.aliases:
        if name in upper:
            return cable_id
    return None


def find_nearest_cable(
    lat: float,
    lon: float,
    registry: CableRegistry = DEFAULT_REGISTRY,
    max_distance_deg: float = MAX_DISTANCE_DEG,
) -> Optional[CableMatch]:
    """Cable con el aterrizaje más cercano, si está a menos de ``max_distance_deg``.

    Distancia euclidiana plana en grados, no geodésica.

    Args:
        lat: Latitud en grados decimales
        lon: Longitud en grados decimales
        registry: Registro de cables
        max_distance_deg: Radio máximo (exclusivo) en grados

    Returns:
        CableMatch o None si ningún aterrizaje queda dentro del radio

    Example:
        >>> find_nearest_cable(36.85, -75.98).cable_id
        'marea'
        >>> find_nearest_cable(-45, -140) is None
        True
    """
    points = registry.landing_points
    if points.size == 0:
        return None
    dist = np.hypot(points[:, 0] - lat, points[:, 1] - lon)
    # argmin devuelve el primer mínimo: empates se resuelven por orden de tabla
    idx = int(np.argmin(dist))
    best = float(dist[idx])
    if not best < max_distance_deg:
        return None
    return CableMatch(cable_id=registry.landing_ids[idx], distance_deg=best)


def resolve_cable(
    text: str,
    coords: Optional[Iterable[ParsedCoordinate]] = None,
    registry: CableRegistry = DEFAULT_REGISTRY,
) -> Optional[Resolution]:
    """Resuelve el cable de un aviso: nombre primero, luego centroide de coordenadas.

    Args:
        text: Texto del aviso
        coords: Coordenadas ya parseadas (si es None se extraen del texto)
        registry: Registro de cables

    Returns:
        Resolution o None si no hay coincidencia (el aviso se descarta)
    """
    cable_id = match_cable_by_name(text, registry)
    if cable_id:
        return Resolution(cable_id=cable_id, join_method=JOIN_NAME)

    pairs = list(coords) if coords is not None else list(parse_coordinates(text))
    center = centroid(pairs)
    if center is None:
        return None
    nearest = find_nearest_cable(center.latitude, center.longitude, registry)
    if nearest is None:
        return None
    return Resolution(
        cable_id=nearest.cable_id,
        join_method=JOIN_GEOMETRY,
        distance_km=int(math.floor(nearest.distance_deg * KM_PER_DEGREE + 0.5)),
        distance_deg=nearest.distance_deg,
    )
