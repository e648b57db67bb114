"""Registro estático de cables submarinos conocidos."""

from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from vigilante_cables.core.constants import CABLE_LANDINGS, CABLE_NAME_MAP
from vigilante_cables.core.models import CableAsset


class CableRegistry:
    """Registro de solo lectura: alias por nombre y matriz de aterrizajes.

    La tabla de alias conserva el orden de inserción (desempate del
    emparejamiento por nombre). Los aterrizajes se guardan como matriz
    ``(n, 2)`` para la búsqueda vectorizada por proximidad.
    """

    def __init__(self, name_map: Mapping[str, str], landings: Mapping[str, Sequence[Tuple[float, float]]]):
        self._aliases: Tuple[Tuple[str, str], ...] = tuple((name.upper(), cid) for name, cid in name_map.items())

        by_cable: Dict[str, List[str]] = {}
        for name, cid in self._aliases:
            by_cable.setdefault(cid, []).append(name)

        assets: Dict[str, CableAsset] = {}
        for cid in list(landings) + [c for c in by_cable if c not in landings]:
            assets[cid] = CableAsset(
                cable_id=cid,
                aliases=tuple(by_cable.get(cid, [])),
                landing_points=tuple((float(lat), float(lon)) for lat, lon in landings.get(cid, [])),
            )
        self._assets = assets

        ids: List[str] = []
        points: List[Tuple[float, float]] = []
        for cid, pts in landings.items():
            for lat, lon in pts:
                ids.append(cid)
                points.append((float(lat), float(lon)))
        self._landing_ids: Tuple[str, ...] = tuple(ids)
        self._landing_points = np.array(points, dtype=float).reshape(-1, 2)
        self._landing_points.setflags(write=False)

    @property
    def aliases(self) -> Tuple[Tuple[str, str], ...]:
        return self._aliases

    @property
    def assets(self) -> Tuple[CableAsset, ...]:
        return tuple(self._assets.values())

    @property
    def landing_ids(self) -> Tuple[str, ...]:
        return self._landing_ids

    @property
    def landing_points(self) -> np.ndarray:
        return self._landing_points

    def get(self, cable_id: str) -> Optional[CableAsset]:
        return self._assets.get(cable_id)

    def __contains__(self, cable_id: object) -> bool:
        return cable_id in self._assets

    def __len__(self) -> int:
        return len(self._assets)


def build_default_registry() -> CableRegistry:
    return CableRegistry(CABLE_NAME_MAP, CABLE_LANDINGS)


DEFAULT_REGISTRY = build_default_registry()
