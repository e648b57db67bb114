"""Clasificación de avisos: relación con cables, falla, buque cablero en zona."""

import re
from dataclasses import dataclass, field
from typing import Pattern, Sequence, Tuple

from vigilante_cables.core.constants import (
    CABLE_KEYWORDS,
    FAULT_PATTERN,
    ON_STATION_PATTERN,
    SHIP_PATTERNS,
)


@dataclass(frozen=True)
class ClassifierConfig:
    """Tabla de configuración del clasificador.

    Attributes:
        keywords: Palabras clave que marcan un aviso como relacionado con cables
        fault_pattern: Regex de falla/daño
        ship_patterns: Regex de nombres de buques cableros
        on_station_pattern: Regex de buque operando en posición
    """

    keywords: Tuple[str, ...] = CABLE_KEYWORDS
    fault_pattern: str = FAULT_PATTERN
    ship_patterns: Tuple[str, ...] = SHIP_PATTERNS
    on_station_pattern: str = ON_STATION_PATTERN
    _fault_re: Pattern = field(init=False, repr=False, compare=False)
    _ship_res: Tuple[Pattern, ...] = field(init=False, repr=False, compare=False)
    _on_station_re: Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "keywords", tuple(kw.upper() for kw in self.keywords))
        object.__setattr__(self, "_fault_re", re.compile(self.fault_pattern, re.IGNORECASE))
        object.__setattr__(self, "_ship_res", tuple(re.compile(p, re.IGNORECASE) for p in self.ship_patterns))
        object.__setattr__(self, "_on_station_re", re.compile(self.on_station_pattern, re.IGNORECASE))

    @classmethod
    def extended(
        cls,
        keywords: Sequence[str] = (),
        ship_patterns: Sequence[str] = (),
    ) -> "ClassifierConfig":
        """Config por defecto más palabras clave / patrones adicionales."""
        return cls(
            keywords=CABLE_KEYWORDS + tuple(keywords),
            ship_patterns=SHIP_PATTERNS + tuple(ship_patterns),
        )


DEFAULT_CLASSIFIER = ClassifierConfig()


@dataclass(frozen=True)
class WarningClass:
    """Resultado de clasificar el texto de un aviso."""

    cable_related: bool
    fault: bool
    repair_ship: bool
    on_station: bool


def is_cable_related(text: str, config: ClassifierConfig = DEFAULT_CLASSIFIER) -> bool:
    """True si el texto contiene alguna palabra clave de cables.

    Example:
        >>> is_cable_related("fiber optic maintenance")
        True
        >>> is_cable_related("pipeline inspection")
        False
    """
    upper = (text or "").upper()
    return any(kw in upper for kw in config.keywords)


def is_fault(text: str, config: ClassifierConfig = DEFAULT_CLASSIFIER) -> bool:
    return bool(config._fault_re.search(text or ""))


def has_ship_name(text: str, config: ClassifierConfig = DEFAULT_CLASSIFIER) -> bool:
    return any(p.search(text or "") for p in config._ship_res)


def is_on_station(text: str, config: ClassifierConfig = DEFAULT_CLASSIFIER) -> bool:
    return bool(config._on_station_re.search(text or ""))


def classify_warning(text: str, config: ClassifierConfig = DEFAULT_CLASSIFIER) -> WarningClass:
    """Aplica todos los clasificadores sobre el texto."""
    return WarningClass(
        cable_related=is_cable_related(text, config),
        fault=is_fault(text, config),
        repair_ship=has_ship_name(text, config),
        on_station=is_on_station(text, config),
    )
