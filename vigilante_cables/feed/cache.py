"""Caché en memoria con TTL, carga única concurrente y ventana negativa."""

import logging
import threading
import time
from typing import Callable, Generic, Optional, Tuple, TypeVar

from vigilante_cables.core.constants import DEFAULT_CACHE_TTL, DEFAULT_NEGATIVE_TTL

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UpstreamUnavailable(RuntimeError):
    """El upstream falló recientemente y se está dentro de la ventana negativa."""


class SignalCache(Generic[T]):
    """Caché explícito para el resultado de un loader costoso.

    - Mientras el valor es fresco (< ``ttl_seconds``) se devuelve sin llamar al loader.
    - Las llamadas concurrentes comparten una única carga en curso.
    - Si el loader falla se abre una ventana negativa de ``negative_ttl_seconds``
      durante la cual ``get`` lanza :class:`UpstreamUnavailable` sin reintentar.

    Se guarda la lista de señales, no el mapa de salud: el mapa se recalcula
    en cada consulta y las señales envejecen entre evaluaciones.

    Example:
        >>> cache = SignalCache(lambda: [1, 2, 3], ttl_seconds=60)
        >>> cache.get()
        [1, 2, 3]
        >>> cache.is_fresh
        True
    """

    def __init__(
        self,
        loader: Callable[[], T],
        ttl_seconds: float = DEFAULT_CACHE_TTL,
        negative_ttl_seconds: float = DEFAULT_NEGATIVE_TTL,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._loader = loader
        self.ttl_seconds = float(ttl_seconds)
        self.negative_ttl_seconds = float(negative_ttl_seconds)
        self._clock = clock
        self._lock = threading.Lock()
        self.init()

    def init(self) -> None:
        """Estado inicial: sin valor, sin ventana negativa."""
        # (valor, instante de carga): se reemplaza completo, nunca campo a campo
        self._entry: Optional[Tuple[T, float]] = None
        self._neg_until = 0.0

    def invalidate(self) -> None:
        """Descarta el valor y la ventana negativa; la próxima ``get`` recarga."""
        with self._lock:
            self.init()
        logger.info("Caché de señales invalidado")

    def _fresh_entry(self) -> Optional[Tuple[T, float]]:
        entry = self._entry
        if entry is not None and self._clock() - entry[1] < self.ttl_seconds:
            return entry
        return None

    @property
    def age_seconds(self) -> Optional[float]:
        entry = self._entry
        if entry is None:
            return None
        return self._clock() - entry[1]

    @property
    def is_fresh(self) -> bool:
        return self._fresh_entry() is not None

    def get(self) -> T:
        entry = self._fresh_entry()
        if entry is not None:
            return entry[0]

        with self._lock:
            # otro hilo pudo completar la carga mientras esperábamos
            entry = self._fresh_entry()
            if entry is not None:
                return entry[0]
            if self._clock() < self._neg_until:
                raise UpstreamUnavailable("Upstream de avisos temporalmente no disponible")
            try:
                value = self._loader()
            except Exception:
                self._neg_until = self._clock() + self.negative_ttl_seconds
                logger.exception(f"Fallo cargando señales; ventana negativa de {self.negative_ttl_seconds:.0f}s")
                raise
            self._entry = (value, self._clock())
            return value
