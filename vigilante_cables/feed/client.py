"""Cliente HTTP del feed de avisos de navegación NGA."""

import logging
import time
from typing import Any, Dict, List, Optional

import requests

from vigilante_cables.core.constants import DEFAULT_NGA_RETRIES, DEFAULT_NGA_TIMEOUT, DEFAULT_NGA_URL

logger = logging.getLogger(__name__)

USER_AGENT = "vigilante-cables/1.0"


def fetch_nga_warnings(
    url: str = DEFAULT_NGA_URL,
    timeout: float = DEFAULT_NGA_TIMEOUT,
    retries: int = DEFAULT_NGA_RETRIES,
    retry_backoff: float = 2.0,
    session: Optional[requests.Session] = None,
) -> List[Dict[str, Any]]:
    """Descarga los avisos activos del feed NGA con reintentos.

    Nunca lanza: ante HTTP no exitoso, error de red o JSON inválido tras el
    último intento devuelve una lista vacía (el mapa de salud queda vacío).

    Args:
        url: Endpoint del feed
        timeout: Timeout por intento en segundos
        retries: Número total de intentos
        retry_backoff: Factor de backoff exponencial entre intentos
        session: Sesión requests opcional (reutilización de conexiones, tests)

    Returns:
        Lista de avisos como diccionarios crudos

    Example:
        >>> warnings = fetch_nga_warnings(timeout=5.0, retries=1)  # doctest: +SKIP
    """
    http = session or requests
    attempts = max(1, retries)
    for attempt in range(1, attempts + 1):
        try:
            resp = http.get(url, timeout=timeout, headers={"Accept": "application/json", "User-Agent": USER_AGENT})
            if not resp.ok:
                logger.warning(f"NGA respondió HTTP {resp.status_code}")
                return []
            data = resp.json()
            if isinstance(data, list):
                return data
            if isinstance(data, dict) and isinstance(data.get("warnings"), list):
                return data["warnings"]
            return []
        except (requests.RequestException, ValueError) as e:
            if attempt >= attempts:
                logger.warning(f"Fallo al consultar NGA tras {attempts} intentos: {e!r}")
                return []
            sleep_s = max(0.1, retry_backoff ** (attempt - 1))
            logger.info(f"NGA retry {attempt}/{attempts} tras error: {e!r}; esperando {sleep_s:.2f}s...")
            time.sleep(sleep_s)
    return []
