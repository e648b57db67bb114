"""
Runner del pipeline de salud de cables.

Carga avisos (archivo local o feed NGA), sintetiza señales, calcula el mapa
de salud, lo imprime y opcionalmente lo registra en JSONL / resumen JSON.
"""

import json
import logging
import os
import time
from collections import defaultdict
from datetime import datetime, timezone
from typing import Dict, List, Optional

from dotenv import load_dotenv

from vigilante_cables.analysis import (
    classify_health_map,
    compute_health_map,
    health_map_to_dict,
    synthesize_signals,
)
from vigilante_cables.core.constants import DEFAULT_NGA_RETRIES, DEFAULT_NGA_TIMEOUT, DEFAULT_NGA_URL
from vigilante_cables.core.models import NavWarning
from vigilante_cables.data import load_warnings_file, warnings_from_payload
from vigilante_cables.data.preprocessing import parse_iso, to_iso
from vigilante_cables.feed import fetch_nga_warnings
from vigilante_cables.output import print_health_console

load_dotenv()

logger = logging.getLogger(__name__)


def load_warnings(
    warnings_path: Optional[str],
    url: str = DEFAULT_NGA_URL,
    timeout: float = DEFAULT_NGA_TIMEOUT,
    retries: int = DEFAULT_NGA_RETRIES,
) -> List[NavWarning]:
    """Avisos desde archivo si se indica ruta; si no, desde el feed en vivo."""
    if warnings_path:
        warnings = load_warnings_file(warnings_path)
        logger.info(f"{len(warnings)} avisos cargados desde {warnings_path}")
        return warnings
    raw = fetch_nga_warnings(url=url, timeout=timeout, retries=retries)
    logger.info(f"{len(raw)} avisos recibidos desde {url}")
    return warnings_from_payload(raw)


def evaluate_warnings(warnings: List[NavWarning], now: Optional[datetime] = None) -> Dict:
    """Una evaluación completa: señales -> mapa de salud -> resultado serializable.

    Args:
        warnings: Avisos de entrada
        now: Instante de evaluación (por defecto, reloj UTC actual)

    Returns:
        Diccionario con ``generatedAt``, ``cables``, ``stats`` y ``rules``
    """
    now = now or datetime.now(timezone.utc)
    signals, stats = synthesize_signals(warnings)
    health = compute_health_map(signals, now=now)
    return {
        "generatedAt": to_iso(now),
        "cables": health_map_to_dict(health),
        "stats": stats.to_dict(),
        "rules": classify_health_map(signals, now=now),
    }


def run_pipeline(
    warnings_path: Optional[str] = None,
    url: str = DEFAULT_NGA_URL,
    timeout: float = DEFAULT_NGA_TIMEOUT,
    retries: int = DEFAULT_NGA_RETRIES,
    console_format: Optional[str] = None,
    output_json: Optional[str] = None,
    log_jsonl: Optional[str] = None,
    now: Optional[str] = None,
    iterations: int = 1,
    sleep_seconds: float = 0.0,
) -> Dict:
    """Ejecuta el pipeline una o más veces y devuelve el último resultado.

    Args:
        warnings_path: Archivo de avisos (.json/.jsonl/.csv); None para el feed en vivo
        url: Endpoint del feed NGA
        timeout: Timeout por intento (s)
        retries: Intentos al feed
        console_format: "rich", "plain" o "json" (por defecto env CONSOLE_FORMAT o "rich")
        output_json: Ruta para guardar el resumen JSON
        log_jsonl: Ruta JSONL donde se agrega un registro por cable y evaluación
        now: Instante ISO fijo para reevaluar avisos archivados
        iterations: Número de evaluaciones
        sleep_seconds: Pausa entre evaluaciones

    Returns:
        Resultado de la última evaluación
    """
    fmt = console_format or os.getenv("CONSOLE_FORMAT", "rich")
    fixed_now = parse_iso(now) if now else None

    status_counts: Dict[str, int] = {"ok": 0, "degraded": 0, "fault": 0}
    rule_counts: Dict[str, int] = defaultdict(int)
    result: Dict = {}

    for i in range(max(1, iterations)):
        warnings = load_warnings(warnings_path, url=url, timeout=timeout, retries=retries)
        result = evaluate_warnings(warnings, now=fixed_now)

        print_health_console(result, console_format=fmt)

        for cable_id, h in result["cables"].items():
            status_counts[h["status"]] = status_counts.get(h["status"], 0) + 1
            rule_counts[result["rules"].get(cable_id, "none")] += 1

        if log_jsonl:
            with open(log_jsonl, "a", encoding="utf-8") as f:
                for cable_id, h in result["cables"].items():
                    record = {
                        "time": result["generatedAt"],
                        "cable_id": cable_id,
                        "status": h["status"],
                        "score": h["score"],
                        "confidence": h["confidence"],
                        "rule": result["rules"].get(cable_id),
                        "last_updated": h["lastUpdated"],
                    }
                    f.write(json.dumps(record, ensure_ascii=False) + "\n")

        if sleep_seconds > 0 and i < iterations - 1:
            time.sleep(sleep_seconds)

    if output_json:
        summary = {
            "meta": {"warnings_path": warnings_path, "url": None if warnings_path else url, "iterations": iterations},
            "counts": {"status": status_counts, "rules": dict(rule_counts)},
            "last": result,
        }
        with open(output_json, "w", encoding="utf-8") as f:
            json.dump(summary, f, ensure_ascii=False, indent=2)
        logger.info(f"Resumen guardado en {output_json}")

    return result
