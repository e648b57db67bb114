"""Parser de argumentos de línea de comandos."""

import argparse
import os
from typing import List, Optional

from vigilante_cables.core.constants import DEFAULT_NGA_RETRIES, DEFAULT_NGA_TIMEOUT, DEFAULT_NGA_URL


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parsea argumentos de línea de comandos del monitor de cables.

    Args:
        argv: Lista de argumentos (por defecto sys.argv[1:])

    Returns:
        Namespace con todos los argumentos parseados

    Example:
        >>> args = parse_args(["--warnings", "avisos.json", "--console-format", "plain"])
        >>> args.warnings
        'avisos.json'
        >>> args.console_format
        'plain'
    """
    p = argparse.ArgumentParser(description="Monitor de salud de cables submarinos a partir de avisos NGA.")

    # Fuente de avisos
    p.add_argument("--warnings", default=None, help="Archivo de avisos (.json/.jsonl/.csv); si se omite se usa el feed")
    p.add_argument("--url", default=os.getenv("NGA_WARNINGS_URL", DEFAULT_NGA_URL), help="URL del feed NGA")
    p.add_argument(
        "--timeout", type=float, default=float(os.getenv("NGA_TIMEOUT", DEFAULT_NGA_TIMEOUT)), help="Timeout (s)"
    )
    p.add_argument(
        "--retries", type=int, default=int(os.getenv("NGA_RETRIES", DEFAULT_NGA_RETRIES)), help="Intentos al feed"
    )

    # Evaluación
    p.add_argument("--now", type=str, default=None, help="Instante ISO de evaluación (ej: 2026-02-16T00:00:00Z)")
    p.add_argument("--iterations", type=int, default=1, help="Número de evaluaciones")
    p.add_argument("--sleep", type=float, default=0.0, help="Segundos de espera entre evaluaciones")

    # Salida
    p.add_argument(
        "--console-format",
        choices=["rich", "plain", "json"],
        default=os.getenv("CONSOLE_FORMAT", "rich"),
        help="Formato de consola",
    )
    p.add_argument("--output-json", default=None, help="Ruta para guardar resumen JSON")
    p.add_argument("--log-jsonl", default=None, help="Ruta a archivo JSONL para registrar evaluaciones por cable")
    p.add_argument("--verbose", action="store_true", help="Logging DEBUG")

    return p.parse_args(argv)
