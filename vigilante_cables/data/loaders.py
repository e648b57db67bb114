"""Funciones para cargar avisos desde el feed o desde archivos exportados."""

import json
from pathlib import Path
from typing import Any, List, Union

import pandas as pd

from vigilante_cables.core.models import NavWarning

WARNING_COLUMNS = ["text", "issueDate", "navArea", "msgYear", "msgNumber"]


def warnings_from_payload(payload: Any) -> List[NavWarning]:
    """Normaliza la respuesta del feed (lista o ``{"warnings": [...]}``).

    Args:
        payload: JSON decodificado del feed NGA

    Returns:
        Lista de NavWarning (entradas que no son objetos se ignoran)

    Example:
        >>> ws = warnings_from_payload({"warnings": [{"text": "CABLE", "msgNumber": 7}, "x"]})
        >>> [w.msg_number for w in ws]
        ['7']
    """
    if isinstance(payload, dict):
        payload = payload.get("warnings") or []
    if not isinstance(payload, list):
        return []
    return [NavWarning.from_dict(item) for item in payload if isinstance(item, dict)]


def load_warnings_file(path: Union[str, Path]) -> List[NavWarning]:
    """Carga avisos archivados en .json, .jsonl o .csv.

    El CSV debe traer encabezados con los nombres del feed (``text``,
    ``issueDate``, ``navArea``, ``msgYear``, ``msgNumber``); las celdas
    vacías quedan como string vacío.

    Args:
        path: Ruta al archivo de avisos

    Returns:
        Lista de NavWarning en el orden del archivo
    """
    p = Path(path)
    suffix = p.suffix.lower()
    if suffix == ".json":
        return warnings_from_payload(json.loads(p.read_text(encoding="utf-8")))

    if suffix == ".jsonl":
        lines = p.read_text(encoding="utf-8").splitlines()
        return warnings_from_payload([json.loads(ln) for ln in lines if ln.strip()])
    if suffix != ".csv":
        raise ValueError(f"Formato de avisos no soportado: {p.suffix}")

    df = pd.read_csv(p, dtype=str, keep_default_na=False)
    if df.empty:
        return []
    df = df.reindex(columns=WARNING_COLUMNS).fillna("").astype(str)
    return [NavWarning.from_dict(rec) for rec in df.to_dict(orient="records")]
