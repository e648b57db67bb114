"""Funciones auxiliares de formateo para salida."""

from typing import Any

STATUS_STYLES = {"ok": "green", "degraded": "bold yellow", "fault": "bold red"}


def format_number(value: Any, decimals: int = 2) -> str:
    """Formatea un número con N decimales, retorna '—' si no es válido.

    Args:
        value: Valor a formatear
        decimals: Número de decimales

    Returns:
        String formateado o '—'

    Example:
        >>> format_number(0.856, 2)
        '0.86'
        >>> format_number(None, 2)
        '—'
    """
    try:
        return f"{float(value):.{decimals}f}"
    except (ValueError, TypeError):
        return "—"


def format_timestamp(ts: Any) -> str:
    """Timestamp ISO legible (sin milisegundos ni 'T').

    Example:
        >>> format_timestamp("2026-02-15T12:00:00.000Z")
        '2026-02-15 12:00:00Z'
        >>> format_timestamp(None)
        '—'
    """
    if not ts:
        return "—"
    text = str(ts).replace("T", " ")
    if "." in text and text.endswith("Z"):
        text = text.split(".", 1)[0] + "Z"
    return text


def truncate(text: Any, max_chars: int = 80) -> str:
    """Recorta el texto a ``max_chars`` agregando '…'."""
    s = "" if text is None else str(text)
    return s if len(s) <= max_chars else s[: max_chars - 1] + "…"


def status_style(status: Any) -> str:
    return STATUS_STYLES.get(str(status), "")
