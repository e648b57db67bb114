"""Funciones para renderizar el mapa de salud en consola (rich/plain/json)."""

import json
from typing import Dict, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from vigilante_cables.output.formatters import format_number, format_timestamp, status_style, truncate


def print_health_console(result: Dict, console_format: str = "rich", console: Optional[Console] = None) -> None:
    """Renderiza el resultado de una evaluación por consola.

    Args:
        result: Diccionario con ``generatedAt``, ``cables`` y ``stats``
        console_format: Formato de salida ("rich", "plain", "json")
        console: Consola rich opcional (tests / captura)

    Example:
        >>> print_health_console({"generatedAt": "2026-01-01T00:00:00.000Z", "cables": {}}, "json")  # doctest: +SKIP
    """
    if console_format == "json":
        print(json.dumps(result, ensure_ascii=False, indent=2))
        return

    if console_format == "rich":
        _print_rich_console(result, console or Console())
        return

    _print_plain_console(result)


def _print_rich_console(result: Dict, console: Console) -> None:
    cables = result.get("cables") or {}
    stats = result.get("stats") or {}

    t = Table(title=f"Salud de cables @ {format_timestamp(result.get('generatedAt'))}", show_header=True)
    t.add_column("Cable", style="bold")
    t.add_column("Estado")
    t.add_column("Score", justify="right")
    t.add_column("Confianza", justify="right")
    t.add_column("Actualizado")
    t.add_column("Evidencia principal")
    for cable_id, h in sorted(cables.items()):
        evidence = h.get("evidence") or []
        status = str(h.get("status"))
        style = status_style(status)
        t.add_row(
            cable_id,
            f"[{style}]{status}[/]" if style else status,
            format_number(h.get("score")),
            format_number(h.get("confidence")),
            format_timestamp(h.get("lastUpdated")),
            escape(truncate(evidence[0].get("summary"))) if evidence else "—",
        )

    if cables:
        console.print(t)
    else:
        console.print(Panel("Sin cables con señales vigentes", title="Salud de cables", style="green"))

    if stats:
        info = (
            f"Avisos: {stats.get('warningsTotal', 0)} | relacionados con cables: {stats.get('cableRelated', 0)}\n"
            f"Sin cable resuelto: {stats.get('unresolved', 0)} | fecha ilegible: {stats.get('unparseableDates', 0)}\n"
            f"Señales: {stats.get('signals', 0)}"
        )
        style = "bold yellow" if stats.get("unparseableDates") else ""
        console.print(Panel(info, title="Síntesis", style=style))


def _print_plain_console(result: Dict) -> None:
    """Imprime en formato plain text sin colores."""
    cables = result.get("cables") or {}
    stats = result.get("stats") or {}
    print(f"\n=== {format_timestamp(result.get('generatedAt'))} ===")
    if not cables:
        print("Sin cables con señales vigentes")
    for cable_id, h in sorted(cables.items()):
        print(
            f"{cable_id}: {h.get('status')} score={format_number(h.get('score'))} "
            f"conf={format_number(h.get('confidence'))} actualizado={format_timestamp(h.get('lastUpdated'))}"
        )
        for ev in h.get("evidence") or []:
            print(f"  - [{ev.get('source')}] {truncate(ev.get('summary'), 120)}")
    if stats:
        print(
            f"Síntesis: avisos={stats.get('warningsTotal', 0)} cable={stats.get('cableRelated', 0)} "
            f"sin_resolver={stats.get('unresolved', 0)} fecha_ilegible={stats.get('unparseableDates', 0)} "
            f"señales={stats.get('signals', 0)}"
        )
