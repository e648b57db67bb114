"""Módulo pipeline: Ejecución de punta a punta (avisos -> mapa de salud)."""

from vigilante_cables.pipeline.runner import evaluate_warnings, load_warnings, run_pipeline

__all__ = ["evaluate_warnings", "load_warnings", "run_pipeline"]
