#!/usr/bin/env python
"""
Script para iniciar la API de salud de cables submarinos.

Inicia:
- Backend FastAPI (/api/cable-health, /api/cache/purge)
- Scheduler de refresco del caché de señales NGA

Uso:
    python start_server.py
    python start_server.py --port 8000 --reload
"""

import argparse
import logging
import os
import sys

import uvicorn

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


def start_server(host: str = "0.0.0.0", port: int = 8000, reload: bool = False, scheduler: bool = True):
    """Levanta ``backend_app:app`` con uvicorn."""
    # backend_app lee esta variable al importarse
    os.environ["CABLE_HEALTH_SCHEDULER"] = "true" if scheduler else "false"

    logging.info("=" * 60)
    logging.info("🌊  VIGILANTE CABLES - API de salud de cables")
    logging.info("=" * 60)
    logging.info(f"📡 Salud de cables: http://localhost:{port}/api/cable-health")
    logging.info(f"📚 API Docs: http://localhost:{port}/docs")
    if scheduler:
        logging.info("⏰ Refresco de señales en segundo plano activado")
    if reload:
        logging.info("🔄 Modo reload activado (auto-recarga en cambios)")

    try:
        uvicorn.run("backend_app:app", host=host, port=port, reload=reload)
    except KeyboardInterrupt:
        logging.info("🛑 Servidor detenido por el usuario")
    except OSError as e:
        logging.error(f"❌ Error al iniciar servidor: {e}")
        sys.exit(1)


def main():
    parser = argparse.ArgumentParser(
        description="Inicia la API de salud de cables submarinos",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Ejemplos:

  # Inicio básico
  python start_server.py

  # Con auto-reload (desarrollo)
  python start_server.py --reload

  # Sin refresco en segundo plano (solo bajo demanda)
  python start_server.py --no-scheduler
        """,
    )
    parser.add_argument("--host", default=os.getenv("HOST", "0.0.0.0"), help="Interfaz de escucha")
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", 8000)), help="Puerto (default: 8000)")
    parser.add_argument("--reload", action="store_true", help="Auto-reload en cambios de código")
    parser.add_argument("--no-scheduler", action="store_true", help="Desactiva el refresco periódico del caché")
    args = parser.parse_args()

    start_server(host=args.host, port=args.port, reload=args.reload, scheduler=not args.no_scheduler)


if __name__ == "__main__":
    main()
