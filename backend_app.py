import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger
from dotenv import load_dotenv
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vigilante_cables.analysis import compute_health_map, health_map_to_dict, synthesize_signals
from vigilante_cables.core.constants import (
    CACHE_CONTROL_HEADER,
    DEFAULT_CACHE_TTL,
    DEFAULT_NEGATIVE_TTL,
    DEFAULT_NGA_RETRIES,
    DEFAULT_NGA_TIMEOUT,
    DEFAULT_NGA_URL,
)
from vigilante_cables.core.models import Signal, SynthesisStats
from vigilante_cables.data import warnings_from_payload
from vigilante_cables.data.preprocessing import to_iso
from vigilante_cables.feed import SignalCache, UpstreamUnavailable, fetch_nga_warnings

load_dotenv()

# Basic logging configuration for the API module
logging.basicConfig(level=logging.INFO)

NGA_URL = os.getenv("NGA_WARNINGS_URL", DEFAULT_NGA_URL)
NGA_TIMEOUT = float(os.getenv("NGA_TIMEOUT", DEFAULT_NGA_TIMEOUT))
NGA_RETRIES = int(os.getenv("NGA_RETRIES", DEFAULT_NGA_RETRIES))
CACHE_TTL = float(os.getenv("CABLE_HEALTH_CACHE_TTL", DEFAULT_CACHE_TTL))
NEG_TTL = float(os.getenv("CABLE_HEALTH_NEG_TTL", DEFAULT_NEGATIVE_TTL))
SCHEDULER_ENABLED = os.getenv("CABLE_HEALTH_SCHEDULER", "true").lower() == "true"

SignalBundle = Tuple[List[Signal], SynthesisStats]


def load_signals() -> SignalBundle:
    """Descarga avisos NGA y los convierte en señales (lo que se guarda en caché)."""
    raw = fetch_nga_warnings(url=NGA_URL, timeout=NGA_TIMEOUT, retries=NGA_RETRIES)
    signals, stats = synthesize_signals(warnings_from_payload(raw))
    logging.info(f"Señales sintetizadas: {stats.signals} de {stats.warnings_total} avisos")
    return signals, stats


def get_signal_cache(request: Request) -> SignalCache:
    return request.app.state.signal_cache


router = APIRouter()


@router.get("/api/cable-health")
def cable_health(cache: SignalCache = Depends(get_signal_cache)):
    """Mapa de salud de cables recalculado sobre las señales en caché."""
    try:
        signals, stats = cache.get()
    except UpstreamUnavailable as e:
        return JSONResponse({"error": str(e)}, status_code=502)
    except Exception as e:
        logging.exception("[cable-health] Error")
        return JSONResponse({"error": str(e)}, status_code=500)

    now = datetime.now(timezone.utc)
    body = {
        "generatedAt": to_iso(now),
        "cables": health_map_to_dict(compute_health_map(signals, now=now)),
        "stats": stats.to_dict(),
    }
    return JSONResponse(body, headers={"Cache-Control": CACHE_CONTROL_HEADER})


@router.post("/api/cache/purge")
def purge_cache(cache: SignalCache = Depends(get_signal_cache)):
    """Invalida el caché de señales; la próxima consulta vuelve al feed."""
    cache.invalidate()
    return {"ok": True}


@router.get("/")
def index(cache: SignalCache = Depends(get_signal_cache)):
    age = cache.age_seconds
    return {"ok": True, "message": "API Viva", "cache_age_s": None if age is None else round(age, 1)}


# ============================================================================
# SCHEDULER DE REFRESCO DE SEÑALES
# ============================================================================


def refresh_signals(cache: SignalCache) -> None:
    """Precalienta el caché cuando expira (job del scheduler)."""
    try:
        if not cache.is_fresh:
            signals, _ = cache.get()
            logging.info(f"✅ Caché de señales refrescado ({len(signals)} señales)")
    except Exception as e:
        logging.exception(f"❌ Error refrescando señales: {e}")


def create_app(cache: Optional[SignalCache] = None, scheduler_enabled: bool = SCHEDULER_ENABLED) -> FastAPI:
    """Construye la app con su caché de señales explícito."""
    signal_cache = cache or SignalCache(load_signals, ttl_seconds=CACHE_TTL, negative_ttl_seconds=NEG_TTL)
    scheduler = BackgroundScheduler()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Inicia el refresco periódico de señales y lo detiene al apagar."""
        if scheduler_enabled:
            scheduler.add_job(
                refresh_signals,
                trigger=IntervalTrigger(seconds=max(30, int(signal_cache.ttl_seconds))),
                args=[signal_cache],
                id="refresh_signals",
                name="Refresco de señales NGA",
                replace_existing=True,
            )
            scheduler.start()
            logging.info(f"✅ Scheduler iniciado - refresco cada {signal_cache.ttl_seconds:.0f}s")
        yield
        if scheduler.running:
            scheduler.shutdown()
            logging.info("🛑 Scheduler detenido")

    app = FastAPI(title="Vigilante Cables - API", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    app.state.signal_cache = signal_cache
    app.state.scheduler = scheduler
    app.include_router(router)
    return app


app = create_app()
