"""Módulo feed: Cliente del feed NGA y caché de señales."""

from vigilante_cables.feed.cache import SignalCache, UpstreamUnavailable
from vigilante_cables.feed.client import fetch_nga_warnings

__all__ = ["SignalCache", "UpstreamUnavailable", "fetch_nga_warnings"]
