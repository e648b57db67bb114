"""Constantes globales: tablas de cables, palabras clave y parámetros por defecto."""

# Fuente de avisos NGA (broadcast warnings activos)
DEFAULT_NGA_URL = "https://msi.nga.mil/api/publications/broadcast-warn?output=json&status=A"
DEFAULT_NGA_TIMEOUT = 8.0  # s
DEFAULT_NGA_RETRIES = 1

# Caché de señales
DEFAULT_CACHE_TTL = 180  # 3 minutos
DEFAULT_NEGATIVE_TTL = 300  # ventana sin reintentos tras fallo del upstream
CACHE_CONTROL_HEADER = "public, max-age=60, s-maxage=180, stale-while-revalidate=60"

EVIDENCE_SOURCE = "NGA"
SUMMARY_MAX_CHARS = 150

# Emparejamiento geométrico
MAX_DISTANCE_DEG = 5.0  # ~550 km
KM_PER_DEGREE = 111

# TTLs de señales (segundos)
FAULT_TTL_SECONDS = 5 * 86400
ADVISORY_TTL_SECONDS = 3 * 86400
REPAIR_ON_STATION_TTL_SECONDS = 24 * 3600
REPAIR_ENROUTE_TTL_SECONDS = 12 * 3600

# Palabras clave y patrones del clasificador
CABLE_KEYWORDS = (
    "CABLE",
    "CABLESHIP",
    "CABLE SHIP",
    "CABLE LAYING",
    "CABLE OPERATIONS",
    "SUBMARINE CABLE",
    "UNDERSEA CABLE",
    "FIBER OPTIC",
    "TELECOMMUNICATIONS CABLE",
)
FAULT_PATTERN = r"FAULT|BREAK|CUT|DAMAGE|SEVERED|RUPTURE|OUTAGE|FAILURE"
SHIP_PATTERNS = (
    r"CABLESHIP\s+([A-Z][A-Z0-9\s\-']+)",
    r"CABLE\s+SHIP\s+([A-Z][A-Z0-9\s\-']+)",
    r"CS\s+([A-Z][A-Z0-9\s\-']+)",
    r"M/V\s+([A-Z][A-Z0-9\s\-']+)",
)
ON_STATION_PATTERN = r"ON STATION|OPERATIONS IN PROGRESS|LAYING|REPAIRING|WORKING|COMMENCED"

# Nombre conocido -> cable_id. El orden de inserción es el desempate.
CABLE_NAME_MAP = {
    "MAREA": "marea",
    "GRACE HOPPER": "grace_hopper",
    "HAVFRUE": "havfrue",
    "FASTER": "faster",
    "SOUTHERN CROSS": "southern_cross",
    "CURIE": "curie",
    "SEA-ME-WE": "seamewe6",
    "SEAMEWE": "seamewe6",
    "SMW6": "seamewe6",
    "FLAG": "flag",
    "2AFRICA": "2africa",
    "WACS": "wacs",
    "EASSY": "eassy",
    "SAM-1": "sam1",
    "SAM1": "sam1",
    "ELLALINK": "ellalink",
    "ELLA LINK": "ellalink",
    "APG": "apg",
    "INDIGO": "indigo",
    "SJC": "sjc",
    "FARICE": "farice",
    "FALCON": "falcon",
}

# Puntos de aterrizaje (lat, lon) por cable
CABLE_LANDINGS = {
    "marea": [(36.85, -75.98), (43.26, -2.93)],
    "grace_hopper": [(40.57, -73.97), (50.83, -4.55), (43.26, -2.93)],
    "havfrue": [(40.22, -74.01), (58.15, 8.0), (55.56, 8.13)],
    "faster": [(43.37, -124.22), (34.95, 139.95), (34.32, 136.85)],
    "southern_cross": [(-33.87, 151.21), (-36.85, 174.76), (33.74, -118.27)],
    "curie": [(33.74, -118.27), (-33.05, -71.62)],
    "seamewe6": [(1.35, 103.82), (19.08, 72.88), (25.13, 56.34), (21.49, 39.19), (29.97, 32.55), (43.30, 5.37)],
    "flag": [(50.04, -5.66), (31.20, 29.92), (25.20, 55.27), (19.08, 72.88), (1.35, 103.82), (35.69, 139.69)],
    "2africa": [
        (50.83, -4.55),
        (38.72, -9.14),
        (14.69, -17.44),
        (6.52, 3.38),
        (-33.93, 18.42),
        (-4.04, 39.67),
        (21.49, 39.19),
        (31.26, 32.30),
    ],
    "wacs": [(-33.93, 18.42), (6.52, 3.38), (14.69, -17.44), (38.72, -9.14), (51.51, -0.13)],
    "eassy": [(-29.85, 31.02), (-25.97, 32.58), (-6.80, 39.28), (-4.04, 39.67), (11.59, 43.15)],
    "sam1": [(-22.91, -43.17), (-34.60, -58.38), (26.36, -80.08)],
    "ellalink": [(38.72, -9.14), (-3.72, -38.52)],
    "apg": [(35.69, 139.69), (25.15, 121.44), (22.29, 114.17), (1.35, 103.82)],
    "indigo": [(-31.95, 115.86), (1.35, 103.82), (-6.21, 106.85)],
    "sjc": [(35.69, 139.69), (36.07, 120.32), (1.35, 103.82), (22.29, 114.17)],
    "farice": [(64.13, -21.90), (62.01, -6.77), (55.95, -3.19)],
    "falcon": [(25.13, 56.34), (23.59, 58.38), (26.23, 50.59), (29.38, 47.98)],
}
