"""Global configuration for primefield."""

import os

# ---------- Field defaults ----------
# The dynamic field starts out as GF(2) until a modulus is configured.
DEFAULT_MODULUS = 2

# Supported machine-word widths (bits).  Every modulus must fit in one word.
WORD_WIDTHS = (32, 64)
DEFAULT_WIDTH = 64

# ---------- Calculator service ----------
# Env var PRIMEFIELD_MODULUS sets the modulus a fresh service starts with.
SERVICE_MODULUS = int(os.environ.get("PRIMEFIELD_MODULUS", str(2**31 - 1)))  # Mersenne prime M31
SERVICE_WIDTH = int(os.environ.get("PRIMEFIELD_WIDTH", str(DEFAULT_WIDTH)))
SERVICE_URL = os.environ.get("PRIMEFIELD_URL", "http://localhost:8000")
SERVICE_HOST = os.environ.get("PRIMEFIELD_HOST", "127.0.0.1")
SERVICE_PORT = int(os.environ.get("PRIMEFIELD_PORT", "8000"))

# ---------- Logging ----------
LOG_LEVEL = os.environ.get("PRIMEFIELD_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# ---------- Primality ----------
# Below this bound primality is decided by trial division; above it (64-bit
# moduli) a deterministic Miller-Rabin round over fixed bases is used.
TRIAL_DIVISION_LIMIT = 2**32
MILLER_RABIN_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)
