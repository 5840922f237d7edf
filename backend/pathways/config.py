import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env from project root (one level above backend/)
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

# "strata" (AMH x age retrieval strata) or "regression" (La Marca 2012)
OOCYTE_ESTIMATOR = os.getenv("OOCYTE_ESTIMATOR", "strata").lower()
