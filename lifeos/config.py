import os
from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Database (engine is created lazily, see lifeos.db.session)
DATABASE_URL = os.getenv("DATABASE_URL")
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "5"))
DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "10"))
DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", "30"))
DB_POOL_RECYCLE = int(os.getenv("DB_POOL_RECYCLE", "3600"))

# CORS
_DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "").split(",")
    if origin.strip()
] + _DEFAULT_CORS_ORIGINS

# Context defaults used when the user has not recorded today's context
DEFAULT_AVAILABLE_MINUTES = int(os.getenv("DEFAULT_AVAILABLE_MINUTES", "480"))  # 8 hours
DEFAULT_ENERGY_LEVEL = os.getenv("DEFAULT_ENERGY_LEVEL", "MEDIUM").upper()
DEFAULT_STRESS_LEVEL = int(os.getenv("DEFAULT_STRESS_LEVEL", "5"))
