# API module exports
from lifeos.api import health
from lifeos.api.base import api_router

__all__ = ["health", "api_router"]
