"""Database package"""

from lifeos.db.session import get_db

__all__ = ["get_db"]
