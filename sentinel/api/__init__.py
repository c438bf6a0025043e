"""
API Module — FastAPI Dashboard Surface

Public API:
- app: FastAPI application instance
- router: Dashboard routes
- get_engine: Engine dependency
"""

from .main import app
from .routes import router
from .services import get_engine

__all__ = [
    "app",
    "router",
    "get_engine",
]
