# solidarity_client/__init__.py
from .config import ClientConfig
from .client import SolidarityTechClient
from .core import APICore, FetchResponse
from .endpoints import ENDPOINTS, Catalog, Endpoint
from .logs import configure_logging
from . import models
from . import exceptions

__all__ = [
    "ClientConfig",
    "SolidarityTechClient",
    "APICore",
    "FetchResponse",
    "ENDPOINTS",
    "Catalog",
    "Endpoint",
    "configure_logging",
    "models",
    "exceptions",
]
