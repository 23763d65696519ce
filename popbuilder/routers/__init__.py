"""
Routers package initialization.
"""
from popbuilder.routers import home
from popbuilder.routers import results
from popbuilder.routers import download

__all__ = [
    "home",
    "results",
    "download",
]
