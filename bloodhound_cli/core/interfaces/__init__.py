"""
Interfaces for pluggable bloodhound-cli services.
"""

from .logger import ILogger
from .presenter import IPresenter

__all__ = ["ILogger", "IPresenter"]
