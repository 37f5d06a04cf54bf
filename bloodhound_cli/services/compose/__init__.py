"""
Compose tooling: capability probing, service files and orchestration.
"""

from .orchestrator import ComposeOrchestrator
from .prober import CapabilityProber
from .service_files import DEV_FILE_NAME, PROD_FILE_NAME, ServiceFileManager, ServiceFileSource

__all__ = [
    "DEV_FILE_NAME",
    "PROD_FILE_NAME",
    "CapabilityProber",
    "ComposeOrchestrator",
    "ServiceFileManager",
    "ServiceFileSource",
]
