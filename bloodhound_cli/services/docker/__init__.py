"""
Container runtime access (listing containers, reading logs).
"""

from .runtime import SERVICE_NAMES, ContainerRuntime, read_log_frames

__all__ = ["SERVICE_NAMES", "ContainerRuntime", "read_log_frames"]
