"""
bloodhound-cli: manage the BloodHound Community Edition containers.
"""

from .version import __version__

__all__ = ["__version__"]
