"""
Version information for bloodhound-cli.

``BUILD_DATE`` is stamped by the release build; development installs leave it empty.
"""

NAME = "BloodHound CLI"
DESCRIPTION = "A command line interface for BloodHound Community Edition"

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("bloodhound-cli")
except PackageNotFoundError:
    __version__ = "0.1.0"

BUILD_DATE = ""
