"""
Output presenters for bloodhound-cli.
"""

from .console import ConsolePresenter

__all__ = ["ConsolePresenter"]
