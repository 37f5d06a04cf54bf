"""
Service layer for bloodhound-cli.

Submodules are imported directly (e.g. ``bloodhound_cli.services.process``)
so that the configuration store can use the low-level helpers without
pulling in the compose and docker layers.
"""
