"""
Boundary layer for external system integrations.

Handles all interactions with the embedded database engine.
"""
