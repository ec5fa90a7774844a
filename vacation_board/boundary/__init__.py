"""
Boundary layer for external system integrations.

Handles all interactions with external systems (the SQLite store, the
identity provider and Microsoft Graph).
"""
