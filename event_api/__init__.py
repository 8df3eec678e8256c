"""
Top-level package for the Event Registry API.

The server application lives in ``event_api.app`` and a small HTTP
client for it in ``event_api.client``.
"""

__all__ = []
