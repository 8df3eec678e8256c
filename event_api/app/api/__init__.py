"""
API package containing versioned routes.

Version subpackages (``v1``) expose a top-level ``router``; shared
dependencies live in ``deps.py``.
"""
