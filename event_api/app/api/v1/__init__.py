"""
Version 1 of the API.

``router.py`` aggregates the resource routers and the statistics
endpoint; ``main.py`` mounts it under ``/api``.
"""
