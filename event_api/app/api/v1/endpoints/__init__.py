"""
Endpoint subpackage.

``crud`` builds the per-resource routers, ``statistics`` serves the
aggregated counts.  Both are assembled in ``api/v1/router.py``.
"""
