"""
Endpoint modules.

``records`` builds the create/list routes for a resource; ``health``
exposes the liveness check.  Both are aggregated in ``router.py``.
"""
