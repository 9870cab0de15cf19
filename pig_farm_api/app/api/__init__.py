"""
API package containing the HTTP routes.

``router`` aggregates the record routes (one pair per registered
resource) and the health check into a single ``APIRouter``.
"""
