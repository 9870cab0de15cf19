"""
Application package initializer.

The service is split into small pieces: ``core`` holds settings,
logging, errors and the record store; ``schemas`` holds one
field-schema descriptor per farm entity; ``services`` holds the
generic record service and the resource registry; ``api`` turns
every registered resource into a pair of HTTP routes.
"""

from .main import app  # noqa: F401
