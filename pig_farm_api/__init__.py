"""
Top‑level package for the Pig Farm Records API.

Marks ``pig_farm_api`` as a regular package so that modules inside
``app`` can be imported with fully qualified names such as
``pig_farm_api.app.main``.  The HTTP client lives in
``pig_farm_api.client``.
"""

__all__ = []
