"""
Service layer abstraction.

``resources`` describes the five record collections; ``record_service``
implements create and list-all once, for any of them.
"""
