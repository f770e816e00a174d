"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the ``models`` entities to decouple the
API representation from persistence.
"""
