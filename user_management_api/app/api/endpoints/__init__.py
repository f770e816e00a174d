"""
Endpoint modules.

Each module defines an APIRouter for one area of the API.  The routers
are aggregated in ``router.py`` and included in the application.
"""
