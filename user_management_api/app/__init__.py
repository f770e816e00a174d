"""
Application package for the User Management API.

Subpackages hold the HTTP layer (``api``), configuration and storage
bootstrap (``core``), the ``User`` entity (``models``), request and
response schemas (``schemas``), table access (``repositories``) and
business logic (``services``).
"""
