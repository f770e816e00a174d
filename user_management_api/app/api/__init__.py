"""
HTTP layer of the application.

``router`` aggregates the domain endpoint routers; ``dependencies``
hands the wired service objects to route handlers.
"""
