"""
API package containing the HTTP handlers.

Handlers live in ``endpoints``; ``router.build_router`` maps each
route to its handler when the application is created.
"""
