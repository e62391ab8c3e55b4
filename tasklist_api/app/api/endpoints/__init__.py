"""
Endpoint subpackage.

Each module defines plain handler coroutines for one domain.  They are
wired to paths and methods in ``api/router.py``.
"""
