"""
Application package initializer.

This package contains the entrypoint for the API and its submodules:
``core`` holds configuration, logging and the database handle,
``schemas`` the request/response models, ``services`` the SQL for each
operation and ``api`` the HTTP handlers and their route table.
"""

from .main import create_app  # noqa: F401
