"""
Top‑level package for the Task List API.

This file makes ``tasklist_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``tasklist_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
