"""
Application package initializer.

This package contains the FastAPI entrypoint and its submodules.  The
master data kinds of the back office (accounts, branches, customers
and employees) share one generic resource controller defined in
``services``; their HTTP routes are generated from a single router
factory in ``api/v1/endpoints`` and mounted under ``/api``.
"""

from .main import app  # noqa: F401
