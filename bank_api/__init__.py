"""
Top‑level package for the Bank Back Office API.

Makes ``bank_api`` importable so that modules within ``app`` can be
referenced by fully qualified names like ``bank_api.app.main``.  The
requests based client lives in :mod:`bank_api.client`.

The package provides no public exports; all functionality lives in
submodules.
"""

__all__ = []
