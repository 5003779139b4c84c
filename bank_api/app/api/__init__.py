"""
API package containing versioned routes.

A version subpackage exposes a top‑level ``router`` which includes all
of its resource routers.  The first version is served under the
``/api`` prefix expected by the existing grid clients.
"""
