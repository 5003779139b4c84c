"""
Errors raised by the resource layer.

The HTTP layer maps them to status codes: ``NotFound`` to 404,
``InvalidInput`` to 400 and ``StoreFailure`` to 500.
"""


class ResourceError(Exception):
    """Base class for resource layer errors."""


class NotFound(ResourceError):
    """No record matches the requested identifier."""


class InvalidInput(ResourceError):
    """The request is malformed or conflicts with stored data."""


class StoreFailure(ResourceError):
    """The database could not complete the operation."""
