"""
Application-level exceptions.

Store driver errors (PyMongo, SQLAlchemy) are not wrapped: they propagate to
the route boundary unchanged. These cover misuse of the service itself.
"""


class PassopError(Exception):
    """Base class for Backend PassOP errors."""


class ConfigError(PassopError):
    """Raised when configuration names something the service cannot build (e.g. unknown STORE_BACKEND)."""


class StoreNotConnectedError(PassopError):
    """Raised when a store operation runs before connect() or after close()."""
