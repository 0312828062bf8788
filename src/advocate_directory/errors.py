"""Exception types shared across the listing engine."""


class AdvocateDirectoryError(Exception):
    """Base class for advocate directory errors."""


class ConnectivityError(AdvocateDirectoryError):
    """The relational store is unreachable or not configured.

    This is the only failure a backend adapter may raise. The fallback
    coordinator absorbs it and serves the request from the in-memory dataset.
    """


class ConfigError(AdvocateDirectoryError):
    """Configuration file could not be read or has the wrong shape."""
