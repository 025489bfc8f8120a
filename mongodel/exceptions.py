# coding: utf-8


# Defines the errors raised while deleting documents.

__status__ = "Development"
__date__ = "Oct 2026"
__version__ = "0.1.0"


class MongodelError(Exception):
    """
    Base class for all mongodel errors. ``exit_code`` is the process
    status used when the error reaches the command line.
    """

    exit_code = 1
    # set when the delete completed before the error, e.g. on close
    result = None


class ConfigError(MongodelError, ValueError):
    """Missing or invalid connection configuration."""

    exit_code = 2


class StoreConnectionError(MongodelError):
    """The store could not be reached or rejected the credentials."""

    exit_code = 3


class InvalidIdentifierError(MongodelError, ValueError):
    """The document identifier is not a valid ObjectId."""

    exit_code = 4


class OperationError(MongodelError):
    """The store failed while executing the delete."""

    exit_code = 5
