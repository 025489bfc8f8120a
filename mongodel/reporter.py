# coding: utf-8


# Reports the outcome of a delete to the invoking process.

import sys
import logging

from mongodel.exceptions import MongodelError

__status__ = "Development"
__date__ = "Oct 2026"
__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def exit_code_for(error):
    if isinstance(error, MongodelError):
        return error.exit_code
    return 1


def report(outcome, stream=None, exit_on_error=True):
    """
    Write the deleted count, or the error, and set the exit status.

    Args:
        outcome (DeleteResult or Exception): result of the delete; an
            error carrying a completed result also writes its count
        stream (file, optional): where the count is written; defaults
            to sys.stdout
        exit_on_error (bool): if ``True``, terminate the process when
            outcome is an error; else return the exit code

    Returns:
        int: 0 on success, or the error's exit code
    """
    if isinstance(outcome, BaseException):
        code = exit_code_for(outcome)
        # the document is already gone when only the disconnect failed
        completed = getattr(outcome, "result", None)
        if completed is not None:
            print(completed.deleted_count, file=stream or sys.stdout)
        logger.error(f"{type(outcome).__name__}: {outcome}")
        print(f"error: {outcome}", file=sys.stderr)
        if exit_on_error:
            sys.exit(code)
        return code
    print(outcome.deleted_count, file=stream or sys.stdout)
    return 0
