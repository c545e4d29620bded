# backend/services/workflow_steps.py
"""
Sub-steps of multi-step workflows are either REQUIRED or BEST-EFFORT.

A required step is called directly and its exception fails the request. A
best-effort step goes through ``best_effort``: its failure is logged and
appended to the caller's ``warnings`` list, which the route returns to the
client alongside the successful result.
"""

import logging
from typing import Callable, List, Optional, TypeVar

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError

from database.errors import DatabaseConnectionError, InsertFailedError

logger = logging.getLogger(__name__)

T = TypeVar("T")

BEST_EFFORT_ERRORS = (HTTPException, SQLAlchemyError, InsertFailedError, DatabaseConnectionError, OSError)


def describe_error(exc: BaseException) -> str:
    if isinstance(exc, HTTPException):
        return str(exc.detail)
    return str(exc).splitlines()[0] if str(exc) else exc.__class__.__name__


def best_effort(warnings: List[str], step: str, fn: Callable[[], T]) -> Optional[T]:
    try:
        return fn()
    except BEST_EFFORT_ERRORS as e:
        message = describe_error(e)
        logger.warning("Best-effort step '%s' failed: %s", step, message)
        warnings.append(f"{step} failed: {message}")
        return None
