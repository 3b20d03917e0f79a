"""
Translation of store failures into HTTP errors.

RLS rejections come back from PostgREST as Postgres error 42501 and are
reported as 403 with the store's message; everything else the store raises
(network, constraint, unavailable) is reported as 500. Nothing is retried.
"""

from typing import NoReturn

from fastapi import HTTPException, status
from postgrest.exceptions import APIError

RLS_VIOLATION_CODE = "42501"


def raise_store_error(exc: Exception) -> NoReturn:
    if isinstance(exc, HTTPException):
        raise exc
    if isinstance(exc, APIError):
        if exc.code == RLS_VIOLATION_CODE:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=exc.message)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=exc.message or str(exc)
        )
    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))
