"""Constrained field types shared by the request schemas."""

from typing import Annotated, TypeVar

from pydantic import AfterValidator, StringConstraints

T = TypeVar("T")


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


def reject_null(value: T | None) -> T:
    """For update schemas: a column that cannot be NULL may be omitted, not nulled."""
    if value is None:
        raise ValueError("cannot be null")
    return value


# Whitespace is stripped before the length check, so blank input is rejected
Title = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
CommentText = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=5000)
]
OptionalText = Annotated[str | None, AfterValidator(_blank_to_none)]
