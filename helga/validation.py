"""Helpers for validating and filtering collections of models."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Protocol, TypeVar, runtime_checkable

from .errors import HelgaError

T = TypeVar("T")
V = TypeVar("V", bound="Validatable")


@runtime_checkable
class Validatable(Protocol):
    """Anything that can check itself and report what is wrong."""

    def validate(self) -> list[Exception]:
        """Return the validation errors; an empty list means valid."""
        ...


def filter_by_err_func(
    items: Iterable[T], func: Callable[[T], BaseException | None]
) -> list[T]:
    """Keep the items for which ``func`` returns no error."""
    return [item for item in items if func(item) is None]


def filter_by_validation(items: Iterable[V], message: str) -> tuple[list[Exception], list[V]]:
    """Split ``items`` into errors for the invalid ones and a list of the valid ones.

    ``message`` is a ``str.format`` template; ``{}`` receives the invalid item.
    """
    errors: list[Exception] = []
    kept: list[V] = []
    for item in items:
        if item.validate():
            errors.append(HelgaError(message.format(item)))
        else:
            kept.append(item)
    return errors, kept