"""Batch decode outcome."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

R = TypeVar("R")


class FailureKind(StrEnum):
    """Why a batch produced no records."""

    TRANSPORT_FAILURE = "transport_failure"  # no usable response at all
    EMPTY_RESULT = "empty_result"  # well-formed, nothing to show
    MALFORMED_ELEMENT = "malformed_element"  # an element broke a required-key rule


@dataclass(frozen=True)
class DecodeResult(Generic[R]):
    """Result of decoding one response payload.

    Either ``failure`` is None and ``records`` holds every element in source
    order, or ``failure`` names the reason and ``records`` is empty.
    """

    records: tuple[R, ...] = ()
    failure: FailureKind | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if self.failure is not None and self.records:
            raise ValueError("A failed decode cannot carry records")

    @property
    def success(self) -> bool:
        return self.failure is None

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    @classmethod
    def ok(cls, records: list[R] | tuple[R, ...]) -> "DecodeResult[R]":
        return cls(records=tuple(records))

    @classmethod
    def failed(cls, failure: FailureKind, error: str | None = None) -> "DecodeResult[R]":
        return cls(failure=failure, error=error)
