"""Outcome of one work unit attempt."""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

R = TypeVar("R")


@dataclass(frozen=True)
class Retry:
    """The unit wants to be resubmitted in the next round. Carries no payload."""


@dataclass(frozen=True)
class Done(Generic[R]):
    """The unit finished. ``result`` is opaque and may itself describe a failure."""

    result: R


Outcome: TypeAlias = Retry | Done[R]
