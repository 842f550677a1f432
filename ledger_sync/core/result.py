"""Result types for railway-oriented programming.

Every step of the sync pipeline returns a Result instead of raising, so the
orchestrator can stop at the first Failure and report which step failed.

Usage:
    async def load(environment: QboEnvironment) -> Result[CredentialRecord, DomainError]:
        record = await repo.find_by_environment(environment)
        if record is None:
            return Failure(error=NotConnectedError(...))
        return Success(value=record)

    match await store.load(environment):
        case Success(value=record):
            ...
        case Failure(error=error):
            logger.warning("credential_load_failed", error=error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful step result.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed step result.

    Attributes:
        error: The error that stopped the step.
    """

    error: E


Result = Success[T] | Failure[E]
