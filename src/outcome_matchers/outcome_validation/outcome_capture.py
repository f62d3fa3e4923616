"""Procedure execution and error introspection."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

Procedure = Callable[[], object]

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CapturedOutcome:
    """What a procedure did: raised `error`, or completed normally when `error` is None."""

    error: BaseException | None

    @property
    def raised(self) -> bool:
        """Return True when the procedure raised."""
        return self.error is not None


def capture_outcome(subject: Procedure | BaseException) -> CapturedOutcome:
    """Run a procedure once and capture what it raised.

    An error instance is taken as already captured and is not executed.
    `KeyboardInterrupt` is re-raised so an interrupted run stops.
    """
    if isinstance(subject, BaseException):
        return CapturedOutcome(error=subject)
    try:
        subject()
    except KeyboardInterrupt:
        raise
    except BaseException as exc:  # noqa: BLE001
        _LOGGER.debug("procedure %r raised %s", subject, type(exc).__name__)
        return CapturedOutcome(error=exc)
    _LOGGER.debug("procedure %r completed without raising", subject)
    return CapturedOutcome(error=None)


def error_message(error: BaseException) -> str | None:
    """Return the error's message, or None when it was raised without arguments."""
    if not error.args:
        return None
    return str(error)


def error_cause(error: BaseException) -> BaseException | None:
    """Return the explicit `raise ... from` cause; an implicit context does not count."""
    return error.__cause__
