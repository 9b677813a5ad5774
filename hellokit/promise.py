"""A promise that one thread completes and others wait on or subscribe to."""

import logging
import threading
from enum import Enum

logger = logging.getLogger(__name__)


class PromiseCancelled(Exception):
    """The promise was cancelled before it produced a result."""

    def __init__(self, message="Task be cancelled"):
        super().__init__(message)


class _State(Enum):
    PENDING = "pending"
    RESOLVED = "resolved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"


class Promise:
    """A value that arrives later: resolved with a value, rejected with an error, or cancelled.

    Callbacks registered before completion run in the completing thread;
    registered afterwards, they run at once. Registration returns the promise.
    """

    def __init__(self):
        self._cond = threading.Condition()
        self._state = _State.PENDING
        self._value = None
        self._error: BaseException | None = None
        self._callbacks: list[tuple[str, object]] = []

    @property
    def done(self) -> bool:
        with self._cond:
            return self._state is not _State.PENDING

    def _complete(self, state: _State, value=None, error=None) -> None:
        with self._cond:
            if self._state is not _State.PENDING:
                raise RuntimeError(f"promise already {self._state.value}")
            self._state = state
            self._value = value
            self._error = error
            callbacks, self._callbacks = self._callbacks, []
            self._cond.notify_all()
        for kind, callback in callbacks:
            self._run(kind, callback)

    def _run(self, kind: str, callback) -> None:
        state = self._state
        if kind == "success" and state is _State.RESOLVED:
            argument = self._value
        elif kind == "failure" and state is _State.REJECTED:
            argument = self._error
        elif kind == "complete" and state in (_State.RESOLVED, _State.REJECTED):
            argument = self._value if state is _State.RESOLVED else self._error
        else:
            return
        try:
            callback(argument)
        except Exception:
            logger.exception("promise callback failed")

    def resolve(self, value) -> None:
        self._complete(_State.RESOLVED, value=value)

    def reject(self, error) -> None:
        if not isinstance(error, BaseException):
            raise TypeError(f"reject needs an exception, got {error!r}")
        self._complete(_State.REJECTED, error=error)

    def cancel(self) -> None:
        self._complete(_State.CANCELLED)

    def get(self, timeout=None):
        """Wait for completion; return the value or raise the error.

        Raises PromiseCancelled if cancelled and TimeoutError if timeout runs out.
        """
        with self._cond:
            if not self._cond.wait_for(lambda: self._state is not _State.PENDING, timeout):
                raise TimeoutError("promise not completed in time")
            state, value, error = self._state, self._value, self._error
        if state is _State.RESOLVED:
            return value
        if state is _State.REJECTED:
            raise error
        raise PromiseCancelled()

    def _register(self, kind: str, callback) -> "Promise":
        with self._cond:
            if self._state is _State.PENDING:
                self._callbacks.append((kind, callback))
                return self
        self._run(kind, callback)
        return self

    def on_success(self, callback) -> "Promise":
        """Call callback(value) when the promise is resolved."""
        return self._register("success", callback)

    def on_failure(self, callback) -> "Promise":
        """Call callback(error) when the promise is rejected."""
        return self._register("failure", callback)

    def on_complete(self, callback) -> "Promise":
        """Call callback with the value or the error once resolved or rejected."""
        return self._register("complete", callback)