# showcase_ui/core/lifecycle.py
from __future__ import annotations

"""Request/response lifecycle shared by every demo widget.

Each widget owns one `AsyncTask`:

    Idle --submit(valid artifact)--> Busy
    Busy --provider resolves-------> Success  (result populated)
    Busy --provider rejects--------> Failure  (result empty, or the widget's fallback)
    any  --new artifact supplied---> Idle     (result cleared)

The task suspends at exactly one point, the awaited provider call. No
cancellation is passed to the provider. Instead, every `supply()`/`reset()`
and every `submit()` bumps a generation counter, and a settlement that comes
back with an older generation is dropped so it cannot overwrite newer state.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

A = TypeVar("A")  # artifact
R = TypeVar("R")  # result record


class Phase(str, Enum):
    IDLE = "idle"
    BUSY = "busy"
    SUCCESS = "success"
    FAILURE = "failure"

    @property
    def settled(self) -> bool:
        return self in (Phase.SUCCESS, Phase.FAILURE)


@dataclass
class TaskState(Generic[A, R]):
    phase: Phase = Phase.IDLE
    artifact: Optional[A] = None
    result: Optional[R] = None
    error: Optional[str] = None
    generation: int = 0


class AsyncTask(Generic[A, R]):
    """
    Generic idle/busy/settled state machine around one awaited provider call.

    Args:
        name: label used in log records.
        is_valid: predicate the current artifact must satisfy before submit.
        invoke: coroutine function turning an artifact into a result record.
        on_failure: optional fallback result for a failed invocation; when
            omitted a failure leaves the result empty.
    """

    def __init__(
        self,
        name: str,
        is_valid: Callable[[A], bool],
        invoke: Callable[[A], Awaitable[R]],
        on_failure: Optional[Callable[[A, Exception], Optional[R]]] = None,
    ) -> None:
        self.name = name
        self._is_valid = is_valid
        self._invoke = invoke
        self._on_failure = on_failure
        self._state: TaskState[A, R] = TaskState()

    # ---------- read-only view ----------

    @property
    def state(self) -> TaskState[A, R]:
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def artifact(self) -> Optional[A]:
        return self._state.artifact

    @property
    def result(self) -> Optional[R]:
        return self._state.result

    @property
    def busy(self) -> bool:
        return self._state.phase is Phase.BUSY

    def can_submit(self) -> bool:
        artifact = self._state.artifact
        return (not self.busy) and artifact is not None and bool(self._is_valid(artifact))

    # ---------- transitions ----------

    def supply(self, artifact: Optional[A]) -> None:
        """Replace the artifact; clears result and busy flag (in-flight call keeps running)."""
        self._state = TaskState(
            phase=Phase.IDLE,
            artifact=artifact,
            generation=self._state.generation + 1,
        )

    def reset(self) -> None:
        self.supply(None)

    async def submit(self) -> Phase:
        if not self.can_submit():
            return self._state.phase

        state = self._state
        state.generation += 1
        ticket = state.generation
        artifact = state.artifact
        state.phase = Phase.BUSY
        state.result = None
        state.error = None

        try:
            result = await self._invoke(artifact)
        except Exception as exc:
            logger.exception("%s: invocation failed", self.name)
            if self._is_stale(ticket):
                return self._state.phase
            state.phase = Phase.FAILURE
            state.error = str(exc) or type(exc).__name__
            state.result = self._on_failure(artifact, exc) if self._on_failure else None
            return state.phase

        if self._is_stale(ticket):
            logger.info("%s: dropped result of superseded invocation", self.name)
            return self._state.phase
        state.phase = Phase.SUCCESS
        state.result = result
        return state.phase

    def _is_stale(self, ticket: int) -> bool:
        return self._state.generation != ticket

    # ---------- sync entry point ----------

    def run(self) -> Phase:
        """Drive `submit()` to settlement from synchronous code (the Streamlit script thread)."""
        return asyncio.run(self.submit())
