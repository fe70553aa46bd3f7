# showcase_api/providers/transformers_provider.py
from __future__ import annotations

"""Local provider backed by Hugging Face `transformers` pipelines.

One pipeline is built lazily per (task, model) pair and kept until it has
been idle for longer than the configured unload window. Pipeline calls are
blocking, so `invoke` runs them in a worker thread.
"""

import asyncio
import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable

from showcase_api.providers.base import InferenceProvider

logger = logging.getLogger(__name__)


@dataclass
class _Entry:
    pipe: Any
    loaded_at: float = field(default_factory=time.monotonic)
    last_used: float = field(default_factory=time.monotonic)
    calls: int = 0


def _default_factory(task: str, model: str, device: str | None) -> Any:
    from transformers import pipeline  # heavy import, deferred to first use

    kwargs: dict[str, Any] = {"model": model}
    if device:
        kwargs["device"] = device
    return pipeline(task, **kwargs)


class TransformersProvider(InferenceProvider):
    name = "transformers"

    def __init__(
        self,
        device: str | None = None,
        factory: Callable[[str, str, str | None], Any] | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.device = device
        self._factory = factory or _default_factory
        self._clock = clock
        self._pipes: dict[tuple[str, str], _Entry] = {}
        # guards the two dicts only; a load runs under its own per-pair lock
        self._lock = threading.Lock()
        self._loading: dict[tuple[str, str], threading.Lock] = {}

    # ---------- pool ----------

    def _touch(self, key: tuple[str, str]) -> Any:
        with self._lock:
            entry = self._pipes.get(key)
            if entry is None:
                return None
            entry.last_used = self._clock()
            entry.calls += 1
            return entry.pipe

    def _get(self, task: str, model: str) -> Any:
        key = (task, model)
        pipe = self._touch(key)
        if pipe is not None:
            return pipe

        with self._lock:
            load_lock = self._loading.setdefault(key, threading.Lock())
        with load_lock:
            # another thread may have finished the same load while we waited
            pipe = self._touch(key)
            if pipe is not None:
                return pipe
            logger.info("Loading pipeline task=%s model=%s device=%s", task, model, self.device)
            started = self._clock()
            pipe = self._factory(task, model, self.device)
            now = self._clock()
            with self._lock:
                self._pipes[key] = _Entry(pipe=pipe, loaded_at=now, last_used=now, calls=1)
                self._loading.pop(key, None)
            logger.info("Loaded %s in %.1fs", model, now - started)
            return pipe

    def preload(self, task: str, model: str) -> None:
        self._get(task, model)

    def sweep_idle(self, max_idle_seconds: float) -> int:
        now = self._clock()
        with self._lock:
            stale = [k for k, e in self._pipes.items() if now - e.last_used > max_idle_seconds]
            for key in stale:
                del self._pipes[key]
        for task, model in stale:
            logger.info("Unloaded idle pipeline task=%s model=%s", task, model)
        return len(stale)

    def loaded(self) -> list[dict[str, Any]]:
        with self._lock:
            return [
                {"task": t, "model": m, "calls": e.calls, "idle_seconds": round(self._clock() - e.last_used, 1)}
                for (t, m), e in self._pipes.items()
            ]

    # ---------- inference ----------

    def _run(self, task: str, model: str, data: Any, options: dict[str, Any]) -> Any:
        pipe = self._get(task, model)
        return pipe(data, **options)

    async def invoke(self, task: str, model: str, data: Any, **options: Any) -> Any:
        return await asyncio.to_thread(self._run, task, model, data, options)
