"""Deadline wrapper around any engine's ``prove`` call."""

from __future__ import annotations

import logging
import threading
from typing import Any

from zkcat.app.ports import Program, ProveInfo, ProverEnginePort, Receipt
from zkcat.errors import EngineError

logger = logging.getLogger(__name__)


class _ProveWorker(threading.Thread):
    """Daemon thread holding the outcome of a single ``prove`` call."""

    def __init__(self, engine: ProverEnginePort, program: Program, private_input: Any) -> None:
        super().__init__(name=f"zkcat-prove-{program.name}", daemon=True)
        self._engine = engine
        self._program = program
        self._private_input = private_input
        self.result: ProveInfo | None = None
        self.error: BaseException | None = None

    def run(self) -> None:
        try:
            self.result = self._engine.prove(self._program, self._private_input)
        except BaseException as exc:  # noqa: BLE001 - re-raised on the caller's thread
            self.error = exc


class TimeoutEngine(ProverEnginePort):
    """Run ``prove`` on a daemon worker and give up after ``timeout_seconds``.

    A timed-out run keeps executing until it returns or the process exits,
    whichever comes first; its result is discarded. ``verify`` is delegated
    unchanged.
    """

    def __init__(self, inner: ProverEnginePort, timeout_seconds: float) -> None:
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        self._inner = inner
        self._timeout = timeout_seconds

    def prove(self, program: Program, private_input: Any) -> ProveInfo:
        worker = _ProveWorker(self._inner, program, private_input)
        worker.start()
        worker.join(self._timeout)

        if worker.is_alive():
            logger.warning(
                "Proof generation for %s exceeded %.1fs; result will be discarded",
                program.name,
                self._timeout,
            )
            raise EngineError(
                f"Proof generation timed out after {self._timeout:g}s", phase="prove"
            )

        if worker.error is not None:
            raise worker.error
        assert worker.result is not None
        return worker.result

    def verify(self, image_id: str, receipt: Receipt) -> bytes:
        return self._inner.verify(image_id, receipt)
