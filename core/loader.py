# core/loader.py

"""
Simulated loading work that runs before the registry applies a mutation.

A `Loader` writes a message, then a progress indicator once per tick, pausing a
fixed interval between ticks. `run_blocking()` runs a loader on a single-worker thread pool
and waits for it before returning, so the work never outlives the call that started it.

Interruption is best-effort: a loader can be cancelled through its event, and the
caller carries on regardless of whether the loader finished.
"""

from __future__ import annotations

import logging
import sys
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import TextIO

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoaderConfig:
    """
    Settings for the simulated loading work.

    Attributes:
        ticks: Number of pauses before the loader completes.
        tick_interval: Seconds to pause per tick.
        indicator: Text written after each tick.
    """

    ticks: int = 5
    tick_interval: float = 0.3
    indicator: str = "."


class Loader:

    def __init__(
        self,
        message: str,
        config: LoaderConfig | None = None,
        stream: TextIO | None = None,
        cancel_event: threading.Event | None = None,
    ):
        self._message: str = message
        self._config: LoaderConfig = config or LoaderConfig()
        self._stream: TextIO | None = stream
        self._cancel_event: threading.Event = cancel_event or threading.Event()
        self._ticks_done: int = 0
        self._completed: bool = False

    # === properties ===

    @property
    def message(self) -> str:
        return self._message

    @property
    def ticks_done(self) -> int:
        return self._ticks_done

    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def cancel_event(self) -> threading.Event:
        return self._cancel_event

    # === work ===

    def cancel(self) -> None:
        self._cancel_event.set()

    def run(self) -> None:
        """
        Writes the message and one indicator per tick, then a newline.

        Notes:
            - Each pause waits on the cancel event, so cancellation takes effect mid-tick.
            - On cancellation, writes an interruption notice and returns with `completed` left False.
        """
        self._write(self._message)

        for _ in range(self._config.ticks):
            if self._cancel_event.wait(self._config.tick_interval):
                self._write("\nLoading interrupted.\n")
                logger.warning(
                    "%s interrupted after %d of %d ticks",
                    self._message,
                    self._ticks_done,
                    self._config.ticks,
                )
                return

            self._ticks_done += 1
            self._write(self._config.indicator)

        self._write("\n")
        self._completed = True

    # === helper methods ===

    def _write(self, text: str) -> None:
        # sys.stdout is looked up per write, not bound at construction
        stream = self._stream or sys.stdout
        stream.write(text)
        stream.flush()

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Loader({self._message!r}, {self._ticks_done}/{self._config.ticks})"


def run_blocking(loader: Loader) -> bool:
    """
    Runs a `Loader` on a single-worker thread pool and waits for it to finish.

    Args:
        loader (Loader): The loader to run.

    Returns:
        True if the loader ran every tick, and False if it was interrupted.

    Notes:
        - A `KeyboardInterrupt` received while waiting cancels the loader. Waiting then continues,
          through any further interrupts, until the loader returns. Interrupts are logged and not re-raised.
        - The worker thread is joined by the pool shutdown before this function returns.
    """
    thread_name = f"loader-{loader.message.lower()}"

    with ThreadPoolExecutor(max_workers=1, thread_name_prefix=thread_name) as executor:
        future = executor.submit(loader.run)

        try:
            future.result()

        except KeyboardInterrupt:
            loader.cancel()
            logger.warning("%s cancelled by keyboard interrupt", loader.message)
            _wait_through_interrupts(future)

    return loader.completed


def _wait_through_interrupts(future: Future) -> None:
    while True:
        try:
            future.result()
            return

        except KeyboardInterrupt:
            logger.warning("ignoring repeated keyboard interrupt while loader stops")
