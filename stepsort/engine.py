"""
SortSession: owns one Sequence and runs at most one sort over it at a time.

State machine
-------------
    IDLE --run_sort()--> RUNNING --finish-----------> IDLE
                         RUNNING --cancel()--> CANCELLING --next pace()--> IDLE

``run_sort`` and every input setter raise ``BusyError`` unless the session
is IDLE. Whatever way a run ends, the marker is cleared, metrics are
finished and the session returns to IDLE before the terminal event is
published.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, List

from . import settings
from .algorithms import get_sorter
from .catalog import describe, recommend
from .emitter import CancelToken, StepEmitter
from .errors import (EMPTY_INPUT_MSG, BusyError, InvalidInputError,
                     SortCancelled)
from .metrics import Metrics, MetricsCollector
from .model import RunState, Sequence, StepEvent, StepMarker
from .scaler import build_sequence, parse_values, random_values

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunResult:
    algorithm: str
    sequence:  Sequence
    metrics:   Metrics
    steps:     int
    cancelled: bool = False


class SortSession:
    def __init__(self, values=None, max_size: int = settings.MAX_INPUT_SIZE):
        self.max_size  = max_size
        self.sequence  = Sequence()
        self.marker    = StepMarker()
        self.metrics   = MetricsCollector()
        self.state     = RunState.IDLE
        self.algorithm = None
        self._token    = None
        self._observers: List[Callable[[StepEvent], None]] = []
        if values is not None:
            self.set_input(values)

    # ---------------------------------------------------------- input

    def _check_idle(self, action):
        if self.state is not RunState.IDLE:
            raise BusyError(f"cannot {action} while a sort is {self.state.value}")

    def set_input(self, values) -> Sequence:
        """Replace the sequence; on InvalidInputError the old one is kept."""
        self._check_idle("set input")
        try:
            seq = build_sequence(values, self.max_size)
        except InvalidInputError as e:
            logger.warning("Rejected input: %s", e)
            raise
        self.sequence = seq
        self.marker.clear()
        logger.info("Input set: %d elements", len(seq))
        return seq

    def set_text_input(self, text: str) -> Sequence:
        self._check_idle("set input")
        try:
            values = parse_values(text, self.max_size)
        except InvalidInputError as e:
            logger.warning("Rejected input %r: %s", text, e)
            raise
        return self.set_input(values)

    def randomize(self, size: int = settings.RANDOM_SIZE, rng=None, seed=None) -> Sequence:
        self._check_idle("set input")
        return self.set_input(random_values(size, rng=rng, seed=seed))

    # ---------------------------------------------------------- catalog

    def describe(self, algorithm_id):
        return describe(algorithm_id)

    def recommend(self, size=None) -> str:
        return recommend(len(self.sequence) if size is None else size)

    # ---------------------------------------------------------- observers

    def subscribe(self, callback: Callable[[StepEvent], None]) -> Callable[[], None]:
        """Register ``callback`` for every StepEvent; returns an unsubscribe function."""
        self._observers.append(callback)

        def unsubscribe():
            if callback in self._observers:
                self._observers.remove(callback)
        return unsubscribe

    def _event(self, step, kind, done=False, cancelled=False) -> StepEvent:
        seq = self.sequence
        return StepEvent(
            algorithm=self.algorithm, step=step, kind=kind,
            display=tuple(seq.display), labels=tuple(seq.labels),
            active=self.marker.active, comparison=self.marker.comparison,
            comparisons=self.metrics.comparisons, swaps=self.metrics.swaps,
            elapsed_ms=self.metrics.elapsed_ms, done=done, cancelled=cancelled,
        )

    def _publish(self, event: StepEvent):
        for cb in list(self._observers):
            cb(event)

    # ---------------------------------------------------------- running

    @property
    def running(self) -> bool:
        return self.state is not RunState.IDLE

    def cancel(self) -> bool:
        """Ask the in-flight run to stop at its next pacing point."""
        if self.state is not RunState.RUNNING:
            return False
        self.state = RunState.CANCELLING
        self._token.cancel()
        logger.info("Cancelling %s sort", self.algorithm)
        return True

    def _begin(self, algorithm_id, pace_ms):
        sorter = get_sorter(algorithm_id)
        if pace_ms < 0:
            raise ValueError(f"pace_ms must be non-negative, got {pace_ms}")
        self._check_idle("start a sort")
        if not len(self.sequence):
            raise InvalidInputError(EMPTY_INPUT_MSG)
        self.state     = RunState.RUNNING
        self.algorithm = algorithm_id
        self._token    = CancelToken()
        self.sequence  = self.sequence.copy()
        self.marker.clear()
        self.metrics.reset()
        logger.info("Starting %s sort on %d elements (pace %sms)",
                    algorithm_id, len(self.sequence), pace_ms)
        return sorter

    async def _execute(self, sorter, pace_ms) -> RunResult:
        emitter   = StepEmitter(self._token)
        gen       = sorter(self.sequence, self.marker, self.metrics)
        steps     = 0
        cancelled = False
        try:
            for kind in gen:
                steps += 1
                logger.debug("%s step %d: %s active=%s comparison=%s", self.algorithm,
                             steps, kind, self.marker.active, self.marker.comparison)
                self._publish(self._event(steps, kind))
                await emitter.pace(pace_ms)
        except SortCancelled:
            cancelled = True
        finally:
            gen.close()
            self.marker.clear()
            metrics = self.metrics.finish()
            self.state  = RunState.IDLE
            self._token = None
        if cancelled:
            logger.info("%s sort cancelled after %d steps", self.algorithm, steps)
        else:
            logger.info("%s sort finished: %d comparisons, %d swaps, %.2fms",
                        self.algorithm, metrics.comparisons, metrics.swaps, metrics.elapsed_ms)
        self._publish(self._event(steps, "cancelled" if cancelled else "done",
                                  done=True, cancelled=cancelled))
        return RunResult(self.algorithm, self.sequence.copy(), metrics, steps, cancelled)

    async def run_sort(self, algorithm_id: str, pace_ms: float = settings.DEFAULT_PACE_MS) -> RunResult:
        """
        Sort the current sequence with ``algorithm_id``, pausing ``pace_ms``
        after every observable step.

        Raises UnknownAlgorithmError or BusyError before anything changes.
        """
        sorter = self._begin(algorithm_id, pace_ms)
        return await self._execute(sorter, pace_ms)

    async def stream(self, algorithm_id: str, pace_ms: float = settings.DEFAULT_PACE_MS):
        """
        Run a sort and yield its StepEvents as they happen.

        The last event yielded has ``done=True``. Leaving the loop early
        cancels the run.
        """
        sorter = self._begin(algorithm_id, pace_ms)
        queue  = asyncio.Queue()
        unsubscribe = self.subscribe(queue.put_nowait)
        task = asyncio.ensure_future(self._execute(sorter, pace_ms))
        try:
            while True:
                if task.done() and queue.empty():
                    break
                getter = asyncio.ensure_future(queue.get())
                await asyncio.wait({getter, task}, return_when=asyncio.FIRST_COMPLETED)
                if not getter.done():
                    getter.cancel()
                    continue
                event = getter.result()
                yield event
                if event.done:
                    break
        finally:
            unsubscribe()
            if not task.done():
                self.cancel()
            await task
