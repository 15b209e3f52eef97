import time
from dataclasses import dataclass


@dataclass(frozen=True)
class Metrics:
    comparisons: int = 0
    swaps:       int = 0
    elapsed_ms:  float = 0.0


class MetricsCollector:
    """
    Per-run comparison/swap counters plus wall-clock duration.

    ``reset()`` opens a run, ``finish()`` closes it; counters cannot move
    between ``finish()`` and the next ``reset()``.
    """

    def __init__(self, clock=time.perf_counter):
        self._clock      = clock
        self.comparisons = 0
        self.swaps       = 0
        self._started    = None
        self._elapsed    = 0.0
        self.finished    = True

    def reset(self):
        self.comparisons = 0
        self.swaps       = 0
        self._elapsed    = 0.0
        self._started    = self._clock()
        self.finished    = False

    def _check_open(self):
        if self.finished:
            raise RuntimeError("metrics are read-only until the next reset()")

    def compare(self):
        self._check_open()
        self.comparisons += 1

    def swap(self):
        self._check_open()
        self.swaps += 1

    def finish(self) -> Metrics:
        if not self.finished:
            self._elapsed = (self._clock() - self._started) * 1000.0
            self.finished = True
        return self.snapshot()

    @property
    def elapsed_ms(self) -> float:
        if self.finished or self._started is None:
            return self._elapsed
        return (self._clock() - self._started) * 1000.0

    def snapshot(self) -> Metrics:
        return Metrics(self.comparisons, self.swaps, self.elapsed_ms)
