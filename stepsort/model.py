import enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


class RunState(enum.Enum):
    IDLE       = "idle"
    RUNNING    = "running"
    CANCELLING = "cancelling"


@dataclass
class Sequence:
    """
    Paired display/label lists that always move together.

    Attributes
    ----------
    display : list[float]  — bar magnitudes, only used for drawing
    labels  : list[float]  — the values the user entered
    """
    display: List[float] = field(default_factory=list)
    labels:  List[float] = field(default_factory=list)

    def __post_init__(self):
        if len(self.display) != len(self.labels):
            raise ValueError(
                f"display/label length mismatch: {len(self.display)} != {len(self.labels)}")

    def __len__(self):
        return len(self.labels)

    def element(self, i: int) -> Tuple[float, float]:
        return self.display[i], self.labels[i]

    def put(self, i: int, element: Tuple[float, float]):
        self.display[i], self.labels[i] = element

    def swap(self, i: int, j: int):
        d, l = self.display, self.labels
        d[i], d[j] = d[j], d[i]
        l[i], l[j] = l[j], l[i]

    def copy(self) -> "Sequence":
        return Sequence(list(self.display), list(self.labels))


@dataclass
class StepMarker:
    """Indices the viewer should highlight; None means unset."""
    active:     Optional[int] = None
    comparison: Optional[int] = None

    def set(self, active: Optional[int], comparison: Optional[int] = None):
        self.active, self.comparison = active, comparison

    def clear(self):
        self.active = self.comparison = None

    @property
    def is_clear(self) -> bool:
        return self.active is None and self.comparison is None


@dataclass(frozen=True)
class StepEvent:
    """
    Snapshot published after every observable step and once at the end.

    ``done`` is True only on the terminal event; ``cancelled`` tells an
    aborted run apart from a completed one.
    """
    algorithm:   str
    step:        int
    kind:        str
    display:     Tuple[float, ...]
    labels:      Tuple[float, ...]
    active:      Optional[int]
    comparison:  Optional[int]
    comparisons: int
    swaps:       int
    elapsed_ms:  float
    done:        bool = False
    cancelled:   bool = False
