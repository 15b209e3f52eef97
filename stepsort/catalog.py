"""Static descriptions of the built-in algorithms."""

from dataclasses import dataclass
from types import MappingProxyType

from .errors import UnknownAlgorithmError


@dataclass(frozen=True)
class AlgorithmDescriptor:
    key:         str
    name:        str
    complexity:  str
    best:        str
    worst:       str
    space:       str
    stable:      bool
    description: str


_DESCRIPTORS = (
    AlgorithmDescriptor(
        "bubble", "Bubble Sort", "O(n²)", "O(n)", "O(n²)", "O(1)", True,
        "Simple but inefficient for large datasets. Good for small arrays or nearly sorted data."),
    AlgorithmDescriptor(
        "selection", "Selection Sort", "O(n²)", "O(n²)", "O(n²)", "O(1)", False,
        "Simple and performs well on small arrays. Uses minimal memory."),
    AlgorithmDescriptor(
        "insertion", "Insertion Sort", "O(n²)", "O(n)", "O(n²)", "O(1)", True,
        "Efficient for small data sets and nearly sorted arrays."),
    AlgorithmDescriptor(
        "quick", "Quick Sort", "O(n log n)", "O(n log n)", "O(n²)", "O(log n)", False,
        "Generally the fastest in practice. Excellent for large datasets."),
    AlgorithmDescriptor(
        "merge", "Merge Sort", "O(n log n)", "O(n log n)", "O(n log n)", "O(n)", True,
        "Consistent performance and stable sorting. Good for linked lists."),
)

CATALOG = MappingProxyType({d.key: d for d in _DESCRIPTORS})

# (display name, key) in menu order
ALGORITHMS = [(d.name, d.key) for d in _DESCRIPTORS]

RECOMMEND_SMALL  = "Insertion Sort - Best for very small arrays (n ≤ 10)"
RECOMMEND_MEDIUM = "Quick Sort - Best for small to medium arrays (10 < n ≤ 50)"
RECOMMEND_LARGE  = "Merge Sort - Best for large arrays (n > 50) and when stability is important"


def describe(algorithm_id: str) -> AlgorithmDescriptor:
    try:
        return CATALOG[algorithm_id]
    except KeyError:
        raise UnknownAlgorithmError(algorithm_id) from None


def recommend(size: int) -> str:
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    if size <= 10:
        return RECOMMEND_SMALL
    if size <= 50:
        return RECOMMEND_MEDIUM
    return RECOMMEND_LARGE
