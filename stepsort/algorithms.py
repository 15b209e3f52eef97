# ============================================================
# ===================== SORTING ALGORITHMS ===================
# ============================================================
#
# Every algorithm is a generator taking (seq, mark, stats):
#   seq   — the Sequence to sort in place (labels are compared,
#           display magnitudes ride along)
#   mark  — the StepMarker to update before each step
#   stats — the MetricsCollector to count comparisons/swaps on
# and yields a short step kind ("swap", "compare", "place") at every
# point where the driver should pause. Markers may change between
# yields without a pause; only yields are observable steps.
#
# Counting rules:
#   * one comparison per label comparison actually evaluated
#   * one swap per exchange of two distinct positions
#   * merge sort writes from its buffers and never counts swaps

from .errors import UnknownAlgorithmError


def bubble_sort(seq, mark, stats):
    n, lab = len(seq), seq.labels
    for i in range(n - 1):
        for j in range(n - i - 1):
            mark.set(j, j + 1)
            stats.compare()
            if lab[j] > lab[j + 1]:
                seq.swap(j, j + 1); stats.swap()
                yield "swap"


def selection_sort(seq, mark, stats):
    n, lab = len(seq), seq.labels
    for i in range(n - 1):
        mi = i
        mark.set(i)
        for j in range(i + 1, n):
            mark.set(i, j)
            stats.compare()
            if lab[j] < lab[mi]: mi = j
            yield "compare"
        if mi != i:
            seq.swap(i, mi); stats.swap()


def insertion_sort(seq, mark, stats):
    # The key walks left by adjacent swaps, so the sequence stays a
    # permutation of the input at every pause.
    n, lab = len(seq), seq.labels
    for i in range(1, n):
        mark.set(i)
        j = i - 1
        while j >= 0:
            stats.compare()
            if not lab[j] > lab[j + 1]: break
            mark.set(i, j)
            seq.swap(j, j + 1); stats.swap()
            j -= 1
            yield "swap"


def quick_sort(seq, mark, stats):
    lab = seq.labels

    def _partition(lo, hi):
        pivot = lab[hi]; i = lo - 1
        for j in range(lo, hi):
            mark.set(j, hi)
            stats.compare()
            if lab[j] < pivot:
                i += 1
                if i != j: seq.swap(i, j); stats.swap()
            yield "compare"
        if i + 1 != hi: seq.swap(i + 1, hi); stats.swap()
        return i + 1

    def _q(lo, hi):
        if lo < hi:
            p = yield from _partition(lo, hi)
            yield from _q(lo, p - 1)
            yield from _q(p + 1, hi)

    yield from _q(0, len(seq) - 1)


def merge_sort(seq, mark, stats):
    lab = seq.labels

    def _m(lo, mid, hi):
        L = [seq.element(x) for x in range(lo, mid + 1)]
        R = [seq.element(x) for x in range(mid + 1, hi + 1)]
        i = j = 0; k = lo
        try:
            while i < len(L) and j < len(R):
                mark.set(k, mid + 1 + j)
                stats.compare()
                if L[i][1] <= R[j][1]: seq.put(k, L[i]); i += 1
                else:                  seq.put(k, R[j]); j += 1
                k += 1
                yield "place"
            while i < len(L):
                mark.set(k, None)
                seq.put(k, L[i]); i += 1; k += 1
                yield "place"
            while j < len(R):
                mark.set(k, mid + 1 + j)
                seq.put(k, R[j]); j += 1; k += 1
                yield "place"
        finally:
            # closed mid-merge: flush what is still buffered so no
            # element is lost or duplicated
            for e in L[i:] + R[j:]:
                seq.put(k, e); k += 1

    def _ms(lo, hi):
        if lo < hi:
            mid = (lo + hi) // 2
            yield from _ms(lo, mid); yield from _ms(mid + 1, hi)
            yield from _m(lo, mid, hi)

    yield from _ms(0, len(seq) - 1)


SORTERS = {
    "bubble":    bubble_sort,
    "selection": selection_sort,
    "insertion": insertion_sort,
    "quick":     quick_sort,
    "merge":     merge_sort,
}


def get_sorter(key):
    if key in SORTERS: return SORTERS[key]
    raise UnknownAlgorithmError(key)


def get_generator(key, seq, mark, stats):
    return get_sorter(key)(seq, mark, stats)
