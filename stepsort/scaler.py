"""
Input parsing and display scaling.

Turns raw numbers (typed text or a random draw) into a ``Sequence`` whose
``display`` list holds bar magnitudes in [MAG_LOW, MAG_HIGH] and whose
``labels`` list keeps the original values.
"""

import logging
import math
import re

import numpy as np

from . import settings
from .errors import (EMPTY_INPUT_MSG, INVALID_TOKEN_MSG, TOO_MANY_MSG,
                     InvalidInputError)
from .model import Sequence

logger = logging.getLogger(__name__)

_SPLIT = re.compile(r"[,\s]+")


def _as_label(value: float):
    # 5.0 reads better as 5 under a bar
    v = float(value)
    return int(v) if v.is_integer() else v


def parse_values(text: str, max_size: int = settings.MAX_INPUT_SIZE) -> list:
    """Split ``text`` on commas/whitespace and parse every token as a number."""
    tokens = [t for t in _SPLIT.split(text.strip()) if t]
    values = []
    for tok in tokens:
        try:
            v = float(tok)
        except ValueError:
            raise InvalidInputError(INVALID_TOKEN_MSG) from None
        if not math.isfinite(v):
            raise InvalidInputError(INVALID_TOKEN_MSG)
        values.append(_as_label(v))
    _check_size(len(values), max_size)
    return values


def random_values(size: int = settings.RANDOM_SIZE, rng=None, seed=None) -> list:
    """Integers drawn uniformly from [RANDOM_LOW, RANDOM_HIGH)."""
    rng = rng if rng is not None else np.random.default_rng(seed)
    return rng.integers(settings.RANDOM_LOW, settings.RANDOM_HIGH, size=size).tolist()


def _check_size(n: int, max_size: int):
    if n == 0:
        raise InvalidInputError(EMPTY_INPUT_MSG)
    if n > max_size:
        raise InvalidInputError(TOO_MANY_MSG.format(limit=max_size))


def scale(values, max_size: int = settings.MAX_INPUT_SIZE) -> list:
    """
    Map ``values`` to bar magnitudes, preserving relative order.

    Non-negative input uses ``MAG_LOW + span * value / max``, so the largest
    value always lands on MAG_HIGH. All-zero input maps to MAG_MID. Input
    with negatives is min-max normalised instead, since dividing by the
    maximum would flip or overflow the range.
    """
    try:
        raw = np.asarray(values)
    except (TypeError, ValueError):
        raise InvalidInputError(INVALID_TOKEN_MSG) from None
    # strings and objects are not numbers, even when numpy could cast them
    if raw.ndim != 1 or (raw.size and raw.dtype.kind not in "biuf"):
        raise InvalidInputError(INVALID_TOKEN_MSG)
    arr = raw.astype(np.float64)
    _check_size(arr.size, max_size)
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError(INVALID_TOKEN_MSG)

    lo, hi = arr.min(), arr.max()
    span = settings.MAG_HIGH - settings.MAG_LOW
    if lo < 0:
        # bring everything into [-1, 1] first; hi - lo can overflow
        a = arr / max(abs(lo), abs(hi))
        a_lo, a_hi = a.min(), a.max()
        if a_hi == a_lo:
            mags = np.full(arr.shape, settings.MAG_MID)
        else:
            mags = settings.MAG_LOW + span * (a - a_lo) / (a_hi - a_lo)
    elif hi == 0:
        mags = np.full(arr.shape, settings.MAG_MID)
    else:
        mags = settings.MAG_LOW + span * (arr / hi)
    return mags.tolist()


def build_sequence(values, max_size: int = settings.MAX_INPUT_SIZE) -> Sequence:
    mags = scale(values, max_size)
    labels = [_as_label(v) for v in values]
    logger.debug("Built sequence of %d elements", len(labels))
    return Sequence(mags, labels)
