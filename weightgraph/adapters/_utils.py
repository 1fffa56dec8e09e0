import math
from numbers import Integral, Real

import numpy as np


def _coerce_weight(raw):
    """Best-effort conversion of a foreign weight to ``int``.

    Returns None when the value is not a finite real number. Reals are
    rounded half-to-even, as ``numpy.rint`` does.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, np.generic):
        raw = raw.item()
    if isinstance(raw, Integral):
        return int(raw)
    if isinstance(raw, Real):
        if not math.isfinite(raw):
            return None
        return int(np.rint(raw))
    return None
