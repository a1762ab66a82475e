from typing import Sequence

import numpy as np

from .types import Sample


def to_arrays(samples: Sequence[Sample]) -> tuple[np.ndarray, np.ndarray]:
    """
    Split samples into (t, C) float arrays, keeping their order.
    """
    t = np.fromiter((s.time for s in samples), dtype=float, count=len(samples))
    C = np.fromiter((s.concentration for s in samples), dtype=float, count=len(samples))
    return t, C
