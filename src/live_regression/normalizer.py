#  Copyright (c) Michele De Stefano - 2026.
from collections.abc import Sequence

import numpy as np


def normalize(values: Sequence[float] | np.ndarray) -> np.ndarray:
    """
    Rescales a series so that its elements sum to 1.

    A zero sum produces non-finite values, an empty series an empty array.

    Args:
        values: The series to normalize. It is not modified.

    Returns:
        A new float array with the normalized values.
    """
    array = np.asarray(values, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        return array / array.sum()
