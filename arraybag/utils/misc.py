import random
from typing import List

import numpy as np


def set_random_seed(seed: int = 0) -> None:
    """Set random seed for `Python` and `numpy`."""
    random.seed(seed)
    np.random.seed(seed)


def sample_values(num_values: int, low: int = 0, high: int = 50) -> List[float]:
    """Draw `num_values` integers uniformly from `[low, high)` and return them as floats."""
    return [float(x) for x in np.random.randint(low, high, size=num_values)]
