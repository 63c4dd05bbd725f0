"""
Reproducible input generation for the "randomize" control.
"""

import random
from typing import List


def random_array(size: int, seed: int, low: int = 5, high: int = 99) -> List[int]:
    """
    Random integers in [low, high], identical for identical (size, seed).

    Uses a private random.Random so the module-level generator is untouched.
    """
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(max(size, 0))]
