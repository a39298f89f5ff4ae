"""
Random seed management for reproducibility.

Every agent draws from its own NumPy generator, so seeding means handing
each one a generator built from the run's base seed.
"""

from __future__ import annotations

from typing import Optional
import numpy as np


def make_rng(seed: Optional[int] = None, offset: int = 0) -> np.random.Generator:
    """
    Create a NumPy generator.

    Args:
        seed: Base seed, or None for an unseeded generator
        offset: Added to the seed so several agents can share a base seed
    """
    if seed is None:
        return np.random.default_rng()
    return np.random.default_rng(seed + offset)
