import random
from typing import Optional


def get_rng(seed: Optional[int] = None) -> random.Random:
    """Seeded generator for reproducible draws, or a fresh one when seed is None."""
    return random.Random(seed)
