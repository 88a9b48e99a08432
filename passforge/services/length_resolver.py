"""Turn a length specification into a concrete length."""

import random
from passforge.domain.models import Length, RangeLength


def resolve_length(length: Length, rng: random.Random) -> int:
    """
    Resolve a length specification for one generation call.
    
    FixedLength is returned unchanged; RangeLength draws uniformly from the
    inclusive interval. No validation happens here: callers reject lengths
    below 1 and inverted ranges.
    """
    if isinstance(length, RangeLength):
        return rng.randint(length.min_length, length.max_length)
    return length.value
