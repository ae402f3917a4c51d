import math

from .models import PMSample


def normalize(samples: list[PMSample]) -> float:
    """Reduce the pm25 samples to one value: the first sample, as a float.

    Returns 0.0 for an empty list, a string that does not parse, or any
    non-finite value (json accepts NaN and Infinity literals).
    """
    if not samples:
        return 0.0

    first = samples[0]
    if isinstance(first, str):
        try:
            value = float(first.strip())
        except ValueError:
            return 0.0
    else:
        value = float(first)
    return value if math.isfinite(value) else 0.0
