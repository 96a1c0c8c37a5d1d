from __future__ import annotations
import math


def round_px(value: float) -> int:
    """
    Round to the nearest integer pixel, halves towards +infinity.

    Python's round() sends halves to the even neighbour, which makes a ball
    moving left and a ball moving right cover different distances.
    """
    return int(math.floor(value + 0.5))
