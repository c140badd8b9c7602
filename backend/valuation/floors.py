import math

DCF_FLOOR = 50_000.0
BOOK_VALUE_FLOOR = 1_000.0
MULTIPLES_FLOOR = 10_000.0


def round_half_up(value: float) -> float:
    """Round to the nearest integer, ties toward +infinity (2.5 -> 3, -2.5 -> -2).

    Raises OverflowError when ``value`` is not finite.
    """
    if not math.isfinite(value):
        raise OverflowError(f"cannot round non-finite value {value}")
    return float(math.floor(value + 0.5))


def apply_floor(value: float, floor: float, unfloored: float | None = None) -> tuple[float, bool]:
    """Return (max(floor, value), floor_applied).

    The floor counts as applied only when the unfloored figure was strictly below it.
    """
    final = max(floor, value)
    raw = value if unfloored is None else unfloored
    return final, final == floor and raw < floor
