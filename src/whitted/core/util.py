"""Numeric tolerance helpers shared by every geometric computation.

Every scalar that takes part in a sign test (a ray parameter, a dot
product, a discriminant) is passed through :func:`align_zero` first, so
values produced by floating-point noise around zero are treated as exact
zeros instead of spurious positive or negative results.
"""

# Magnitude below which a computed scalar is considered zero
ZERO_THRESHOLD = 1e-10


def is_zero(number: float) -> bool:
    """Check whether a number is zero within :data:`ZERO_THRESHOLD`."""
    return abs(number) < ZERO_THRESHOLD


def align_zero(number: float) -> float:
    """Round a number to exactly zero when it is within the tolerance.

    Args:
        number: The value to align.

    Returns:
        ``0.0`` if ``number`` is near zero, otherwise ``number`` unchanged.
    """
    return 0.0 if is_zero(number) else number
