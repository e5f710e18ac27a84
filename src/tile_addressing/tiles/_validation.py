"""Argument checks shared by the tile value types."""


def is_int(value) -> bool:
    """True for ints, excluding bools."""
    return isinstance(value, int) and not isinstance(value, bool)
