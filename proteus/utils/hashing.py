"""Deterministic short hashing for generated identifiers.

The hash must stay bit-for-bit identical across platforms and releases:
identifiers already committed to user code depend on it.
"""

_SEED = 5381
_MASK = 0xFFFFFFFF
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def short_stable_hash(value: str) -> str:
    """Hash a string to a short base-36 token.

    32-bit rolling hash (seed 5381, ``h = (h * 33) ^ unit`` per UTF-16
    code unit), rendered as an unsigned base-36 string.

    Args:
        value: The input string.

    Returns:
        The lower-case base-36 rendering of the unsigned 32-bit hash.
    """
    h = _SEED
    data = value.encode("utf-16-le", errors="surrogatepass")
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = ((h * 33) ^ unit) & _MASK
    return to_base36(h)


def to_base36(number: int) -> str:
    """Render a non-negative integer in base 36."""
    if number == 0:
        return "0"
    digits: list[str] = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_DIGITS[remainder])
    return "".join(reversed(digits))
