"""Positional-notation decoding and encoding for bases 2 through 36.

Digits are 0-9 then a-z (case-insensitive), so 'z' is 35.
Values are plain Python ints, which are unbounded.
"""

import string

from polyrecon.errors import InvalidCharacter, DigitOutOfRange, InvalidBase

MIN_BASE = 2
MAX_BASE = 36

_ALPHABET = string.digits + string.ascii_lowercase  # index == digit value


def _check_base(base) -> int:
    # bool is an int subclass but never a meaningful base
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(base)
    if not (MIN_BASE <= base <= MAX_BASE):
        raise InvalidBase(base)
    return base


def digit_value(char: str) -> int:
    """Value of a single digit character: '0'-'9' -> 0-9, letters -> 10-35."""
    if len(char) != 1:
        raise InvalidCharacter(char)
    if '0' <= char <= '9':
        return ord(char) - ord('0')
    if 'a' <= char <= 'z':
        return ord(char) - ord('a') + 10
    if 'A' <= char <= 'Z':
        return ord(char) - ord('A') + 10
    raise InvalidCharacter(char)


def decode(digits: str, base: int) -> int:
    """Decode an unsigned digit string written in `base`.

    Most significant digit first. No whitespace or sign handling; the
    empty string decodes to 0.

    Raises:
        InvalidBase: base is not an int in [2, 36].
        InvalidCharacter: a character is not a recognised digit.
        DigitOutOfRange: a digit's value is >= base.
    """
    _check_base(base)
    result = 0
    for pos, char in enumerate(digits):
        try:
            d = digit_value(char)
        except InvalidCharacter:
            raise InvalidCharacter(char, pos) from None
        if d >= base:
            raise DigitOutOfRange(char, d, base, pos)
        result = result * base + d
    return result


def encode(n: int, base: int) -> str:
    """Format n in `base` using lowercase digits. Inverse of decode()."""
    _check_base(base)
    if n == 0:
        return '0'
    sign = '-' if n < 0 else ''
    n = abs(n)
    out = []
    while n:
        n, d = divmod(n, base)
        out.append(_ALPHABET[d])
    return sign + ''.join(reversed(out))
