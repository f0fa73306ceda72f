"""Error kinds raised while reconstructing a polynomial's constant term.

Everything derives from ReconstructionError (itself a ValueError), so a
caller can catch one kind or the whole family.
"""

from typing import Optional

# Larger ints are summarised in messages; str() refuses very long ones.
MAX_SHOWN_BITS = 4096


def describe_int(n) -> str:
    """Decimal text for n, or '<N-bit integer>' when n is too long to show."""
    if isinstance(n, int) and not isinstance(n, bool) and n.bit_length() > MAX_SHOWN_BITS:
        sign = '-' if n < 0 else ''
        return f"<{sign}{n.bit_length()}-bit integer>"
    return repr(n)


class ReconstructionError(ValueError):
    """Base class for every failure in decoding, interpolation or loading."""


class InvalidCharacter(ReconstructionError):
    """A character is not a usable digit.

    Raised as is for characters outside 0-9, a-z, A-Z; see DigitOutOfRange
    for recognised digits that the base does not allow.
    """

    def __init__(self, char: str, position: Optional[int] = None,
                 message: Optional[str] = None):
        self.char = char
        self.position = position
        if message is None:
            where = f" at position {position}" if position is not None else ""
            message = f"Invalid character {char!r}{where}"
        super().__init__(message)


class DigitOutOfRange(InvalidCharacter):
    """A digit's value is not below the declared base."""

    def __init__(self, char: str, digit: int, base: int,
                 position: Optional[int] = None):
        self.digit = digit
        self.base = base
        where = f" at position {position}" if position is not None else ""
        super().__init__(
            char, position,
            f"Digit {char!r} (value {digit}){where} out of range for base {base}",
        )


class InvalidBase(ReconstructionError):
    def __init__(self, base):
        self.base = base
        super().__init__(
            f"Base must be an integer in [2, 36], got {describe_int(base)}")


class DuplicateXValue(ReconstructionError):
    """Two points share an x-coordinate, so a denominator would be zero."""

    def __init__(self, x: int):
        self.x = x
        super().__init__(f"Duplicate x-coordinate {describe_int(x)}")


class NonIntegralTerm(ReconstructionError):
    """The interpolated value is not an integer.

    Only possible when the points do not lie on one polynomial with
    integer values at the target.
    """

    def __init__(self, numerator: int, denominator: int, target: int = 0):
        self.numerator = numerator
        self.denominator = denominator
        self.target = target
        super().__init__(
            f"Interpolated value at x={describe_int(target)} is "
            f"{describe_int(numerator)}/{describe_int(denominator)}, "
            f"not an integer; points are not consistent with an integer "
            f"polynomial"
        )


class MalformedInput(ReconstructionError):
    """Structurally invalid input document."""


class MissingField(MalformedInput):
    def __init__(self, field: str, where: Optional[str] = None):
        self.field = field
        self.where = where
        loc = f" in {where}" if where else ""
        super().__init__(f"Missing field {field!r}{loc}")


class InsufficientPoints(ReconstructionError):
    def __init__(self, available: int, required: int):
        self.available = available
        self.required = required
        super().__init__(
            f"Need {describe_int(required)} points to reconstruct, "
            f"only {available} available"
        )
