"""
Plinth literal parsers (host numeric grammar).

Scope
- Convert a single argument token into a typed value using the literal rules of
  the plugin host's numeric primitives, not Python's (more permissive) ones.
- Every parser either returns a value or raises ValueError; the accessor layer
  turns that error into None.

Grammar
- Integers (parse_int / parse_long)
  • [+-]? followed by one or more decimal digits, nothing else.
  • No surrounding whitespace, no underscores, no radix prefixes.
  • int: [-2**31, 2**31 - 1], long: [-2**63, 2**63 - 1]; anything outside is rejected.

- Floating point (parse_double / parse_float)
  • Leading/trailing control and space characters (<= U+0020) are trimmed.
  • [+-]? then one of:
      NaN | Infinity
      digits with optional fraction and an e/E exponent (1, 1., .5, 1.5e-3)
      hexadecimal significand with a mandatory binary exponent (0x1.8p3)
  • An optional f/F/d/D type suffix may follow a numeric form.
  • Python-only spellings such as "inf", "nan" or "1_000" are rejected.
  • Overflow rounds to a signed infinity, as the host primitive does.
  • parse_float rounds the exact literal once to IEEE-754 binary32, ties to even.

- Booleans (parse_boolean)
  • Exactly "true" or "false"; anything else is rejected.
"""
import math
import re
from fractions import Fraction

INT_MIN, INT_MAX = -2 ** 31, 2 ** 31 - 1
LONG_MIN, LONG_MAX = -2 ** 63, 2 ** 63 - 1

# IEEE-754 binary32: 24-bit significand, smallest subnormal 2**-149.
_FLOAT_MAX = (2 - 2 ** -23) * 2 ** 127
_FLOAT_PRECISION = 24
_FLOAT_TINIEST = -149

# Decimal significands longer than this are cut down to a sticky digit; every
# binary32 halfway point is exactly representable well within it.
_SIGNIFICANT_DIGITS = 200

# Characters trimmed around floating literals (every code point up to the space).
_BLANKS = "".join(map(chr, range(0x21)))

# Unicode decimal digits are accepted by the host's integer primitive.
_INTEGER = re.compile(r"[+-]?\d+")

_DECIMAL = re.compile(
    r"(?P<sign>[+-]?)"
    r"(?:(?P<special>NaN|Infinity)|(?P<number>(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)[fFdD]?)",
    re.ASCII
)

_HEXADECIMAL = re.compile(
    r"(?P<sign>[+-]?)"
    r"(?P<body>0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?\d+)"
    r"[fFdD]?",
    re.ASCII
)


def _parse_integral(text, minimum, maximum, typename):
    if not isinstance(text, str):
        raise TypeError(f"parse_{typename}() argument must be a string")
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid {typename} literal: {text!r}")
    sign = "-" if text.startswith("-") else ""
    significant = text.lstrip("+-").lstrip("0") or "0"
    # Bounded before int() so arbitrarily long tokens fail fast with the usual error.
    if len(significant) > len(str(maximum)):
        raise ValueError(f"{typename} literal out of range: {text!r}")
    if not minimum <= (value := int(sign + significant)) <= maximum:
        raise ValueError(f"{typename} literal out of range: {text!r}")
    return value


def parse_int(text, /):
    """
    Parse a 32-bit signed decimal integer.

    >>> parse_int("-42")
    -42
    """
    return _parse_integral(text, INT_MIN, INT_MAX, "int")


def parse_long(text, /):
    """
    Parse a 64-bit signed decimal integer.
    """
    return _parse_integral(text, LONG_MIN, LONG_MAX, "long")


def parse_double(text, /):
    """
    Parse a binary64 floating literal.

    >>> parse_double("1.5e3d")
    1500.0
    >>> parse_double("0x1.8p1")
    3.0
    """
    if not isinstance(text, str):
        raise TypeError("parse_double() argument must be a string")

    literal = text.strip(_BLANKS)

    if found := _DECIMAL.fullmatch(literal):
        sign = -1.0 if found["sign"] == "-" else 1.0
        match found["special"]:
            case "NaN":
                return math.nan
            case "Infinity":
                return math.copysign(math.inf, sign)
        # float() already rounds overflow to infinity
        return math.copysign(float(found["number"]), sign)

    if found := _HEXADECIMAL.fullmatch(literal):
        sign = -1.0 if found["sign"] == "-" else 1.0
        try:
            return math.copysign(float.fromhex(found["body"]), sign)
        except OverflowError:
            return math.copysign(math.inf, sign)

    raise ValueError(f"invalid double literal: {text!r}")


def parse_float(text, /):
    """
    Parse a binary32 floating literal (returned as a Python float).

    >>> parse_float("0.1") == 0.10000000149011612
    True
    """
    if not isinstance(text, str):
        raise TypeError("parse_float() argument must be a string")
    try:
        value = parse_double(text)
    except ValueError:
        raise ValueError(f"invalid float literal: {text!r}") from None
    if math.isnan(value) or math.isinf(value) or value == 0.0:
        return value
    if abs(value) >= 2.0 ** 128:
        # Beyond the binary32 range.
        return math.copysign(math.inf, value)

    # The binary64 value only bounds the magnitude; round the exact literal once.
    literal = text.strip(_BLANKS)
    if found := _DECIMAL.fullmatch(literal):
        exact = _decimal_fraction(found["number"])
    else:
        exact = _hexadecimal_fraction(_HEXADECIMAL.fullmatch(literal)["body"])
    return math.copysign(_round_binary32(exact), value)


def _exponent(text):
    sign = -1 if text.startswith("-") else 1
    return sign * int(text.lstrip("+-").lstrip("0") or "0")


def _decimal_fraction(number):
    mantissa, _, exponent = number.lower().partition("e")
    whole, _, fraction = mantissa.partition(".")
    digits = (whole + fraction).lstrip("0")
    scale = _exponent(exponent) - len(fraction)

    stripped = digits.rstrip("0")
    scale += len(digits) - len(stripped)
    digits = stripped
    if not digits:
        return Fraction(0)

    if len(digits) > _SIGNIFICANT_DIGITS:
        # The dropped tail is non-zero, so a trailing 1 keeps it on the same side of any halfway point.
        scale += len(digits) - _SIGNIFICANT_DIGITS - 1
        digits = digits[:_SIGNIFICANT_DIGITS] + "1"

    return int(digits) * Fraction(10) ** scale


def _hexadecimal_fraction(body):
    mantissa, _, exponent = body[2:].lower().partition("p")
    whole, _, fraction = mantissa.partition(".")
    return int(whole + fraction, 16) * Fraction(2) ** (_exponent(exponent) - 4 * len(fraction))


def _round_binary32(exact):
    """
    Round a non-negative exact value to the nearest binary32, ties to even.
    """
    if not exact:
        return 0.0

    # floor(log2(exact)) is one of two candidates given by the bit lengths.
    exponent = exact.numerator.bit_length() - exact.denominator.bit_length()
    if exact < Fraction(2) ** exponent:
        exponent -= 1

    quantum = max(exponent - _FLOAT_PRECISION + 1, _FLOAT_TINIEST)
    # round() on a Fraction rounds halves to even.
    significand = round(exact / Fraction(2) ** quantum)
    value = math.ldexp(significand, quantum)
    return value if value <= _FLOAT_MAX else math.inf


def parse_boolean(text, /):
    """
    Parse an exact "true"/"false" literal (case-sensitive).
    """
    if not isinstance(text, str):
        raise TypeError("parse_boolean() argument must be a string")
    match text:
        case "true":
            return True
        case "false":
            return False
    raise ValueError(f"invalid boolean literal: {text!r}")


def parse_string(text, /):
    """
    Identity parser for plain string arguments.
    """
    if not isinstance(text, str):
        raise TypeError("parse_string() argument must be a string")
    return text


# Named parsers, keyed by the kinds CommandArguments.require() accepts.
PARSERS = {
    "string": parse_string,
    "int": parse_int,
    "long": parse_long,
    "double": parse_double,
    "float": parse_float,
    "boolean": parse_boolean,
}

# Human-readable expectations used in fault hints.
EXPECTATIONS = {
    "string": "any text",
    "int": f"a whole number between {INT_MIN} and {INT_MAX}",
    "long": f"a whole number between {LONG_MIN} and {LONG_MAX}",
    "double": "a decimal number (e.g. 1.5 or 2e3)",
    "float": "a decimal number (e.g. 1.5 or 2e3)",
    "boolean": "either 'true' or 'false'",
}


__all__ = (
    "parse_int",
    "parse_long",
    "parse_double",
    "parse_float",
    "parse_boolean",
    "parse_string",
    "PARSERS",
    "EXPECTATIONS",
    "INT_MIN",
    "INT_MAX",
    "LONG_MIN",
    "LONG_MAX",
)
