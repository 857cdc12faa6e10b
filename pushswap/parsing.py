"""Reading and validating the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_WHITESPACE = " \t\n\v\f\r"


class InputError(ValueError):
    """The input is not a list of distinct 32-bit integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def atoi(text: str) -> int:
    """Read a leading integer the lenient way, wrapping to 32 bits.

    Leading whitespace and one sign are accepted; reading stops at the
    first character that is not a digit. Text without digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "+":
        rest = rest[1:]
    elif rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not _is_digit(ch):
            break
        result = result * 10 + int(ch)
    value = result * sign
    return (value - INT_MIN) % 2**32 + INT_MIN


def is_int(text: str) -> bool:
    """Tell whether ``text`` holds a number that fits in a signed 32-bit int.

    Spaces may surround the number and one sign may precede it. Nothing
    else may follow the digits.
    """
    rest = text.lstrip(" ")
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    n = 0
    pos = 0
    for ch in rest:
        if not _is_digit(ch):
            break
        n = n * 10 + int(ch)
        if not INT_MIN <= n * sign <= INT_MAX:
            return False
        pos += 1
    return rest[pos:].lstrip(" ") == ""


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty words.

    A word that begins with a character outside printable ASCII makes the
    whole result empty.
    """
    words = [word for word in text.split(sep) if word]
    if any(not 32 <= ord(word[0]) <= 126 for word in words):
        return []
    return words


def has_duplicates(tokens: Sequence[str]) -> bool:
    """Tell whether any token appears twice, comparing the text exactly.

    An empty sequence counts as having duplicates.
    """
    if not tokens:
        return True
    return len(set(tokens)) != len(tokens)


def validate(tokens: Sequence[str]) -> None:
    """Raise InputError unless every token is a distinct, non-empty integer."""
    if has_duplicates(tokens):
        raise InputError()
    for token in tokens:
        if not token or not is_int(token):
            raise InputError()


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn command-line arguments into the list of numbers to sort.

    A single argument is split on spaces; several are taken one number
    each. Raises InputError on anything invalid.
    """
    tokens = split_words(args[0], " ") if len(args) == 1 else list(args)
    validate(tokens)
    return [atoi(token) for token in tokens]