"""
Validators for builder input.

Each validator returns the accepted value unchanged or raises
InvalidArgumentError.
"""

from __future__ import annotations

import logging
import re

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

_LOWERCASE_RE = re.compile(r"[a-z]+")
_UPPERCASE_RE = re.compile(r"[A-Z]+")
_DIGITS_RE = re.compile(r"[0-9]+")
_ALPHANUMERIC_RE = re.compile(r"[a-zA-Z0-9]+")


def _reject(message: str) -> InvalidArgumentError:
    logger.warning("Rejected generator setting: %s", message)
    return InvalidArgumentError(message)


def _require_str(value: object, what: str) -> str:
    if not isinstance(value, str):
        raise _reject(f"{what} must be a string, got {type(value).__name__}")
    return value


def validate_minimum_length(length: object) -> int:
    # bool is an int subclass; True/False are never a meaningful length.
    if isinstance(length, bool) or not isinstance(length, int):
        raise _reject("The password length must be an integer")
    if length <= 1:
        raise _reject("The password length must be at least 2 characters long")
    return length


def validate_lowercase(alphabet: object) -> str:
    alphabet = _require_str(alphabet, "Lowercase alphabet")
    if not _LOWERCASE_RE.fullmatch(alphabet):
        raise _reject("Only lowercase letters are allowed as input")
    return alphabet


def validate_uppercase(alphabet: object) -> str:
    alphabet = _require_str(alphabet, "Uppercase alphabet")
    if not _UPPERCASE_RE.fullmatch(alphabet):
        raise _reject("Only uppercase letters are allowed as input")
    return alphabet


def validate_digits(alphabet: object) -> str:
    alphabet = _require_str(alphabet, "Digit alphabet")
    if not _DIGITS_RE.fullmatch(alphabet):
        raise _reject("Only digits are allowed as input")
    return alphabet


def validate_symbols(alphabet: object) -> str:
    """
    Accept any non-empty string that is not made up entirely of ASCII
    letters and digits.

    A mixed value such as "ab#" passes: only a wholly alphanumeric
    alphabet is refused.
    """
    alphabet = _require_str(alphabet, "Symbol alphabet")
    if not alphabet:
        raise _reject("Symbol alphabet must not be empty")
    if _ALPHANUMERIC_RE.fullmatch(alphabet):
        raise _reject("Only symbols are allowed as input")
    return alphabet
