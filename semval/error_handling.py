"""This module contains custom exceptions and the helpers that validate version components."""
from numbers import Integral
from typing import Any

from .constants import COMPONENT, LABEL, SAFE_INTEGER_MAX, SEMVER, SEMVER_STRICT

class VersionError(ValueError):
    '''Base class for all exceptions raised by semval'''

class InvalidArgument(VersionError):
    '''raised when a value has the wrong type or is out of range'''

class InvalidFormat(InvalidArgument):
    '''raised when a string does not match the version or component grammar

    A malformed string is also an invalid argument, so this subclasses
    :class:`InvalidArgument`.
    '''

class NegativeResult(VersionError):
    '''raised when a decrease would bring a component below zero'''


def strict_mode(is_strict: Any = True) -> bool:
    """Non-boolean input falls back to strict mode."""
    if not isinstance(is_strict, bool):
        return True
    return is_strict


def is_valid_version(version: Any, is_strict: bool = True) -> bool:
    """Return whether *version* matches the strict or loose version grammar."""
    if not isinstance(version, str):
        return False
    pattern = SEMVER_STRICT if strict_mode(is_strict) else SEMVER
    return pattern.fullmatch(version) is not None


def is_safe_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        if not value.is_integer():
            return False
        value = int(value)
    if not isinstance(value, Integral):
        return False
    return 0 <= value <= SAFE_INTEGER_MAX


def is_digits_in_range(value: str) -> bool:
    """Check a digit string against ``SAFE_INTEGER_MAX`` without converting overlong input."""
    if len(value.lstrip('0')) > len(str(SAFE_INTEGER_MAX)):
        return False
    return int(value) <= SAFE_INTEGER_MAX


def describe_value(value: Any) -> str:
    # str() refuses ints with more than 4300 digits
    if isinstance(value, int) and value.bit_length() > 64:
        return f"an integer of {value.bit_length()} bits"
    return str(value)


def is_valid_component(value: Any) -> bool:
    """Check a single component given either as a number or as a numeric string."""
    if isinstance(value, str):
        return COMPONENT.fullmatch(value) is not None and is_digits_in_range(value)
    return is_safe_integer(value)


def is_valid_label(label: str) -> bool:
    return LABEL.fullmatch(label) is not None


def normalize_component(value: Any, default: int = 0) -> int:
    """Turn a component supplied as a number or a numeric string into an ``int``.

    Args:
        value: The component, ``None`` to fall back to *default*.
        default (int): Returned when *value* is ``None``.

    Returns:
        int: The validated component.

    Raises:
        InvalidFormat: If a string is not made of digits only.
        InvalidArgument: If a number is negative, fractional or above
            ``SAFE_INTEGER_MAX``, or if *value* is of any other type.
    """
    if value is None:
        return default

    if isinstance(value, str):
        if COMPONENT.fullmatch(value) is None:
            raise InvalidFormat(f'Expected a valid version component but got "{value}".')
        if not is_digits_in_range(value):
            raise InvalidArgument(
                f"Expected a safe integer value but got a {len(value)}-digit component.")
        return int(value)

    if isinstance(value, bool) or not isinstance(value, (Integral, float)):
        raise InvalidArgument(
            f"Expected an argument of either str or int type but got {type(value).__name__}.")

    if not is_safe_integer(value):
        raise InvalidArgument(f"Expected a safe integer value but got {describe_value(value)}.")

    return int(value)


def decrease_component(component: int, value: int, component_name: str) -> int:
    """Return ``component - value``, refusing to go below zero."""
    result = component - value
    if result < 0:
        raise NegativeResult(
            f'Expected {component_name} version number to be positive but got "{result}".')
    return result


def format_label(label: str) -> str:
    if not label:
        return ''
    return f'-{label}'
