"""Version value class for parsing, mutating and comparing semantic versions."""

import logging
from numbers import Integral
from typing import Any, Optional, Union

from .constants import SAFE_INTEGER_MAX, VERSION_PREFIX
from .enums import VersionComparison
from .error_handling import (
    InvalidArgument,
    InvalidFormat,
    decrease_component,
    describe_value,
    format_label,
    is_valid_component,
    is_valid_label,
    is_valid_version,
    normalize_component,
    strict_mode,
)

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def _check_amount(amount: Any, component_name: str) -> int:
    if not is_valid_component(amount):
        raise InvalidArgument(
            f'Expected a valid {component_name} version number but got "{describe_value(amount)}".')
    return int(amount)


def _check_increase(current: int, amount: int, component_name: str) -> int:
    result = current + amount
    if result > SAFE_INTEGER_MAX:
        raise InvalidArgument(
            f"Increasing the {component_name} version by {amount} exceeds {SAFE_INTEGER_MAX}.")
    return result


def _can_increase(current: int, amount: Any) -> bool:
    if isinstance(amount, bool) or not isinstance(amount, Integral) or amount < 0:
        return False
    return current + amount <= SAFE_INTEGER_MAX


class VersionValue:
    """A mutable, chainable semantic version.

    Every mutator validates its input first and returns the instance itself,
    so calls can be chained: ``VersionValue(1, 2, 3).increase_minor().set_label("rc.1")``.

    Attributes:
        major (int): The major version number
        minor (int): The minor version number
        patch (int): The patch version number
        strict (bool): ``True`` when the ``v`` prefix is neither emitted nor accepted
        label (str): The label without its leading dash, ``""`` when unset
    """

    VERSION = '2.0.0'

    def __init__(
        self,
        major: Union[int, str, None] = 0,
        minor: Union[int, str, None] = 0,
        patch: Union[int, str, None] = 0,
        strict: bool = True,
        label: str = '',
    ):
        """Initialize a VersionValue from components or from a version string.

        Args:
            major (int | str): The major version number (default: 0), or a full
                version string such as ``"v1.2.3-beta"``
            minor (int | str): The minor version number (default: 0)
            patch (int | str): The patch version number (default: 0)
            strict (bool): Whether the ``v`` prefix is disallowed (default: True)
            label (str): Optional label, e.g. ``"alpha"`` or ``"beta.1"``

        Raises:
            InvalidArgument: If a component or the label is invalid
            InvalidFormat: If a version string does not match the grammar
        """
        self._strict = strict_mode(strict)
        self._major = self._minor = self._patch = 0
        self._label = ''

        if isinstance(major, str):
            # strictness is inferred from the string
            self.set_version(major)
            return

        major = normalize_component(major, 0)
        minor = normalize_component(minor, 0)
        patch = normalize_component(patch, 0)
        self.set_label(label)
        self._major, self._minor, self._patch = major, minor, patch

    @classmethod
    def parse(cls, version: str, strict: Optional[bool] = None) -> 'VersionValue':
        """Create a VersionValue from a version string.

        Args:
            version (str): A version string, e.g. ``"1.2.3"`` or ``"v2.0.0-alpha"``
            strict (bool): Applied before parsing. Parsing then infers the
                strictness from the ``v`` prefix, which overrides this value.

        Returns:
            VersionValue: A new instance with the parsed values

        Raises:
            InvalidFormat: If the version string format is invalid
        """
        instance = cls()
        if strict is not None:
            instance.set_strict(strict)
        return instance.set_version(version)

    @staticmethod
    def is_valid(version: str, strict: bool = True) -> bool:
        """Return whether *version* is a valid version string.

        With *strict* the ``v`` prefix is rejected. Never raises.
        """
        return is_valid_version(version, strict)

    @property
    def major(self) -> int:
        return self._major

    @property
    def minor(self) -> int:
        return self._minor

    @property
    def patch(self) -> int:
        return self._patch

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def label(self) -> str:
        return self._label

    def set_strict(self, strict: bool = True) -> 'VersionValue':
        """Enable or disable strict mode; non-boolean input enables it."""
        self._strict = strict_mode(strict)
        return self

    def set_major(self, major: int) -> 'VersionValue':
        self._major = _check_amount(major, 'major')
        return self

    def set_minor(self, minor: int) -> 'VersionValue':
        self._minor = _check_amount(minor, 'minor')
        return self

    def set_patch(self, patch: int) -> 'VersionValue':
        self._patch = _check_amount(patch, 'patch')
        return self

    def increase_major(self, major: int = 1) -> 'VersionValue':
        """Increase the major version and reset minor and patch to 0."""
        major = _check_amount(major, 'major')
        self._major = _check_increase(self._major, major, 'major')
        self._minor = 0
        self._patch = 0
        return self

    def increase_minor(self, minor: int = 1) -> 'VersionValue':
        """Increase the minor version and reset patch to 0."""
        minor = _check_amount(minor, 'minor')
        self._minor = _check_increase(self._minor, minor, 'minor')
        self._patch = 0
        return self

    def increase_patch(self, patch: int = 1) -> 'VersionValue':
        patch = _check_amount(patch, 'patch')
        self._patch = _check_increase(self._patch, patch, 'patch')
        return self

    def decrease_major(self, major: int = 1) -> 'VersionValue':
        """Decrease the major version and reset minor and patch to 0.

        Raises:
            InvalidArgument: If *major* is not a valid component
            NegativeResult: If the major version would drop below 0
        """
        major = _check_amount(major, 'major')
        self._major = decrease_component(self._major, major, 'major')
        self._minor = 0
        self._patch = 0
        return self

    def decrease_minor(self, minor: int = 1) -> 'VersionValue':
        """Decrease the minor version and reset patch to 0.

        Raises:
            InvalidArgument: If *minor* is not a valid component
            NegativeResult: If the minor version would drop below 0
        """
        minor = _check_amount(minor, 'minor')
        self._minor = decrease_component(self._minor, minor, 'minor')
        self._patch = 0
        return self

    def decrease_patch(self, patch: int = 1) -> 'VersionValue':
        patch = _check_amount(patch, 'patch')
        self._patch = decrease_component(self._patch, patch, 'patch')
        return self

    def set_label(self, label: str) -> 'VersionValue':
        """Set the label appended after a dash, e.g. ``"alpha"`` -> ``1.0.0-alpha``.

        An empty string clears the label. Surrounding whitespace is trimmed and
        a single leading dash is dropped.

        Raises:
            InvalidArgument: If *label* is not a string or not a valid label
        """
        if not isinstance(label, str):
            raise InvalidArgument(
                f'Expected a valid label type but got "{type(label).__name__}".')

        if not label:
            self._label = ''
            return self

        label = label.strip()

        if not is_valid_label(label):
            raise InvalidArgument(f'Expected a valid label value but got "{label}".')

        if label.startswith('-'):
            label = label[1:]
            if not is_valid_label(label) or label.startswith('-'):
                raise InvalidArgument(f'Expected a valid label value but got "-{label}".')

        self._label = label
        return self

    def clear_label(self) -> 'VersionValue':
        return self.set_label('')

    def set_version(self, version: str) -> 'VersionValue':
        """Replace every component, the label and the strictness from *version*.

        The loose grammar is always used for validation; strict mode is then
        inferred from the presence of the ``v`` prefix.

        Args:
            version (str): A version string, e.g. ``"1.2.3"`` or ``"v2.0.0-beta.1"``

        Returns:
            VersionValue: This instance

        Raises:
            InvalidArgument: If *version* is not a string, a component is
                above ``SAFE_INTEGER_MAX``, or the label still starts with a
                dash once its own leading dash is dropped (``"1.2.3---a"``)
            InvalidFormat: If *version* does not match the grammar
        """
        if not isinstance(version, str):
            raise InvalidArgument(f'Expected a string but got "{type(version).__name__}".')

        if not is_valid_version(version, False):
            raise InvalidFormat(
                f'Expected a valid SemVer version but got "{version}", strict mode: {self._strict}.')

        strict = VERSION_PREFIX.match(version) is None
        major_text, minor_text, rest = VERSION_PREFIX.sub('', version).split('.', 2)
        patch_text, _, label = rest.partition('-')

        major = normalize_component(major_text)
        minor = normalize_component(minor_text)
        patch = normalize_component(patch_text)

        self.set_label(label)
        self._strict = strict
        self._major, self._minor, self._patch = major, minor, patch
        logger.debug("Parsed version %r as %s", version, self)
        return self

    def reset(self) -> 'VersionValue':
        """Reset to ``0.0.0`` in strict mode, without a label."""
        logger.debug("Resetting version %s", self)
        return self.set_version('0.0.0').clear_label()

    def compare_with(self, version: Union['VersionValue', str]) -> VersionComparison:
        """Compare this version with another instance or a strict version string.

        Components are compared in order of major, minor and patch; the label
        is not taken into account.

        Args:
            version (VersionValue | str): The version to compare against

        Returns:
            VersionComparison: ``Newer`` if this version is greater, ``Older`` if
            it is smaller, ``Current`` if both are equal

        Raises:
            InvalidFormat: If a string does not match the strict grammar
            InvalidArgument: If *version* is neither a string nor a VersionValue
        """
        if isinstance(version, str):
            if not is_valid_version(version):
                raise InvalidFormat(
                    f'Expected a valid SemVer version but got "{version}" with strict mode = True.')
            other = VersionValue.parse(version)
        elif isinstance(version, VersionValue):
            other = version
        else:
            raise InvalidArgument(
                "Expected either a VersionValue instance or a valid SemVer string "
                f'but got "{type(version).__name__}".')

        for mine, theirs in zip(self.to_tuple(), other.to_tuple()):
            if mine > theirs:
                return VersionComparison.Newer
            if mine < theirs:
                return VersionComparison.Older
        return VersionComparison.Current

    def can_increase_major(self, major: int = 1) -> bool:
        """Return whether the major version can be increased by *major* within ``SAFE_INTEGER_MAX``."""
        return _can_increase(self._major, major)

    def can_increase_minor(self, minor: int = 1) -> bool:
        """Return whether the minor version can be increased by *minor* within ``SAFE_INTEGER_MAX``."""
        return _can_increase(self._minor, minor)

    def can_increase_patch(self, patch: int = 1) -> bool:
        """Return whether the patch version can be increased by *patch* within ``SAFE_INTEGER_MAX``."""
        return _can_increase(self._patch, patch)

    def max_increase_major(self) -> int:
        """Return the largest amount the major version can still be increased by."""
        return SAFE_INTEGER_MAX - self._major

    def max_increase_minor(self) -> int:
        return SAFE_INTEGER_MAX - self._minor

    def max_increase_patch(self) -> int:
        return SAFE_INTEGER_MAX - self._patch

    def output(self) -> None:
        """Print the string representation of the version."""
        print(self)

    def to_string(self) -> str:
        return str(self)

    def to_tuple(self) -> tuple[int, int, int]:
        """Return the version as a tuple (major, minor, patch)."""
        return (self._major, self._minor, self._patch)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        prefix = '' if self._strict else 'v'
        return f"{prefix}{self._major}.{self._minor}.{self._patch}{format_label(self._label)}"

    def __repr__(self) -> str:
        """Return the detailed string representation of the version."""
        return (f"VersionValue(major={self._major}, minor={self._minor}, patch={self._patch}, "
                f"strict={self._strict}, label={self._label!r})")

    def __eq__(self, other) -> bool:
        """Check if two versions hold the same components, label and strictness."""
        if not isinstance(other, VersionValue):
            return False
        return ((self._major, self._minor, self._patch, self._label, self._strict)
                == (other._major, other._minor, other._patch, other._label, other._strict))

    def __lt__(self, other) -> bool:
        """Check if this version is older than another version."""
        if not isinstance(other, (VersionValue, str)):
            return NotImplemented
        return self.compare_with(other) is VersionComparison.Older

    def __le__(self, other) -> bool:
        """Check if this version is older than or as new as another version."""
        if not isinstance(other, (VersionValue, str)):
            return NotImplemented
        return self.compare_with(other) is not VersionComparison.Newer

    def __gt__(self, other) -> bool:
        """Check if this version is newer than another version."""
        if not isinstance(other, (VersionValue, str)):
            return NotImplemented
        return self.compare_with(other) is VersionComparison.Newer

    def __ge__(self, other) -> bool:
        """Check if this version is newer than or as new as another version."""
        if not isinstance(other, (VersionValue, str)):
            return NotImplemented
        return self.compare_with(other) is not VersionComparison.Older
