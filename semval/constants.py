"""A module containing the grammars and numeric limits used to validate version strings."""

import re

# Largest integer an IEEE-754 double represents exactly (2**53 - 1).
SAFE_INTEGER_MAX = 2**53 - 1

_SEMVER = r'\d+\.\d+\.\d+(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?'

SEMVER = re.compile(rf'^v?{_SEMVER}$', re.ASCII)
SEMVER_STRICT = re.compile(rf'^{_SEMVER}$', re.ASCII)
COMPONENT = re.compile(r'^\d+$', re.ASCII)
LABEL = re.compile(r'^[0-9A-Za-z-]+(\.[0-9A-Za-z-]+)*$')
VERSION_PREFIX = re.compile(r'^v')
