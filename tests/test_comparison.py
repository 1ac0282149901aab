"""Cross-check VersionValue ordering against the semver package."""

import itertools

import pytest
from semver import Version

from semval.enums import VersionComparison
from semval.version import VersionValue

COMPONENTS = [0, 1, 2, 10]
VERSIONS = [f"{major}.{minor}.{patch}" for major, minor, patch in itertools.product(COMPONENTS, repeat=3)]


def expected_comparison(left: str, right: str) -> VersionComparison:
    # labels are ignored, so only the release part counts
    left_release = Version.parse(left).finalize_version()
    right_release = Version.parse(right).finalize_version()
    return VersionComparison(left_release.compare(right_release))


@pytest.mark.parametrize("left", VERSIONS[::7])
def test_compare_matches_semver(left):
    """Test compare_with against semver for every pair in a small grid."""
    version = VersionValue(left)
    for right in VERSIONS:
        assert version.compare_with(right) is expected_comparison(left, right)
        assert version.compare_with(VersionValue(right)) is expected_comparison(left, right)


@pytest.mark.parametrize(
    ("left", "right"),
    [
        ("1.0.0-alpha", "1.0.0"),
        ("1.0.0-alpha", "1.0.0-beta"),
        ("2.0.0-rc.1", "1.9.9"),
        ("1.2.3", "1.2.4-alpha.1"),
    ],
)
def test_compare_ignores_prerelease(left, right):
    """Test that labels do not affect ordering, unlike full SemVer precedence."""
    assert VersionValue(left).compare_with(right) is expected_comparison(left, right)


def test_sorting_matches_semver():
    """Test that sorting VersionValues agrees with semver."""
    texts = ["10.0.0", "1.10.0", "1.2.10", "1.2.9", "0.0.1", "2.0.0"]
    ours = [str(version) for version in sorted(VersionValue(text) for text in texts)]
    theirs = [str(version) for version in sorted(Version.parse(text) for text in texts)]
    assert ours == theirs
