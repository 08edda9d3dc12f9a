# SPDX-License-Identifier: MIT
"""Property-based tests for version ordering and mutation.

These tests verify that:
- Canonical version text survives a parse/render round trip
- compare_versions is a total order and agrees with version_key
- Build metadata never affects equality or ordering
- Increments reset lower components and always produce a release
- Lowered constraints agree with direct comparisons
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from semver_engine import (
    compare_versions,
    parse_constraint,
    parse_version,
    satisfies,
    version_key,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

numbers = st.integers(min_value=0, max_value=2**64 - 1)
small_numbers = st.integers(min_value=0, max_value=20)

numeric_identifiers = st.integers(min_value=0, max_value=10**6).map(str)
alphanumeric_identifiers = st.from_regex(r"[0-9]*[a-zA-Z-][0-9a-zA-Z-]{0,6}", fullmatch=True)
prerelease_identifiers = st.one_of(numeric_identifiers, alphanumeric_identifiers)
build_identifiers = st.from_regex(r"[0-9a-zA-Z-]{1,8}", fullmatch=True)


@st.composite
def canonical_versions(draw, core=numbers):
    """Generate canonical version text."""
    text = f"{draw(core)}.{draw(core)}.{draw(core)}"
    prerelease = draw(st.lists(prerelease_identifiers, max_size=4))
    if prerelease:
        text += "-" + ".".join(prerelease)
    build = draw(st.lists(build_identifiers, max_size=3))
    if build:
        text += "+" + ".".join(build)
    return text


# Small cores make equal and near-equal versions likely
close_versions = canonical_versions(core=small_numbers)


# =============================================================================
# Properties
# =============================================================================


@given(canonical_versions())
@settings(max_examples=200)
def test_round_trip(text):
    assert str(parse_version(text)) == text


@given(canonical_versions())
def test_leading_v_is_dropped(text):
    assert parse_version("v" + text) == parse_version(text)


@given(close_versions, close_versions)
@settings(max_examples=200)
def test_exactly_one_relation_holds(a, b):
    va, vb = parse_version(a), parse_version(b)
    relations = [va < vb, va == vb, va > vb]
    assert relations.count(True) == 1


@given(close_versions, close_versions)
def test_antisymmetry(a, b):
    assert compare_versions(a, b) == -compare_versions(b, a)


@given(close_versions, close_versions, close_versions)
@settings(max_examples=200)
def test_transitivity(a, b, c):
    ordered = sorted([a, b, c], key=version_key)
    assert compare_versions(ordered[0], ordered[1]) <= 0
    assert compare_versions(ordered[1], ordered[2]) <= 0
    assert compare_versions(ordered[0], ordered[2]) <= 0


@given(close_versions, close_versions)
def test_compare_agrees_with_key(a, b):
    ka, kb = version_key(a), version_key(b)
    expected = (ka > kb) - (ka < kb)
    assert compare_versions(a, b) == expected


@given(canonical_versions(), st.lists(build_identifiers, min_size=1, max_size=3))
def test_build_metadata_irrelevant(text, build):
    v = parse_version(text)
    other = v.set_metadata(".".join(build))
    assert v == other
    assert compare_versions(v, other) == 0


@given(canonical_versions(core=st.integers(min_value=0, max_value=10**9)))
def test_increments_produce_releases(text):
    v = parse_version(text)

    major = v.inc_major()
    assert major.core == (v.major + 1, 0, 0)

    minor = v.inc_minor()
    assert minor.core == (v.major, v.minor + 1, 0)

    patch = v.inc_patch()
    assert patch.core == (v.major, v.minor, v.patch + 1)

    for bumped in (major, minor, patch):
        assert bumped.prerelease == ()
        assert bumped.build == ()
        assert bumped > v


@given(canonical_versions(core=small_numbers), small_numbers, small_numbers)
def test_tilde_matches_direct_bounds(text, major, minor):
    v = parse_version(text).set_prerelease("")
    expected = v.major == major and v.minor == minor
    assert satisfies(v, f"~{major}.{minor}") is expected


@given(close_versions, close_versions)
def test_primitive_constraints_match_compare(a, b):
    va = parse_version(a).set_prerelease("")
    vb = parse_version(b).set_prerelease("")
    cmp = compare_versions(va, vb)
    assert satisfies(va, f">={vb}") is (cmp >= 0)
    assert satisfies(va, f"<{vb}") is (cmp < 0)
    assert satisfies(va, f"!={vb}") is (cmp != 0)
    assert len(parse_constraint(f"={vb}").groups[0]) == 1
