"""Unit tests for GodModePolicy."""

from agencyrbac.domain.value_objects import GodModePolicy


def test_matches_case_and_whitespace_insensitive() -> None:
    policy = GodModePolicy.of(["Root@Agency.Example"])
    assert policy.matches("root@agency.example")
    assert policy.matches("  ROOT@AGENCY.EXAMPLE ")


def test_no_email_never_matches() -> None:
    policy = GodModePolicy.of(["root@agency.example"])
    assert not policy.matches(None)
    assert not policy.matches("")


def test_empty_policy_matches_nobody() -> None:
    assert not GodModePolicy().matches("root@agency.example")


def test_from_csv_skips_blanks() -> None:
    policy = GodModePolicy.from_csv("a@x.io, B@x.io,, ")
    assert policy.emails == frozenset({"a@x.io", "b@x.io"})


def test_from_csv_empty() -> None:
    assert GodModePolicy.from_csv("").emails == frozenset()
    assert GodModePolicy.from_csv(None).emails == frozenset()
