#!/usr/bin/env python3
"""
Tests for the legacy .talismanignore line grammar and rule set
"""

import logging

import pytest

from talisman.git_repo import Addition
from talisman.ignore import IgnoreRule, IgnoreRules, parse_ignored_detectors, parse_line


def test_pattern_only_line():
    """A bare pattern applies to every detector"""
    rule = parse_line("foo.txt")

    assert rule == IgnoreRule(pattern="foo.txt", comment="", ignored_detectors=())
    assert rule.has_pattern


def test_pattern_with_scoping_comment():
    rule = parse_line("bar.txt #ignore:detectorA")

    assert rule.pattern == "bar.txt"
    assert rule.comment == "ignore:detectorA"
    assert rule.ignored_detectors == ("detectorA",)


def test_comment_only_line_has_empty_pattern():
    rule = parse_line("   # just a note")

    assert rule.pattern == ""
    assert rule.comment == "just a note"
    assert not rule.has_pattern


def test_blank_line_still_parses():
    rule = parse_line("   ")

    assert rule == IgnoreRule(pattern="")


def test_comment_is_split_on_first_hash():
    rule = parse_line("keys/*.pem # rotated # twice")

    assert rule.pattern == "keys/*.pem"
    assert rule.comment == "rotated # twice"


def test_directive_after_leading_whitespace_in_comment():
    """The comment is trimmed before the directive is looked for"""
    rule = parse_line("fixtures/ #   ignore:filecontent,filesize test data")

    assert rule.ignored_detectors == ("filecontent", "filesize")
    assert rule.comment == "ignore:filecontent,filesize test data"


@pytest.mark.parametrize("comment,expected", [
    ("ignore:a", ("a",)),
    ("ignore:a,b", ("a", "b")),
    ("ignore:a,,b,", ("a", "b")),
    ("ignore:a,b free text after", ("a", "b")),
    ("ignore: a", ()),
    ("ignore:", ()),
    ("see ignore:a", ()),
    ("", ()),
])
def test_parse_ignored_detectors(comment, expected):
    assert parse_ignored_detectors(comment) == expected


def test_rule_set_from_content():
    """Three lines, two of them carrying patterns"""
    rules = IgnoreRules.from_content("foo.txt\n# comment only\nbar.txt #ignore:detectorA\n")

    assert len(rules) == 3
    assert rules.patterns() == ["foo.txt", "bar.txt"]
    assert rules.rules[2].ignored_detectors == ("detectorA",)
    assert rules.rules[1].pattern == ""


def test_rule_set_from_bytes_with_crlf():
    rules = IgnoreRules.from_content(b"a.txt\r\nb.txt # ignore:x\r\n")

    assert rules.patterns() == ["a.txt", "b.txt"]
    assert rules.rules[1].ignored_detectors == ("x",)


@pytest.mark.parametrize("separator", ["\x0b", "\x0c", "\x1c", "\x1e", "\x85", "\u2028", "\u2029"])
def test_only_newline_separates_rules(separator):
    """Other line-break characters stay inside the pattern"""
    pattern = f"odd{separator}name.txt"
    rules = IgnoreRules.from_content(f"{pattern}\nplain.txt\n")

    assert len(rules) == 2
    assert rules.patterns() == [pattern, "plain.txt"]


def test_missing_final_newline_and_blank_last_line():
    assert len(IgnoreRules.from_content("a.txt\nb.txt")) == 2
    assert len(IgnoreRules.from_content("a.txt\n\n")) == 2


def test_rule_set_from_invalid_utf8():
    rules = IgnoreRules.from_content(b"caf\xe9.txt\n")

    assert len(rules) == 1
    assert rules.rules[0].pattern.startswith("caf")


@pytest.mark.parametrize("content", ["", "\n\n", "# nothing here\n\n   \n"])
def test_empty_or_comment_only_content(content):
    rules = IgnoreRules.from_content(content)

    assert rules.patterns() == []
    assert rules.accepts_all()


def test_from_lines_preserves_order():
    rules = IgnoreRules.from_lines("c", "a", "b")

    assert [rule.pattern for rule in rules] == ["c", "a", "b"]
    assert rules == IgnoreRules.from_lines("c", "a", "b")


def test_legacy_rules_deny_scoped_and_unscoped():
    rules = IgnoreRules.from_lines(
        "secrets.json #ignore:filecontent",
        "*.pem",
        "# stray comment",
    )

    assert rules.deny(Addition("secrets.json"), "filecontent")
    assert not rules.deny(Addition("secrets.json"), "filesize")
    assert rules.deny(Addition("keys/server.pem"), "filesize")
    assert rules.accept(Addition("README.md"), "filecontent")
    assert not rules.accepts_all()


def test_legacy_effective_rules():
    rules = IgnoreRules.from_content("a.txt #ignore:x\nb.txt\n#c.txt\n")

    assert rules.effective_rules("x") == ["a.txt", "b.txt"]
    assert rules.effective_rules("y") == ["b.txt"]


def test_only_scoped_rules_accept_all():
    rules = IgnoreRules.from_content("a.txt #ignore:x\n")

    assert rules.accepts_all()


def test_deny_logs_decision_with_context(caplog):
    rules = IgnoreRules.from_lines("*.pem")

    with caplog.at_level(logging.DEBUG, logger="talisman.ignore.rule_engine"):
        assert rules.deny(Addition("keys/server.pem"), "filecontent")

    record = caplog.records[-1]
    assert record.extra == {"path": "keys/server.pem", "detector": "filecontent", "pattern": "*.pem"}
