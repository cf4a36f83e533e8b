from __future__ import annotations

import unittest

import pytest

from netmime.matching import matches_mime_type, matches_mime_type_parameters


class BaseTypeMatchingTests(unittest.TestCase):
    def test_empty_pattern_never_matches(self) -> None:
        self.assertFalse(matches_mime_type("", "text/plain"))
        self.assertFalse(matches_mime_type("", ""))

    def test_full_wildcards(self) -> None:
        self.assertTrue(matches_mime_type("*/*", "anything/whatever"))
        self.assertTrue(matches_mime_type("*", "anything/whatever"))
        self.assertTrue(matches_mime_type("*", ""))

    def test_exact_match_is_case_insensitive(self) -> None:
        self.assertTrue(matches_mime_type("text/html", "text/html"))
        self.assertTrue(matches_mime_type("TEXT/Html", "text/hTML"))

    def test_exact_match_requires_same_length(self) -> None:
        self.assertFalse(matches_mime_type("text/html", "text/htm"))
        self.assertFalse(matches_mime_type("text/htm", "text/html"))
        self.assertFalse(matches_mime_type("text/html", "text/xhtml"))

    def test_subtype_wildcard(self) -> None:
        self.assertTrue(matches_mime_type("text/*", "text/plain"))
        self.assertTrue(matches_mime_type("TEXT/*", "text/plain"))
        self.assertFalse(matches_mime_type("text/*", "image/png"))
        self.assertFalse(matches_mime_type("text/*", "text"))

    def test_wildcard_with_suffix(self) -> None:
        self.assertTrue(matches_mime_type("application/*+xml", "application/atom+xml"))
        self.assertTrue(matches_mime_type("application/*+xml", "Application/RSS+XML"))
        self.assertFalse(matches_mime_type("application/*+xml", "application/xml"))
        self.assertFalse(matches_mime_type("application/*+xml", "application/atom+json"))

    def test_prefix_and_suffix_may_not_overlap(self) -> None:
        # "ab" starts with "ab" and ends with "b", but too short for both halves.
        self.assertFalse(matches_mime_type("ab*b", "ab"))
        self.assertTrue(matches_mime_type("ab*b", "abb"))

    def test_star_in_top_level_segment(self) -> None:
        self.assertTrue(matches_mime_type("*/plain", "text/plain"))
        self.assertFalse(matches_mime_type("*/plain", "text/html"))

    def test_only_first_star_is_a_wildcard(self) -> None:
        self.assertTrue(matches_mime_type("a/*x*", "a/bx*"))
        self.assertFalse(matches_mime_type("a/*x*", "a/bxc"))

    def test_candidate_parameters_do_not_affect_base(self) -> None:
        self.assertTrue(matches_mime_type("text/plain", "text/plain; charset=utf-8"))
        self.assertTrue(matches_mime_type("text/*", "text/plain;format=flowed"))


class ParameterMatchingTests(unittest.TestCase):
    def test_keys_case_insensitive_extras_ignored(self) -> None:
        self.assertTrue(matches_mime_type("text/plain;charset=utf-8", "text/plain;Charset=utf-8;foo=bar"))

    def test_values_case_sensitive(self) -> None:
        self.assertFalse(matches_mime_type("text/plain;charset=utf-8", "text/plain;charset=UTF-8"))
        self.assertFalse(matches_mime_type("text/plain;charset=utf-8", "text/plain;Charset=UTF-8;foo=bar"))

    def test_pattern_parameter_requires_candidate_parameters(self) -> None:
        self.assertFalse(matches_mime_type("text/plain;charset=utf-8", "text/plain"))

    def test_missing_key_fails(self) -> None:
        self.assertFalse(matches_mime_type("text/plain;charset=utf-8", "text/plain;format=flowed"))

    def test_more_pattern_keys_than_candidate_fails(self) -> None:
        self.assertFalse(matches_mime_type("text/plain;a=1;b=2", "text/plain;a=1"))

    def test_all_pattern_keys_present(self) -> None:
        self.assertTrue(matches_mime_type("text/plain;a=1;b=2", "text/plain; b=2; a=1; c=3"))

    def test_wildcards_still_check_parameters(self) -> None:
        self.assertTrue(matches_mime_type("*/*;q=1", "image/png;q=1"))
        self.assertFalse(matches_mime_type("*/*;q=1", "image/png"))
        self.assertFalse(matches_mime_type("image/*;q=1", "image/png;q=2"))

    def test_base_failure_skips_parameter_check(self) -> None:
        self.assertFalse(matches_mime_type("text/html;a=1", "text/plain;a=1"))

    def test_parameter_helper_without_pattern_block(self) -> None:
        self.assertTrue(matches_mime_type_parameters("text/plain", "text/plain"))
        self.assertTrue(matches_mime_type_parameters("text/plain", "image/png;x=y"))


@pytest.mark.parametrize(
    "pattern,candidate",
    [
        (";", "text/plain"),
        ("text/plain;", "text/plain"),
        ("***", "a"),
        ("/", "text/plain"),
        ("text/plain;=", "text/plain"),
    ],
)
def test_malformed_patterns_return_false_without_raising(pattern, candidate):
    assert matches_mime_type(pattern, candidate) is False


class AsciiOnlyFoldingTests(unittest.TestCase):
    # U+212A KELVIN SIGN would lower-case to "k" under Unicode rules.
    def test_base_type_look_alike_does_not_match(self) -> None:
        self.assertTrue(matches_mime_type("text/x-markdown", "TEXT/X-MARKDOWN"))
        self.assertFalse(matches_mime_type("text/x-markdown", "text/x-mar\u212Adown"))
        self.assertFalse(matches_mime_type("text/x-mar\u212Adown", "text/x-markdown"))

    def test_wildcard_halves_look_alike_do_not_match(self) -> None:
        self.assertFalse(matches_mime_type("text/x-mark*", "text/x-mar\u212Adown"))
        self.assertFalse(matches_mime_type("*/markdown", "text/mar\u212Adown"))

    def test_parameter_key_look_alike_does_not_match(self) -> None:
        self.assertTrue(matches_mime_type("text/plain;kind=a", "text/plain;KIND=a"))
        self.assertFalse(matches_mime_type("text/plain;kind=a", "text/plain;\u212Aind=a"))
