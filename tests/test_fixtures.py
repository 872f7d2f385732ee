"""Tests for the case suites."""

import pytest
from pydantic import ValidationError

from fastwild.fixtures import MatchCase, builtin_suites, get_suite, load_suites
from fastwild.wildcard import SCALAR, match_case_insensitive, match_single_unit


def _params(ignore_case):
    params = []
    for suite in builtin_suites():
        for index, case in enumerate(suite.cases):
            if case.applies(ignore_case):
                params.append(pytest.param(suite, case, id=f"{suite.name}-{index}"))
    return params


class TestMatchCase:
    """Tests for MatchCase."""

    def test_expectation_defaults_to_expected(self):
        """Test that the folded expectation falls back to the plain one."""
        case = MatchCase(subject="a", pattern="a", expected=True)
        assert case.expectation(False) is True
        assert case.expectation(True) is True

    def test_folded_expectation(self):
        """Test a case whose verdict changes under folding."""
        case = MatchCase(subject="bLaH", pattern="?Lah", expected=False, expected_ignore_case=True)
        assert case.expectation(False) is False
        assert case.expectation(True) is True

    def test_ignore_case_only(self):
        """Test that folded-only cases are skipped in plain runs."""
        case = MatchCase(subject="bLah", pattern="bLaH", expected=True, ignore_case_only=True)
        assert case.applies(False) is False
        assert case.applies(True) is True


class TestBuiltinSuites:
    """Tests for the built-in suites."""

    def test_run_order(self):
        """Test that suites come back in the reported order."""
        assert [s.name for s in builtin_suites()] == ["tame", "empty", "wild", "utf8"]
        assert [s.label for s in builtin_suites()] == ["tame string", "empty string", "wildcard", "UTF-8"]

    def test_only_utf8_is_unicode(self):
        """Test the unicode flag."""
        assert [s.name for s in builtin_suites() if s.unicode] == ["utf8"]

    def test_unknown_suite(self):
        """Test that an unknown name raises KeyError."""
        with pytest.raises(KeyError):
            get_suite("nope")

    @pytest.mark.parametrize("suite,case", _params(False))
    def test_case_sensitive(self, suite, case):
        """Test every case in a plain run."""
        if suite.unicode:
            assert SCALAR.match(case.pattern, case.subject) == case.expectation(False)
        else:
            assert match_single_unit(case.pattern, case.subject) == case.expectation(False)
            assert SCALAR.match(case.pattern, case.subject) == case.expectation(False)

    @pytest.mark.parametrize("suite,case", _params(True))
    def test_case_insensitive(self, suite, case):
        """Test every case in a folded run."""
        assert match_case_insensitive(case.pattern, case.subject) == case.expectation(True)


class TestLoadSuites:
    """Tests for loading suites from YAML."""

    def test_load(self, tmp_path):
        """Test that a case file becomes validated suites."""
        path = tmp_path / "cases.yaml"
        path.write_text(
            "suites:\n"
            "  - name: extra\n"
            "    label: extra\n"
            "    cases:\n"
            "      - {subject: abc, pattern: 'a*', expected: true}\n"
            "      - {subject: abc, pattern: '?', expected: false}\n",
            encoding="utf-8",
        )
        suites = load_suites(str(path))
        assert len(suites) == 1
        assert suites[0].name == "extra"
        assert suites[0].unicode is False
        assert [c.expected for c in suites[0].cases] == [True, False]

    def test_empty_file(self, tmp_path):
        """Test that an empty file holds no suites."""
        path = tmp_path / "cases.yaml"
        path.write_text("", encoding="utf-8")
        assert load_suites(str(path)) == []

    def test_invalid_case(self, tmp_path):
        """Test that a case without a verdict fails validation."""
        path = tmp_path / "cases.yaml"
        path.write_text("suites:\n  - name: bad\n    label: bad\n    cases:\n      - {subject: a, pattern: a}\n",
                        encoding="utf-8")
        with pytest.raises(ValidationError):
            load_suites(str(path))

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_suites(str(tmp_path / "missing.yaml"))
