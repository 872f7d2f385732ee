"""Tests for the suite harness."""

from unittest.mock import MagicMock

import pytest
from fastwild.config import Config
from fastwild.fixtures import MatchCase, Suite, get_suite
from fastwild.harness import SCALAR_VARIANT, UNIT_VARIANT, Harness
from fastwild.logger import Logger


@pytest.fixture
def config(tmp_path, monkeypatch):
    """Default configuration without any file or environment input."""
    for key in ["FASTWILD_REPS", "FASTWILD_COMPARE_PERFORMANCE", "FASTWILD_IGNORE_CASE", "FASTWILD_SUITES",
                "FASTWILD_CASES_FILE", "PROMETHEUS_ENABLED"]:
        monkeypatch.delenv(key, raising=False)
    return Config(str(tmp_path / "missing.yaml"))


def make_harness(config, **harness_settings):
    for key, value in harness_settings.items():
        config.set("harness", key, value)
    return Harness(config, logger=Logger("test", level="ERROR"))


class TestHarness:
    """Tests for Harness."""

    def test_builtin_suites_pass_folded(self, config):
        """Test that every built-in suite passes in the default folded mode."""
        harness = make_harness(config)
        results = harness.run()
        assert [r.passed for r in results] == [True, True, True, True]
        assert harness.report(results) == [
            "Passed tame string tests",
            "Passed empty string tests",
            "Passed wildcard tests",
            "Passed UTF-8 tests",
        ]

    def test_builtin_suites_pass_case_sensitive(self, config):
        """Test the plain mode, which skips folded-only cases."""
        harness = make_harness(config, ignore_case=False)
        results = harness.run()
        assert all(r.passed for r in results)
        stats = harness.metrics.get_stats()
        assert stats["variants"][UNIT_VARIANT]["comparisons"] > 0
        assert stats["variants"][SCALAR_VARIANT]["comparisons"] == results[3].cases_run

    def test_folded_only_cases_skipped(self, config):
        """Test that plain runs count fewer cases."""
        folded = make_harness(config).run_suite(get_suite("wild"))
        plain = make_harness(config, ignore_case=False).run_suite(get_suite("wild"))
        assert plain.cases_run == folded.cases_run - 3

    def test_compare_performance(self, config):
        """Test timing both variants with repetitions."""
        harness = make_harness(config, compare_performance=True, reps=3)
        results = harness.run([get_suite("tame"), get_suite("utf8")])
        assert all(r.passed for r in results)
        assert results[0].cases_run == 3 * len([c for c in get_suite("tame").cases if not c.ignore_case_only])

        stats = harness.metrics.get_stats()
        assert stats["variants"][UNIT_VARIANT]["comparisons"] == results[0].cases_run
        assert stats["variants"][SCALAR_VARIANT]["comparisons"] == results[0].cases_run + results[1].cases_run

        lines = harness.report(results)
        assert lines[:2] == ["Passed tame string tests", "Passed UTF-8 tests"]
        assert lines[2].startswith("match_single_unit()")
        assert lines[2].endswith(" seconds")
        assert lines[3].startswith("match_scalar()")

    def test_failing_case_reported(self, config):
        """Test that a wrong expectation fails the suite once."""
        bad = MatchCase(subject="abc", pattern="a*", expected=False)
        suite = Suite(name="bad", label="bad", cases=[bad, MatchCase(subject="", pattern="", expected=True)])
        harness = make_harness(config, compare_performance=True, reps=2)
        result = harness.run_suite(suite)
        assert result.passed is False
        assert result.failures == [bad]
        assert harness.report([result])[0] == "Failed bad tests"
        assert result.to_dict()["failures"][0]["pattern"] == "a*"

    def test_check_unicode_skips_unit_variant(self, config):
        """Test that unicode cases only use the scalar variant."""
        harness = make_harness(config, compare_performance=True)
        case = MatchCase(subject="𓋍𓋔𓎍", pattern="𓋍𓋔?", expected=True)
        assert harness.check(case, unicode=True) is True
        assert UNIT_VARIANT not in harness.metrics.get_stats()["variants"]

    def test_custom_markers(self, config):
        """Test that configured markers reach both variants."""
        config.set("matcher", "single_wildcard", "_")
        config.set("matcher", "multi_wildcard", "%")
        harness = make_harness(config, ignore_case=False)
        assert harness.check(MatchCase(subject="abcd", pattern="a%_", expected=True)) is True
        assert harness.check(MatchCase(subject="abcd", pattern="a*", expected=False)) is True

    def test_suite_selection(self, config, tmp_path):
        """Test named suites plus a case file."""
        path = tmp_path / "cases.yaml"
        path.write_text("suites:\n  - name: extra\n    label: extra\n    cases: []\n")
        harness = make_harness(config, suites=["empty"], cases_file=str(path))
        assert [s.name for s in harness.selected_suites()] == ["empty", "extra"]

    def test_unknown_suite(self, config):
        """Test that an unknown suite name raises KeyError."""
        harness = make_harness(config, suites=["nope"])
        with pytest.raises(KeyError):
            harness.run()

    def test_prometheus_updates(self, config):
        """Test that a given Prometheus collector sees every call."""
        prometheus = MagicMock()
        harness = Harness(config, logger=Logger("test", level="ERROR"), prometheus=prometheus)
        harness.run_suite(get_suite("empty"))
        assert prometheus.record_comparison.call_count == len(get_suite("empty").cases)
        prometheus.update_suite.assert_called_once_with("empty", True)
