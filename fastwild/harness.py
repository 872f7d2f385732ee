"""Runs case suites against the matcher variants and reports the outcome."""

import time
from typing import List, Optional

from .config import Config
from .fixtures import MatchCase, Suite, builtin_suites, get_suite, load_suites
from .logger import Logger
from .metrics import Metrics
from .prometheus_metrics import PrometheusMetrics
from .symbols import fold_case, to_scalars, to_units
from .wildcard import WildcardMatcher


UNIT_VARIANT = "single_unit"
SCALAR_VARIANT = "scalar"

VARIANT_NAMES = {
    UNIT_VARIANT: "match_single_unit() - for single-unit strings",
    SCALAR_VARIANT: "match_scalar() - for decoded Unicode strings",
}


class SuiteResult:
    """Outcome of one suite run."""

    def __init__(self, name: str, label: str):
        self.name = name
        self.label = label
        self.cases_run = 0
        self.failures: List[MatchCase] = []

    @property
    def passed(self) -> bool:
        return not self.failures

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "label": self.label,
            "passed": self.passed,
            "cases_run": self.cases_run,
            "failures": [case.model_dump() for case in self.failures]
        }


def _unit_marker(marker: str, encoding: str) -> int:
    units = to_units(marker, encoding)
    if len(units) != 1:
        raise ValueError(f"Marker {marker!r} is not a single unit in {encoding}")
    return units[0]


class Harness:
    """Checks cases through the single-unit, scalar or case-folded path.

    With ``compare_performance`` every case goes through both variants and
    each call is timed. Otherwise cases run case-folded when ``ignore_case``
    is set, or through the variant that fits the suite.
    """

    def __init__(self, config: Optional[Config] = None, logger: Optional[Logger] = None,
                 metrics: Optional[Metrics] = None, prometheus: Optional[PrometheusMetrics] = None):
        self.config = config or Config()
        self.logger = logger or Logger("harness", self.config.get("logging", "level", "INFO"))
        self.metrics = metrics or Metrics()

        self.reps = self.config.get("harness", "reps", 1)
        self.compare_performance = bool(self.config.get("harness", "compare_performance", False))
        # Folded runs are a correctness check only; timings always compare raw input.
        self.ignore_case = bool(self.config.get("harness", "ignore_case", True)) and not self.compare_performance
        self.encoding = self.config.get("matcher", "encoding", "utf-8")
        self.decode_errors = self.config.get("matcher", "decode_errors", "strict")

        single = self.config.get("matcher", "single_wildcard", "?")
        multi = self.config.get("matcher", "multi_wildcard", "*")
        self.scalar_matcher = WildcardMatcher(single, multi)
        self.unit_matcher = WildcardMatcher(_unit_marker(single, self.encoding), _unit_marker(multi, self.encoding))

        self.prometheus = prometheus
        if self.prometheus is None and self.config.get("monitoring", "prometheus_enabled"):
            self.prometheus = PrometheusMetrics(port=self.config.get("monitoring", "prometheus_port", 9090))
            self.prometheus.start()

    def _timed(self, variant: str, matcher: WildcardMatcher, pattern, subject, expected: bool) -> bool:
        start = time.perf_counter_ns()
        result = matcher.match(pattern, subject)
        elapsed = time.perf_counter_ns() - start

        passed = result == expected
        self.metrics.record_comparison(variant, elapsed, passed)
        if self.prometheus:
            self.prometheus.record_comparison(variant, elapsed / 1e9, passed)
        return passed

    def check(self, case: MatchCase, unicode: bool = False) -> bool:
        """Run one case and tell whether every variant gave the expected verdict."""
        expected = case.expectation(self.ignore_case)

        if self.compare_performance:
            passed = True
            if not unicode:
                passed = self._timed(UNIT_VARIANT, self.unit_matcher,
                                     to_units(case.pattern, self.encoding),
                                     to_units(case.subject, self.encoding), expected)
            # Decoding is part of the scalar variant's cost.
            start = time.perf_counter_ns()
            pattern = to_scalars(case.pattern.encode(self.encoding), self.encoding, self.decode_errors)
            subject = to_scalars(case.subject.encode(self.encoding), self.encoding, self.decode_errors)
            result = self.scalar_matcher.match(pattern, subject)
            elapsed = time.perf_counter_ns() - start
            scalar_passed = result == expected
            self.metrics.record_comparison(SCALAR_VARIANT, elapsed, scalar_passed)
            if self.prometheus:
                self.prometheus.record_comparison(SCALAR_VARIANT, elapsed / 1e9, scalar_passed)
            return passed and scalar_passed

        if self.ignore_case:
            return self._timed(SCALAR_VARIANT, self.scalar_matcher,
                               fold_case(to_scalars(case.pattern)),
                               fold_case(to_scalars(case.subject)), expected)

        if unicode:
            return self._timed(SCALAR_VARIANT, self.scalar_matcher,
                               to_scalars(case.pattern), to_scalars(case.subject), expected)

        return self._timed(UNIT_VARIANT, self.unit_matcher,
                           to_units(case.pattern, self.encoding),
                           to_units(case.subject, self.encoding), expected)

    def run_suite(self, suite: Suite) -> SuiteResult:
        """Run every applicable case of a suite, repeating it for performance runs."""
        result = SuiteResult(suite.name, suite.label)
        # Unicode suites check correctness only; repeating them would skew the comparison.
        reps = self.reps if self.compare_performance and not suite.unicode else 1
        self.logger.info("Suite started", suite=suite.name, cases=len(suite.cases), reps=reps)

        for _ in range(reps):
            for case in suite.cases:
                if not case.applies(self.ignore_case):
                    continue
                result.cases_run += 1
                if not self.check(case, unicode=suite.unicode):
                    if case not in result.failures:
                        result.failures.append(case)
                        self.logger.warn("Case failed", suite=suite.name, pattern=case.pattern,
                                         subject=case.subject, expected=case.expectation(self.ignore_case))

        if self.prometheus:
            self.prometheus.update_suite(suite.name, result.passed)
        self.logger.info("Suite finished", suite=suite.name, passed=result.passed,
                         cases_run=result.cases_run, failures=len(result.failures))
        return result

    def selected_suites(self) -> List[Suite]:
        """Resolve the suites named in the configuration, plus any case file."""
        cases_file = self.config.get("harness", "cases_file")
        names = self.config.get("harness", "suites")
        if cases_file:
            suites = load_suites(cases_file)
            return [get_suite(name) for name in names] + suites if names else suites
        if names is None:
            return builtin_suites()
        return [get_suite(name) for name in names]

    def run(self, suites: Optional[List[Suite]] = None) -> List[SuiteResult]:
        """Run the given suites, or the configured ones."""
        if suites is None:
            suites = self.selected_suites()
        return [self.run_suite(suite) for suite in suites]

    def report(self, results: List[SuiteResult]) -> List[str]:
        """Build the console report: one verdict line per suite, then timings."""
        lines = []
        for result in results:
            verdict = "Passed" if result.passed else "Failed"
            lines.append(f"{verdict} {result.label} tests")

        if self.compare_performance:
            for variant in (UNIT_VARIANT, SCALAR_VARIANT):
                seconds = self.metrics.elapsed_seconds(variant)
                lines.append(f"{VARIANT_NAMES[variant]}: {seconds:.3f} seconds")

        return lines
