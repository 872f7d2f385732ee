"""Command line entry point for fastwild."""

import argparse
import json
import sys
from typing import List, Optional

from .config import Config
from .harness import Harness
from .logger import Logger
from .symbols import fold_case, to_scalars, to_units
from .wildcard import WildcardMatcher


def _matcher_for(config: Config, units: bool) -> WildcardMatcher:
    single = config.get("matcher", "single_wildcard", "?")
    multi = config.get("matcher", "multi_wildcard", "*")
    if not units:
        return WildcardMatcher(single, multi)

    encoding = config.get("matcher", "encoding", "utf-8")
    single_units, multi_units = to_units(single, encoding), to_units(multi, encoding)
    if len(single_units) != 1 or len(multi_units) != 1:
        raise ValueError("Wildcard markers must be single units for unit matching")
    return WildcardMatcher(single_units[0], multi_units[0])


def cmd_match(args, config: Config) -> int:
    """Match one subject against one pattern and print the verdict."""
    matcher = _matcher_for(config, args.units)
    if args.units:
        encoding = config.get("matcher", "encoding", "utf-8")
        pattern, subject = to_units(args.pattern, encoding), to_units(args.subject, encoding)
    else:
        pattern, subject = to_scalars(args.pattern), to_scalars(args.subject)

    if args.ignore_case:
        pattern, subject = fold_case(pattern), fold_case(subject)

    matched = matcher.match(pattern, subject)
    print("true" if matched else "false")
    return 0 if matched else 1


def cmd_collapse(args, config: Config) -> int:
    """Print the pattern with every run of multi-wildcards reduced to one."""
    matcher = _matcher_for(config, units=False)
    pattern = to_scalars(args.pattern)
    print(matcher.collapse_runs(pattern))
    if not matcher.has_wildcards(pattern):
        print("Note: pattern has no wildcards and matches only an equal subject", file=sys.stderr)
    return 0


def cmd_run(args, config: Config) -> int:
    """Run case suites and print the report."""
    if args.cases:
        config.set("harness", "cases_file", args.cases)
        config.set("harness", "suites", args.suite or [])
    elif args.suite:
        config.set("harness", "suites", args.suite)
    if args.compare_performance:
        config.set("harness", "compare_performance", True)
    if args.reps is not None:
        config.set("harness", "reps", args.reps)
    if args.ignore_case is not None:
        config.set("harness", "ignore_case", args.ignore_case)

    ok, errors = config.validate()
    if not ok:
        for error in errors:
            print(f"Error: {error}", file=sys.stderr)
        return 2

    harness = Harness(config)
    results = harness.run()

    if args.format == "json":
        print(json.dumps({
            "passed": all(r.passed for r in results),
            "suites": [r.to_dict() for r in results],
            "stats": harness.metrics.get_stats()
        }, indent=2, ensure_ascii=False))
    else:
        for line in harness.report(results):
            print(line)

    return 0 if all(r.passed for r in results) else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Wildcard matching with '?' and '*'")
    parser.add_argument("--config", default=None, help="Config file (default: FASTWILD_CONFIG env or fastwild.yaml)")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    match = subparsers.add_parser("match", help="Match a subject against a pattern")
    match.add_argument("pattern", help="Pattern with '?' and '*' wildcards")
    match.add_argument("subject", help="Subject text")
    match.add_argument("--ignore-case", action="store_true", help="Fold case of both sides first")
    match.add_argument("--units", action="store_true", help="Compare encoded units instead of characters")

    run = subparsers.add_parser("run", help="Run correctness and performance suites")
    run.add_argument("--suite", action="append", help="Suite name (repeatable)")
    run.add_argument("--cases", help="YAML file with extra suites")
    run.add_argument("--compare-performance", action="store_true", help="Time both variants on every case")
    run.add_argument("--reps", type=int, default=None, help="Repetitions per suite in performance runs")
    case_group = run.add_mutually_exclusive_group()
    case_group.add_argument("--ignore-case", dest="ignore_case", action="store_const", const=True, default=None,
                            help="Match case-folded input")
    case_group.add_argument("--case-sensitive", dest="ignore_case", action="store_const", const=False,
                            help="Match input as given")
    run.add_argument("--format", choices=["pretty", "json"], default="pretty", help="Output format")

    collapse = subparsers.add_parser("collapse", help="Collapse runs of '*' in a pattern")
    collapse.add_argument("pattern", help="Pattern")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    config = Config(args.config)
    try:
        logger = Logger("cli", config.get("logging", "level", "INFO"))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    commands = {"match": cmd_match, "run": cmd_run, "collapse": cmd_collapse}

    try:
        return commands[args.command](args, config)
    except (ValueError, KeyError, FileNotFoundError) as e:
        # UnicodeError is a ValueError.
        logger.error("Command failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
