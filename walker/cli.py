import argparse
import json
import logging
import os
import sys
import time

from walker.ast_nodes import FileContext
from walker.ast_parser import parse_php_file
from walker.config import ConfigError, load_config
from walker.engine_factory import BUILTIN_RULES, build_engine

logger = logging.getLogger(__name__)


def _round_ms(value):
    return round(max(0.0, float(value)), 3)


def _timing_ms(parse_ms, traversal_ms):
    return {
        "parse": _round_ms(parse_ms),
        "traversal": _round_ms(traversal_ms),
        "total": _round_ms(parse_ms + traversal_ms),
    }


def _summary(suggestions):
    by_rule = {}
    for suggestion in suggestions:
        by_rule[suggestion.rule] = by_rule.get(suggestion.rule, 0) + 1
    return {"total": len(suggestions), "by_rule": dict(sorted(by_rule.items()))}


def _split_codes(values):
    codes = []
    for value in values or []:
        codes.extend(code.strip() for code in value.split(",") if code.strip())
    return codes


def build_parser():
    parser = argparse.ArgumentParser(
        prog="walker",
        description="Run structural rules over PHP syntax trees.",
    )
    parser.add_argument("files", nargs="*", help="PHP files, or PHP-Parser JSON dumps (*.json).")
    parser.add_argument("--config", "-c", default=None, help="Path to a walker.yaml configuration file.")
    parser.add_argument(
        "--disable",
        "-d",
        action="append",
        default=[],
        help="Comma-separated rule codes to disable (repeatable).",
    )
    parser.add_argument("--text", action="store_true", help="Print a plain-text report instead of JSON.")
    parser.add_argument("--list-rules", action="store_true", help="List the built-in rules and exit.")
    parser.add_argument("--debug", action="store_true", help="Log traversal details to stderr.")
    return parser


def analyse_file(engine, filename):
    display_name = os.path.basename(filename)

    parse_start = time.perf_counter()
    try:
        statements = parse_php_file(filename)
    except Exception as exc:
        parse_ms = (time.perf_counter() - parse_start) * 1000.0
        logger.debug("Parsing %s failed", filename, exc_info=True)
        return {
            "file": display_name,
            "path": os.path.realpath(filename),
            "ok": False,
            "error": f"Failed to parse {display_name}: {exc}",
            "suggestions": [],
            "summary": _summary([]),
            "timing_ms": _timing_ms(parse_ms, 0.0),
        }, []
    parse_ms = (time.perf_counter() - parse_start) * 1000.0

    traversal_start = time.perf_counter()
    suggestions = engine.run(statements, FileContext(path=filename))
    traversal_ms = (time.perf_counter() - traversal_start) * 1000.0

    return {
        "file": display_name,
        "path": os.path.realpath(filename),
        "ok": True,
        "error": None,
        "suggestions": [s.to_dict() for s in suggestions],
        "summary": _summary(suggestions),
        "timing_ms": _timing_ms(parse_ms, traversal_ms),
    }, suggestions


def _print_text(result, suggestions, with_header):
    if with_header:
        print(f"=== {result['file']} ===")
    if not result["ok"]:
        print(result["error"])
    for suggestion in suggestions:
        print(f"[{suggestion.rule}] line {suggestion.span.line}: {suggestion.message}")
    timing = result["timing_ms"]
    print(
        f"[timing] parse: {timing['parse']} ms, traversal: {timing['traversal']} ms, "
        f"total: {timing['total']} ms."
    )


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    if args.list_rules:
        for rule_class in sorted(BUILTIN_RULES, key=lambda r: r.code):
            print(f"{rule_class.code}  {rule_class.description}")
        return 0

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    config = config.with_disabled(_split_codes(args.disable))
    json_mode = not args.text and config.output == "json"

    if not args.files:
        if json_mode:
            print(json.dumps({"ok": False, "error": "No files provided."}))
        else:
            print("No files provided.")
        return 2

    # Built once and shared by every file.
    engine = build_engine(config.disable)
    logger.debug("Active rules: %s", ", ".join(engine.codes))

    overall_start = time.perf_counter()
    results = []
    found = False

    for idx, filename in enumerate(args.files):
        result, suggestions = analyse_file(engine, filename)
        results.append(result)
        found = found or bool(suggestions)

        if not json_mode:
            _print_text(result, suggestions, with_header=len(args.files) > 1)
            if idx < len(args.files) - 1:
                print()

    if json_mode:
        total_ms = _round_ms((time.perf_counter() - overall_start) * 1000.0)
        print(
            json.dumps(
                {
                    "ok": any(r["ok"] for r in results),
                    "results": results,
                    "rules": engine.codes,
                    "timing_ms": {"total": total_ms},
                }
            )
        )

    if not any(r["ok"] for r in results):
        return 2
    return 1 if found else 0
