#!/usr/bin/env python3
"""Access Log Analyzer - Entry point"""

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from access_analyzer import (VERSION, DEFAULT_TOP_N, Field, InvalidLogFormat,
                             LogStore, print_drill_down, print_report)
from access_analyzer.output import RANKED_SECTIONS

DRILL_SECTIONS = [key for key, _, _ in RANKED_SECTIONS if key != 'ref_domains'] + ['traffic']


def _key_value(text: str):
    key, sep, value = text.partition('=')
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {text!r}")
    return key, value


def _filter(text: str):
    field, value = _key_value(text)
    try:
        return Field(field), value
    except ValueError:
        choices = ', '.join(f.value for f in Field)
        raise argparse.ArgumentTypeError(f"unknown field {field!r} (choose from {choices})")


def _drill(text: str):
    section, key = _key_value(text)
    if section not in DRILL_SECTIONS:
        raise argparse.ArgumentTypeError(
            f"unknown section {section!r} (choose from {', '.join(DRILL_SECTIONS)})")
    return section, key


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Access Log Analyzer - Apache/Nginx access log statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("logfile", help="Access log in Common or Combined Log Format")
    parser.add_argument("-n", "--top", type=int, default=DEFAULT_TOP_N,
                        help="Rows per table (default: %(default)s)")
    parser.add_argument("--filter", type=_filter, metavar="FIELD=VALUE",
                        help="Only count entries whose FIELD equals VALUE")
    parser.add_argument("--drill", type=_drill, metavar="SECTION=KEY",
                        help="Show details for one row, e.g. hosts=10.0.0.1")
    parser.add_argument("-o", "--output", help="Output file (JSON)")
    parser.add_argument("-j", "--json", action="store_true", help="JSON output only")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"AccessLogAnalyzer v{VERSION}")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    console = Console()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)]
    )

    field, value = args.filter if args.filter else (None, None)
    store = LogStore()

    try:
        report = store.analyze_file(args.logfile, console=None if args.json else console,
                                    limit=args.top, field=field, value=value)
    except (OSError, InvalidLogFormat) as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        sys.exit(1)

    if args.drill:
        section, key = args.drill
        view = store.drill_down(section, key)
        if args.json:
            print(json.dumps(view, indent=2))
        else:
            print_drill_down(view, console)
        result = view
    else:
        if args.json:
            print(json.dumps(report, indent=2))
        else:
            print_report(report, console, limit=args.top)
        result = report

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(result, f, indent=2)
        if not args.json:
            console.print(f"\n[green]Report saved to:[/] {args.output}")


if __name__ == "__main__":
    main()
