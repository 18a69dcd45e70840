#!/usr/bin/env python3
"""
namekit CLI
===========
Command-line interface for random name generation.

Usage:
    namekit                      # rusty-nail
    namekit 5 --number           # five names like pushy-pencil-5602
    namekit -s TitleCase 3       # Delirious Pail
    namekit --list-strategies
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .errors import ConfigurationError, NameKitError
from .generator import Generator
from .naming import CaseStyle
from .settings import get_path_setting, get_setting
from .wordlists import load_word_file

logger = logging.getLogger(__name__)


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Writes results to stdout and errors to stderr."""

    def print(self, *args, **kwargs):
        print(*args, **kwargs)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)

    def table(self, headers: list, rows: list):
        """Print a formatted table."""
        col_widths = [max(len(str(h)), max((len(str(r[i])) for r in rows), default=0)) + 2
                      for i, h in enumerate(headers)]

        header_line = ''.join(str(h).ljust(w) for h, w in zip(headers, col_widths))
        print(header_line.rstrip())
        print('-' * len(header_line.rstrip()))

        for row in rows:
            print(''.join(str(c).ljust(w) for c, w in zip(row, col_widths)).rstrip())


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )


def strategy_help() -> str:
    lines = ["naming strategies:"]
    for style in CaseStyle:
        lines.append(f"  {style.value:<20} [{style.example}]")
    return '\n'.join(lines)


def load_words(cli_path: Optional[str], setting: str):
    """Word list from --adjectives/--nouns, else from config, else built-in."""
    if cli_path:
        return load_word_file(cli_path)
    configured = get_path_setting(setting)
    if configured is not None:
        return load_word_file(configured)
    return None


def parse_flag(name: str, value) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{name} must be true or false, got {value!r}")
    return value


def parse_amount(value) -> int:
    try:
        amount = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Amount must be an integer, got {value!r}")
    if amount < 0:
        raise ConfigurationError(f"Amount must be >= 0, got {amount}")
    return amount


# =============================================================================
# Commands
# =============================================================================

def cmd_strategies(args, out: Output):
    """List naming strategies."""
    rows = [[style.value, style.example] for style in CaseStyle]
    out.table(['Strategy', 'Example'], rows)
    return 0


def cmd_generate(args, out: Output):
    """Generate and print names."""
    naming = CaseStyle.from_str(args.strategy or get_setting('generator.strategy', 'Plain'))
    numbered = parse_flag('generator.number', get_setting('generator.number', False)) or args.number
    amount = parse_amount(
        args.amount if args.amount is not None else get_setting('generator.amount', 1)
    )

    generator = Generator(
        adjectives=load_words(args.adjectives, 'wordlists.adjectives'),
        nouns=load_words(args.nouns, 'wordlists.nouns'),
        naming=naming,
        numbered=numbered,
        seed=args.seed,
    )
    logger.debug(f"Generating {amount} name(s) with {generator!r}")

    names = generator.take(amount)

    if args.json:
        out.print(json.dumps(names, indent=2))
    else:
        for name in names:
            out.print(name)

    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='namekit',
        description='A random name generator with results like "delirious-pail"',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=strategy_help() + """

Examples:
  %(prog)s
  %(prog)s 5 --number
  %(prog)s -s TitleCase 3
  %(prog)s --adjectives adjectives.txt --nouns nouns.yaml 10
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log debug output to stderr')

    parser.add_argument('amount', nargs='?', help='Number of names to generate (default: 1)')
    parser.add_argument('--number', '-n', action='store_true',
                        help='Add a random number to the name(s)')
    parser.add_argument('--strategy', '-s',
                        help='Naming strategy (default: Plain)')
    parser.add_argument('--adjectives', help='Custom adjective word file')
    parser.add_argument('--nouns', help='Custom noun word file')
    parser.add_argument('--seed', type=int, help='Seed the random source for repeatable output')
    parser.add_argument('--json', '-j', action='store_true', help='Output as JSON')
    parser.add_argument('--list-strategies', action='store_true',
                        help='List naming strategies and exit')
    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    out = Output()

    handler = cmd_strategies if args.list_strategies else cmd_generate
    try:
        return handler(args, out)
    except KeyboardInterrupt:
        out.print("\nCancelled.")
        return 130
    except NameKitError as e:
        out.error(str(e))
        return 1


if __name__ == '__main__':
    sys.exit(main())
