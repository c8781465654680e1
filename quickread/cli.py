"""Command line front end: prepare text for speech and manage replacement rules."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .filtering import prepare_speech, strip_leading_line
from .rules import RuleBook, is_rule_valid, load_rules_file

APP_NAME = "QuickRead"
VERSION = "1.0.5"


def default_rules_path() -> Path:
    """Return the default location of the rules file."""
    return Path.home() / "Documents" / APP_NAME / "rules.ini"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quickread",
        description="Prepare text for a speech engine using replacement rules.",
    )
    parser.add_argument("text", nargs="*", help="text to prepare (default: stdin)")
    parser.add_argument("-f", "--file", type=Path, help="read the text from FILE")
    parser.add_argument("--rules", type=Path, default=None, help="rules INI file")
    parser.add_argument("--no-filter", action="store_true", help="skip the rule filter")
    parser.add_argument(
        "--strip-first-line",
        action="store_true",
        help="drop everything up to the first line break",
    )
    parser.add_argument("--list-rules", action="store_true", help="print the rules")
    parser.add_argument("--add-rule", metavar="RULE", help="add or replace a rule")
    parser.add_argument("--remove-rule", metavar="RULE", help="remove a rule")
    parser.add_argument("--restore-rule", action="store_true",
                        help="re-add the rule removed in the same call")
    parser.add_argument("--import-rules", type=Path, metavar="FILE",
                        help="append rules from another INI file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def _manage_rules(args: argparse.Namespace, book: RuleBook, path: Path) -> int:
    if args.add_rule is not None:
        if not is_rule_valid(args.add_rule):
            print(f"invalid rule: {args.add_rule}", file=sys.stderr)
            return 1
        book.add(args.add_rule)
    if args.remove_rule is not None:
        if args.remove_rule not in book:
            print(f"no such rule: {args.remove_rule}", file=sys.stderr)
            return 1
        book.remove(args.remove_rule)
    if args.restore_rule:
        if book.restore_last_removed() is None:
            print("no removed rule to restore", file=sys.stderr)
            return 1
    if args.import_rules is not None:
        if not args.import_rules.exists():
            print(f"no such file: {args.import_rules}", file=sys.stderr)
            return 1
        added = book.import_rules(load_rules_file(args.import_rules))
        print(f"imported {added} rules")
    if any((args.add_rule, args.remove_rule, args.restore_rule, args.import_rules)):
        book.save(path)
    if args.list_rules:
        for rule in book:
            print(rule)
    return 0


def _read_text(args: argparse.Namespace) -> str:
    if args.text:
        return " ".join(args.text)
    if args.file is not None:
        return args.file.read_text(encoding="utf-8")
    return sys.stdin.read().rstrip("\r\n")


def main(argv: list[str] | None = None) -> int:
    """Run the command line program; return the exit status."""
    args = _build_parser().parse_args(argv)
    path = args.rules if args.rules is not None else default_rules_path()
    book = RuleBook()
    book.load(path)

    managing = (
        args.list_rules
        or args.add_rule is not None
        or args.remove_rule is not None
        or args.restore_rule
        or args.import_rules is not None
    )
    if managing:
        return _manage_rules(args, book, path)

    try:
        text = _read_text(args)
    except OSError as exc:
        print(f"cannot read text: {exc}", file=sys.stderr)
        return 1
    if args.strip_first_line:
        text = strip_leading_line(text)
    print(prepare_speech(text, book, use_filter=not args.no_filter))
    return 0


if __name__ == "__main__":
    sys.exit(main())