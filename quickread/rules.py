"""Text replacement rules and their INI storage.

A rule is a comma separated string: ``pattern,replacement`` or
``i,pattern,replacement`` for a case-insensitive match.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

_SECTION = "rules"
_VALUE_KEY = "rulestr"


@dataclass(frozen=True)
class Rule:
    """A parsed replacement rule."""

    pattern: str
    replacement: str
    case_insensitive: bool = False


def parse_rule(rule: str) -> Rule:
    """Parse a rule string; raise ValueError if it has fewer than two fields."""
    fields = rule.split(",")
    if len(fields) < 2:
        raise ValueError(f"rule needs at least two comma separated fields: {rule!r}")
    if len(fields) == 3:
        return Rule(fields[1], fields[2], fields[0] == "i")
    return Rule(fields[0], fields[1])


def rule_is_case_insensitive(rule: str) -> bool:
    """Return True if the rule string asks for a case-insensitive match."""
    fields = rule.split(",")
    return len(fields) == 3 and fields[0] == "i"


def is_rule_valid(rule: str) -> bool:
    """Return True if the rule parses to a non-empty pattern or replacement."""
    try:
        parsed = parse_rule(rule)
    except ValueError:
        return False
    return bool(parsed.pattern or parsed.replacement)


def _rule_key(rule: str) -> str:
    try:
        return parse_rule(rule).pattern
    except ValueError:
        return ""


# --- INI storage ----------------------------------------------------------

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t", "\0": "\\0"}
_UNESCAPES = {"\\": "\\", '"': '"', "n": "\n", "r": "\r", "t": "\t", "0": "\0",
              "a": "\a", "b": "\b", "f": "\f", "v": "\v", "'": "'", "?": "?"}


def _escape_value(value: str) -> str:
    escaped = "".join(_ESCAPES.get(ch, ch) for ch in value)
    if any(ch in value for ch in ",;=") or value != value.strip(" "):
        return f'"{escaped}"'
    return escaped


def _unescape_value(raw: str) -> str:
    out: list[str] = []
    chars = iter(raw.strip())
    for ch in chars:
        if ch == '"':
            continue
        if ch != "\\":
            out.append(ch)
            continue
        nxt = next(chars, "")
        if nxt == "x":
            digits = []
            for d in chars:
                if d in "0123456789abcdefABCDEF" and len(digits) < 4:
                    digits.append(d)
                else:
                    if digits:
                        out.append(chr(int("".join(digits), 16)))
                        digits = []
                    if d == "\\":
                        nxt2 = next(chars, "")
                        out.append(_UNESCAPES.get(nxt2, nxt2))
                    elif d != '"':
                        out.append(d)
                    break
            if digits:
                out.append(chr(int("".join(digits), 16)))
        else:
            out.append(_UNESCAPES.get(nxt, nxt))
    return "".join(out)


def _read_ini(path: Path) -> list[tuple[str, list[tuple[str, str]]]]:
    sections: list[tuple[str, list[tuple[str, str]]]] = []
    current: list[tuple[str, str]] | None = None
    for line in path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith(";") or stripped.startswith("#"):
            continue
        if stripped.startswith("[") and stripped.endswith("]"):
            current = []
            sections.append((stripped[1:-1].strip(), current))
            continue
        key, sep, raw = stripped.partition("=")
        if not sep:
            continue
        if current is None:
            current = []
            sections.append(("General", current))
        current.append((key.strip(), raw.strip()))
    return sections


def _section_values(sections, name: str) -> dict[str, str]:
    values: dict[str, str] = {}
    for section, entries in sections:
        if section == name:
            for key, raw in entries:
                values[key.replace("/", "\\")] = raw
    return values


def load_rules_file(path: str | os.PathLike[str]) -> list[str]:
    """Read the rule strings stored in an INI file; a missing file holds none."""
    file = Path(path)
    if not file.exists():
        return []
    values = _section_values(_read_ini(file), _SECTION)
    try:
        size = int(_unescape_value(values.get("size", "0")))
    except ValueError:
        size = 0
    return [
        _unescape_value(values.get(f"{i}\\{_VALUE_KEY}", ""))
        for i in range(1, size + 1)
    ]


def save_rules_file(path: str | os.PathLike[str], rules: Iterable[str]) -> None:
    """Write *rules* to an INI file, keeping any other sections it already has."""
    file = Path(path)
    others = [
        (name, entries)
        for name, entries in (_read_ini(file) if file.exists() else [])
        if name != _SECTION
    ]
    rule_list = list(rules)
    lines: list[str] = []
    for name, entries in others:
        lines.append(f"[{name}]")
        lines.extend(f"{key}={raw}" for key, raw in entries)
        lines.append("")
    lines.append(f"[{_SECTION}]")
    lines.extend(
        f"{i}\\{_VALUE_KEY}={_escape_value(rule)}"
        for i, rule in enumerate(rule_list, start=1)
    )
    lines.append(f"size={len(rule_list)}")
    file.parent.mkdir(parents=True, exist_ok=True)
    file.write_text("\n".join(lines) + "\n", encoding="utf-8")


# --- rule collection ------------------------------------------------------


class RuleBook:
    """An ordered collection of rule strings, keyed by their pattern."""

    def __init__(self, rules: Iterable[str] = ()) -> None:
        self.rules: list[str] = list(rules)
        self.last_removed: str = ""

    def __iter__(self) -> Iterator[str]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __contains__(self, rule: object) -> bool:
        return rule in self.rules

    def key_index(self, key: str) -> int | None:
        """Return the index of the first rule whose pattern is *key*, or None."""
        return next(
            (i for i, rule in enumerate(self.rules) if _rule_key(rule) == key), None
        )

    def add(self, rule: str) -> int:
        """Add *rule*, replacing any rule with the same pattern; return its index."""
        index = self.key_index(_rule_key(rule))
        if index is None:
            self.rules.append(rule)
            return len(self.rules) - 1
        self.rules[index] = rule
        return index

    def remove(self, rule: str) -> None:
        """Remove the first occurrence of *rule* and remember it for restoring."""
        if rule in self.rules:
            self.rules.remove(rule)
            self.last_removed = rule

    def restore_last_removed(self) -> str | None:
        """Re-add the most recently removed rule; return it, or None if there is none."""
        if not self.last_removed:
            return None
        rule = self.last_removed
        self.add(rule)
        self.last_removed = ""
        return rule

    def import_rules(self, rules: Iterable[str]) -> int:
        """Append the rules not already present; return how many were added."""
        added = 0
        for rule in rules:
            if rule not in self.rules:
                self.rules.append(rule)
                added += 1
        return added

    def reorder(self, rules: Iterable[str]) -> None:
        """Replace the rules with *rules* in the given order."""
        self.rules = list(rules)

    def to_text(self) -> str:
        """Return the rules one per line."""
        return "\n".join(self.rules)

    def from_text(self, text: str) -> None:
        """Replace the rules with the lines of *text*."""
        self.rules = text.split("\n")

    def load(self, path: str | os.PathLike[str]) -> None:
        """Replace the rules with those stored at *path*."""
        self.rules = load_rules_file(path)

    def save(self, path: str | os.PathLike[str]) -> None:
        """Store the rules at *path*."""
        save_rules_file(path, self.rules)