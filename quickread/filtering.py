"""Text preparation applied before handing text to the speech engine."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable

from .rules import parse_rule

log = logging.getLogger(__name__)

_NUMBERED_LINE = re.compile(r"^[0-9]?\. ", re.ASCII)
_DASHED_WORD = re.compile(r"^[0-9]?-[0-9]?", re.ASCII)
_SPEAKER = re.compile(r"\b\w+: ", re.IGNORECASE | re.ASCII)
_EOL = re.compile(r"\r|\n")
_BACKREF = re.compile(r"\\([0-9])([0-9]?)")


def _default_eol() -> str:
    return "\n\r" if os.name == "nt" else "\n"


def _to_latin1(text: str) -> str:
    return text.encode("latin-1", "replace").decode("latin-1")


def _expand(template: str, match: re.Match[str]) -> str:
    """Expand ``\\N`` and ``\\NN`` capture references in *template*."""
    last = match.re.groups

    def group(ref: re.Match[str]) -> str:
        first, second = ref.group(1), ref.group(2)
        if second and int(first + second) <= last:
            return match.group(int(first + second)) or ""
        if int(first) <= last:
            return (match.group(int(first)) or "") + second
        return ref.group(0)

    return _BACKREF.sub(group, template)


def _apply_rule(text: str, rule: str) -> str:
    try:
        parsed = parse_rule(rule)
    except ValueError:
        return text
    flags = re.IGNORECASE if parsed.case_insensitive else 0
    try:
        pattern = re.compile(parsed.pattern, flags)
    except re.error as exc:
        log.warning("ignoring rule %r: %s", rule, exc)
        return text
    replacement = _to_latin1(parsed.replacement)
    return pattern.sub(lambda m: _expand(replacement, m), text)


def _rewrite_line(line: str) -> str:
    if _NUMBERED_LINE.search(line):
        return " Number " + line
    if any(_DASHED_WORD.search(word) for word in line.strip().split(" ")):
        return line.replace("-", " dash ")
    return line


def apply_filter(text: str, rules: Iterable[str] = (), eol: str | None = None) -> str:
    """Apply the replacement *rules* and the built-in spoken-text fixes to *text*.

    Numbered lines get " Number " in front, dashes in number ranges are spoken
    as " dash ", and all line breaks become spaces.
    """
    if not text:
        return text
    for rule in rules:
        text = _apply_rule(text, rule)
    separator = eol if eol is not None else _default_eol()
    joined = "\n".join(_rewrite_line(line) for line in text.split(separator))
    return joined.replace("\n", " ").replace("\r", " ")


def find_two_words(
    text: str, start_index: int, pattern: str | re.Pattern[str] = _SPEAKER
) -> tuple[str, str, int] | None:
    """Find two successive matches of *pattern* from *start_index* on.

    Return the first match, the second match and the absolute index of the
    second, or None if there are not two matches.
    """
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    for first in regex.finditer(text[start_index:]):
        str_one = first.group(0)
        after_one = first.start() + start_index + len(str_one)
        second = regex.search(text[after_one:])
        if second is not None:
            return str_one, second.group(0), second.start() + after_one
    return None


def transform_speakers(text: str) -> str:
    """Turn ``Name: `` speaker labels into ``Name says `` and drop repeated labels.

    A label that repeats the previous speaker is removed; the last label in
    the text is left as it is.
    """
    index = 0
    while index < len(text):
        found = find_two_words(text, index, _SPEAKER)
        if found is None:
            break
        str_one, str_two, str_two_index = found
        str_one_index = text.find(str_one, index)
        replacement = str_one.strip()[:-1] + " says "
        text = (
            text[:str_one_index]
            + replacement
            + text[str_one_index + len(str_one) - 1:]
        )
        str_two_index += len(replacement) - len(str_one)
        if str_one == str_two:
            start = str_two_index + 1
            text = text[:start] + text[start + len(str_two):]
        index = str_two_index + 1
    return text


def strip_leading_line(text: str) -> str:
    """Remove everything up to and including the first line break, if any."""
    match = _EOL.search(text)
    if match is None:
        return text
    return text[match.end():]


def prepare_speech(
    text: str,
    rules: Iterable[str] = (),
    use_filter: bool = True,
    eol: str | None = None,
) -> str:
    """Return *text* as it should be spoken: speaker labels rewritten, then filtered."""
    spoken = transform_speakers(text)
    return apply_filter(spoken, rules, eol) if use_filter else spoken