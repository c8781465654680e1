# quickread

quickread gets text ready for a speech engine. It applies user-defined
replacement rules and puts " Number " in front of numbered lines. In words
that look like number ranges it speaks the dash as " dash ". It turns line
breaks into spaces and rewrites dialogue labels such as `Name: ` as
`Name says `. A label that repeats the previous speaker is dropped. The
package also has a back/forward text history, a gate for repeated text, and
spoken names for high Windows-1252 bytes.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
quickread --help
```

By default `quickread` reads text and prints the text that would be
spoken. It takes the text from its arguments, from `-f FILE`, or from
standard input.

- `--rules FILE`: the rules INI file. The default is
  `~/Documents/QuickRead/rules.ini`. A missing file holds no rules.
- `--no-filter`: skip the rules and the line fixes. Speaker labels are still
  rewritten.
- `--strip-first-line`: drop everything up to and including the first line
  break.
- `--list-rules`: print the rules, one per line.
- `--add-rule RULE`: add a rule. A rule with the same pattern is replaced.
- `--remove-rule RULE`: remove a rule.
- `--restore-rule`: add back the rule removed by `--remove-rule` in the same
  call.
- `--import-rules FILE`: append the rules from another INI file that are not
  already present.
- `--version`: print the version.

Any option that changes the rules saves the rules file afterwards.

## Rules

A rule is one line of comma-separated fields. The pattern is a regular
expression.

- `JuMp,Yo Jump`: replace every match of `JuMp` with `Yo Jump`.
- `i,jump,Yo Jump`: the same, but the match ignores case.
- `\bjump\b,Yo Jump`: replace the whole word only.

Rules are stored in an INI file with a `[rules]` section holding
`1\rulestr=...`, `2\rulestr=...` and `size=N`. Use `load_rules_file` and
`save_rules_file` to read and write it. Saving keeps any other sections
already in the file.

```python
from quickread.rules import RuleBook
from quickread.filtering import prepare_speech

book = RuleBook([])
book.add("i,jump,Yo Jump")
print(prepare_speech("Jump now", book.rules, True, "\n"))
```

## Modules

- `quickread.rules` handles rules.
  - `parse_rule` returns a `Rule` and raises `ValueError` on a malformed rule.
  - `rule_is_case_insensitive` and `is_rule_valid` check rule strings.
  - `load_rules_file` and `save_rules_file` read and write the INI file.
  - `RuleBook` holds a rule list and provides `add`, `remove`,
    `restore_last_removed`, `import_rules`, `reorder`, `to_text`, `from_text`,
    `load`, `save` and `key_index`.
- `quickread.filtering` prepares the text itself.
  - `apply_filter` applies the rules and the line fixes. Its `eol` argument
    defaults to `"\n\r"` on Windows and `"\n"` elsewhere.
  - `transform_speakers` rewrites the dialogue labels.
  - `find_two_words` finds two successive matches of a pattern.
  - `strip_leading_line` drops the text up to the first line break.
  - `prepare_speech` runs the whole pipeline.
- `quickread.history` keeps track of earlier text.
  - `TextHistory` holds back and forward stacks, with `push`, `back`,
    `forward`, `trim`, `can_go_back` and `can_go_forward`. `back` and
    `forward` raise `IndexError` when the stack is empty.
  - `RepeatGate` decides whether text equal to the last spoken text is
    spoken again.
- `quickread.charnames` gives spoken names for high bytes.
  - `byte_name` returns the name of one byte.
  - `convert_all_to_names` replaces high bytes in a `bytes` value with their
    names and silence tags.
- `quickread.ttstools` has `make_silence`, which appends a
  `<silence msec="..."/>` tag.
- `quickread.animator` has `StatusAnimator`, which cycles reading icons
  through a callback. The caller drives it by calling `tick` and
  `clear_error`.

## What it does not do

quickread produces text only. It does not speak the text and has no link to
a speech engine. It does not watch the clipboard and has no window or tray
icon. To hear the result, pass the output of `prepare_speech` or of the
`quickread` command to a speech program of your choice.