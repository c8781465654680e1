import re

from quickread.filtering import (
    apply_filter,
    find_two_words,
    prepare_speech,
    strip_leading_line,
    transform_speakers,
)

SPEAKER = re.compile(r"\b\w+: ", re.IGNORECASE | re.ASCII)


def test_empty_text_is_returned_unchanged():
    assert apply_filter("", ["JuMp,Yo Jump"], "\n") == ""


def test_case_sensitive_rule():
    assert apply_filter("JuMp now", ["JuMp,Yo Jump"], "\n") == "Yo Jump now"
    assert apply_filter("jump now", ["JuMp,Yo Jump"], "\n") == "jump now"


def test_case_insensitive_rule():
    assert apply_filter("JUMP now", ["i,jump,Yo Jump"], "\n") == "Yo Jump now"


def test_whole_word_rule():
    result = apply_filter("jump jumped", [r"\bjump\b,Yo Jump"], "\n")
    assert result == "Yo Jump jumped"


def test_backreference_in_replacement():
    assert apply_filter("cats", [r"(cat)s,\1"], "\n") == "cat"


def test_invalid_rules_are_ignored():
    text = "some words here"
    assert apply_filter(text, ["nocomma", "(,x"], "\n") == text


def test_replacement_limited_to_latin1():
    assert apply_filter("x", ["x,\u20ac"], "\n") == "?"


def test_line_breaks_become_spaces():
    result = apply_filter("alpha\nbeta\r\ngamma", [], "\n")
    assert "\n" not in result and "\r" not in result
    assert result.split() == ["alpha", "beta", "gamma"]


def test_windows_eol():
    result = apply_filter("alpha\n\rbeta", [], "\n\r")
    assert "\n" not in result and "\r" not in result
    assert result.split() == ["alpha", "beta"]


def test_numbered_line_gets_number_prefix():
    result = apply_filter("1. first", [], "\n")
    assert result.startswith(" Number ")
    assert result.endswith("1. first")


def test_range_dash_is_spoken():
    result = apply_filter("pages 3-4 read", [], "\n")
    assert "-" not in result
    assert " dash " in result


def test_hyphenated_word_keeps_dash():
    assert apply_filter("well-known", [], "\n") == "well-known"


def test_find_two_words_first_pair():
    text = "Ann: hi Bob: yo"
    found = find_two_words(text, 0, SPEAKER)
    assert found is not None
    one, two, index = found
    assert (one, two) == ("Ann: ", "Bob: ")
    assert index == text.index("Bob: ")


def test_find_two_words_from_start_index():
    text = "Ann: a Bob: b Cy: c"
    one, two, index = find_two_words(text, text.index("Bob"), SPEAKER)
    assert (one, two) == ("Bob: ", "Cy: ")
    assert index == text.index("Cy: ")


def test_find_two_words_needs_two_matches():
    assert find_two_words("Ann: hi", 0, SPEAKER) is None


def test_find_two_words_accepts_string_pattern():
    found = find_two_words("a1 b2", 0, r"\w\d")
    assert found == ("a1", "b2", 3)


def test_transform_without_speakers_is_identity():
    text = "nothing to see here"
    assert transform_speakers(text) == text


def test_single_speaker_is_left_alone():
    assert transform_speakers("Alice: hi") == "Alice: hi"


def test_speaker_change_adds_says():
    result = transform_speakers("Alice: hi\nBob: yo")
    assert result.startswith("Alice says ")
    assert result.endswith("Bob: yo")


def test_repeated_speaker_label_removed():
    result = transform_speakers("Alice: hi\nAlice: there\nBob: yo")
    assert result == "Alice says  hi\nthere\nBob: yo"
    assert result.count("Alice") == 1


def test_strip_leading_line():
    assert strip_leading_line("title\nbody") == "body"
    assert strip_leading_line("title\rbody\nmore") == "body\nmore"
    assert strip_leading_line("single") == "single"


def test_prepare_speech_without_filter():
    text = "Alice: hi\nBob: yo"
    assert prepare_speech(text, ["yo,hey"], False, "\n") == transform_speakers(text)


def test_prepare_speech_with_filter():
    result = prepare_speech("Alice: hi\nBob: yo", ["yo,hey"], True, "\n")
    assert result.startswith("Alice says ")
    assert result.endswith("Bob: hey")
    assert "\n" not in result