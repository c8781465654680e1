import pytest

from quickread.history import RepeatGate, TextHistory


def test_new_history_is_empty():
    history = TextHistory()
    assert history.can_go_back() is False
    assert history.can_go_forward() is False


def test_back_and_forward_round_trip():
    history = TextHistory()
    history.push("first")
    assert history.can_go_back() is True
    assert history.back("second") == "first"
    assert history.can_go_forward() is True
    assert history.can_go_back() is False
    assert history.forward("first") == "second"
    assert history.can_go_forward() is False
    assert history.can_go_back() is True


def test_push_clears_forward():
    history = TextHistory()
    history.push("a")
    history.back("b")
    history.push("a")
    assert history.can_go_forward() is False


def test_most_recent_comes_back_first():
    history = TextHistory()
    for text in ["one", "two", "three"]:
        history.push(text)
    assert history.back("now") == "three"
    assert history.back("three") == "two"


def test_back_on_empty_raises():
    with pytest.raises(IndexError):
        TextHistory().back("x")


def test_forward_on_empty_raises():
    with pytest.raises(IndexError):
        TextHistory().forward("x")


def test_trim_drops_oldest_only_when_over_size():
    history = TextHistory(max_size=2)
    history.push("old")
    history.push("mid")
    assert history.trim() is None
    history.push("new")
    assert history.trim() == "old"
    assert list(history.back_stack) == ["new", "mid"]


def test_gate_allows_new_text():
    gate = RepeatGate()
    gate.remember("hello")
    assert gate.should_speak("other") is True


def test_gate_with_zero_threshold_allows_repeats():
    gate = RepeatGate(0)
    gate.remember("hello")
    assert all(gate.should_speak("hello") for _ in range(3))


def test_gate_with_threshold_holds_back_repeats():
    gate = RepeatGate(2)
    gate.remember("hello")
    assert gate.should_speak("hello") is False
    assert gate.should_speak("hello") is True
    assert gate.should_speak("hello") is False