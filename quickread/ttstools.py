"""Helpers for building speech-synthesis markup."""


def make_silence(text: str, silence_ms: int) -> str:
    """Return *text* followed by a silence tag lasting *silence_ms* milliseconds."""
    return f'{text} <silence msec="{silence_ms}"/>'