"""Back/forward history of displayed texts and repeat suppression."""

from __future__ import annotations

from collections import deque


class TextHistory:
    """Two stacks of previously displayed texts, most recent first."""

    def __init__(self, max_size: int = 50) -> None:
        self.max_size = max_size
        self.back_stack: deque[str] = deque()
        self.forward_stack: deque[str] = deque()

    def push(self, current: str) -> None:
        """Record *current* as the text being replaced by a new one."""
        self.forward_stack.clear()
        self.back_stack.appendleft(current)

    def back(self, current: str) -> str:
        """Step back: return the previous text and keep *current* for forward."""
        if not self.back_stack:
            raise IndexError("no earlier text in history")
        text = self.back_stack.popleft()
        self.forward_stack.appendleft(current)
        return text

    def forward(self, current: str) -> str:
        """Step forward: return the next text and keep *current* for back."""
        if not self.forward_stack:
            raise IndexError("no later text in history")
        text = self.forward_stack.popleft()
        self.back_stack.appendleft(current)
        return text

    def trim(self) -> str | None:
        """Drop the oldest back entry if the stack exceeds its size; return it."""
        if len(self.back_stack) > self.max_size:
            return self.back_stack.pop()
        return None

    def can_go_back(self) -> bool:
        """Return True if there is an earlier text."""
        return bool(self.back_stack)

    def can_go_forward(self) -> bool:
        """Return True if there is a later text."""
        return bool(self.forward_stack)


class RepeatGate:
    """Decides whether a text equal to the last spoken one is spoken again."""

    def __init__(self, threshold: int = 0) -> None:
        self.threshold = threshold
        self.last_text = ""
        self.same_count = 0

    def remember(self, text: str) -> None:
        """Record *text* as the last text spoken."""
        self.last_text = text

    def should_speak(self, text: str) -> bool:
        """Return False while a repeat of the last text is below the threshold."""
        if text != self.last_text:
            return True
        self.same_count += 1
        if self.same_count < self.threshold:
            return False
        self.same_count = 0
        return True