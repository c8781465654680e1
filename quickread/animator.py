"""Tray-icon animation shown while text is being read."""

from __future__ import annotations

from collections.abc import Callable

MAX_ICON_NUM = 4
INTERVAL_MS = 60
ERROR_DISPLAY_MS = 700

ICON_ON = "://testmode_on.png"
ICON_ERROR = "://testmode_err.png"
ICON_READING: tuple[str, ...] = tuple(
    f":/testmode_reading{i}.png" for i in range(MAX_ICON_NUM)
)


class StatusAnimator:
    """Cycles reading icons through a callback while speech is running.

    The owner calls :meth:`tick` every :attr:`interval_ms` milliseconds while
    :attr:`running` is true, and :meth:`clear_error` once the delay returned
    by :meth:`show_error` has passed.
    """

    def __init__(self, set_icon_callback: Callable[[str], None] | None = None) -> None:
        self.set_icon_callback = set_icon_callback
        self.interval_ms = INTERVAL_MS
        self.running = False
        self.counter = 0

    def _show(self, icon: str) -> None:
        if self.set_icon_callback is not None:
            self.set_icon_callback(icon)

    def run(self) -> None:
        """Start the animation."""
        self.interval_ms = INTERVAL_MS
        self.set_icon(0)
        self.running = True

    def stop(self) -> None:
        """Stop the animation and show the idle icon."""
        self.running = False
        self._show(ICON_ON)

    def show_error(self) -> int:
        """Show the error icon; return how long in ms it should stay up."""
        self._show(ICON_ERROR)
        return ERROR_DISPLAY_MS

    def clear_error(self) -> None:
        """Put the idle icon back after an error was shown."""
        self._show(ICON_ON)

    def set_icon(self, num: int) -> None:
        """Show reading icon *num*; frame 0 and out-of-range frames show nothing."""
        if 0 < num < MAX_ICON_NUM:
            self._show(ICON_READING[num])

    def tick(self) -> None:
        """Advance the animation by one frame."""
        if not self.running or self.set_icon_callback is None:
            return
        self.set_icon(self.counter)
        self.counter += 1
        if self.counter >= MAX_ICON_NUM:
            self.counter = 0