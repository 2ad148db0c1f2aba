"""Cross-platform keyboard input handler for timer controls."""

import sys
from typing import Optional


class KeyboardHandler:
    """Non-blocking keyboard input handler."""

    def __init__(self):
        self.fd = None
        self.old_settings = None
        self._setup()

    def _setup(self):
        """Setup terminal for non-blocking input."""
        try:
            import termios
            import tty
        except ImportError:
            # Windows
            return

        try:
            self.fd = sys.stdin.fileno()
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except (termios.error, OSError, ValueError):
            # stdin is not a terminal
            self.old_settings = None

    def get_key(self) -> Optional[str]:
        """
        Get a single keypress without blocking.

        Returns the key character or None if no key pressed.
        """
        if self.old_settings is None:
            return None
        try:
            import select

            if select.select([sys.stdin], [], [], 0)[0]:
                key = sys.stdin.read(1)
                return key.lower()
            return None
        except (OSError, ValueError):
            return None

    def stop(self):
        """Restore terminal settings."""
        if self.old_settings:
            import termios

            try:
                termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            except (OSError, termios.error):
                pass


class WindowsKeyboardHandler:
    """Keyboard handler for Windows using msvcrt."""

    def __init__(self):
        try:
            import msvcrt

            self.msvcrt = msvcrt
        except ImportError:
            self.msvcrt = None

    def get_key(self) -> Optional[str]:
        """Get key on Windows."""
        if not self.msvcrt:
            return None

        if self.msvcrt.kbhit():
            key = self.msvcrt.getch()
            if isinstance(key, bytes):
                key = key.decode("utf-8", errors="ignore")
            return key.lower()
        return None

    def stop(self):
        """No cleanup needed on Windows."""


def get_keyboard_handler():
    """Pick the handler for the running platform."""
    if sys.platform == "win32":
        return WindowsKeyboardHandler()
    return KeyboardHandler()
