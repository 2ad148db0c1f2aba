"""Sound playback adapter."""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from pathlib import Path

from rich.console import Console

from pomodoro_cli.models.focus.sounds import DEFAULT_SOUND, SoundOption, is_silent
from pomodoro_cli.repositories.repository import SoundSink

logger = logging.getLogger(__name__)

# System sound files per platform; options without a file use the terminal bell
MACOS_SOUNDS: dict[SoundOption, str] = {
    "tri-tone": "/System/Library/Sounds/Glass.aiff",
    "chime": "/System/Library/Sounds/Blow.aiff",
    "bell": "/System/Library/Sounds/Ping.aiff",
    "digital": "/System/Library/Sounds/Tink.aiff",
    "gentle": "/System/Library/Sounds/Purr.aiff",
}

LINUX_SOUNDS: dict[SoundOption, str] = {
    "tri-tone": "/usr/share/sounds/freedesktop/stereo/complete.oga",
    "chime": "/usr/share/sounds/freedesktop/stereo/message.oga",
    "bell": "/usr/share/sounds/freedesktop/stereo/bell.oga",
    "digital": "/usr/share/sounds/freedesktop/stereo/message-new-instant.oga",
    "gentle": "/usr/share/sounds/freedesktop/stereo/dialog-information.oga",
}


class TerminalSoundSink(SoundSink):
    """Play system sounds with ``afplay``/``paplay``, else ring the terminal bell.

    Playback is started in the background and never waited on.
    """

    def __init__(
        self,
        enabled: bool = True,
        console: Console | None = None,
        platform: str | None = None,
    ):
        self.enabled = enabled
        self.console = console or Console(stderr=True)
        self.platform = platform or sys.platform
        self._selected_sound: SoundOption = DEFAULT_SOUND

    @property
    def selected_sound(self) -> SoundOption:
        return self._selected_sound

    @selected_sound.setter
    def selected_sound(self, sound: SoundOption) -> None:
        self._selected_sound = sound

    def play_completion(self) -> None:
        self._play(self._selected_sound)

    def play_preview(self, sound: SoundOption) -> None:
        self._play(sound)

    def command_for(self, sound: SoundOption) -> list[str] | None:
        """Player command for ``sound``, or None to fall back to the bell."""
        if self.platform == "darwin":
            player, sounds = "afplay", MACOS_SOUNDS
        else:
            player, sounds = "paplay", LINUX_SOUNDS

        path = sounds.get(sound)
        binary = shutil.which(player)
        if path is None or binary is None or not Path(path).exists():
            return None
        return [binary, path]

    def _play(self, sound: SoundOption) -> None:
        if not self.enabled or is_silent(sound):
            return

        cmd = self.command_for(sound)
        if cmd is None:
            self.console.bell()
            return
        try:
            subprocess.Popen(cmd, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        except OSError as e:
            logger.warning("sound player failed (%s), ringing bell", e)
            self.console.bell()
