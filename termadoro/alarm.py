"""Sounding the alarm at the end of a period."""

from __future__ import annotations

import subprocess
import sys
from typing import Protocol


class AlarmError(RuntimeError):
    """The alarm could not be sounded."""


class Ringer(Protocol):
    """Anything that can sound an alarm, raising on failure."""

    def ring(self) -> None:
        """Sound the alarm once."""


def _speech_command(platform: str) -> list[str]:
    if platform == "darwin":
        return ["say", "Time"]
    return ["spd-say", "Time"]


class Bell:
    """Announces the time through the system speech synthesiser."""

    def ring(self) -> None:
        command = _speech_command(sys.platform)
        try:
            subprocess.run(
                command,
                check=True,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            raise AlarmError(f"{command[0]} failed") from exc


def ring_alarm(bell: Ringer) -> None:
    """Ring ``bell`` and wait for it, raising AlarmError if it fails."""
    try:
        bell.ring()
    except Exception as exc:
        raise AlarmError("Failed to sound bell") from exc