"""Animated clock-head frames drawn to the terminal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, TextIO

_TOP = "        ._______.         "
_BROW = "       /    12   \\     "
_GAP = "\t\t     "
_NINE = "      |9         3|"
_SIDE = "      |           |"
_CHIN = "       \\_________/"


def _frame(*lines: str) -> str:
    return "\n" + "\n".join(lines) + "\n"


def _work_frame(
    *,
    top: str = _TOP,
    gap: str = _GAP,
    arm: str = "",
    shoulder: str = "",
    mouth: str = "      |     __O   |__",
    hip: str = "",
    six: str = "\t    6            ",
) -> str:
    return _frame(
        top,
        _BROW,
        gap,
        "      |   o   o   |    " + arm,
        _NINE + shoulder,
        mouth,
        _SIDE + "  " + hip,
        six,
        _CHIN,
    )


def _sleep_frame(top: str = "", brow: str = "", gap: str = "", eyes: str = " z") -> str:
    return _frame(
        _TOP + top,
        _BROW + brow,
        _GAP + gap,
        "      |   =   =   |" + eyes,
        _NINE,
        "      |   \\___/   |",
        _SIDE,
        "            6",
        _CHIN,
    )


CLOCK_HEAD_WORK_4 = _work_frame(
    top="\t._______.         ",
    gap="",
    arm="__-->>>O",
    shoulder="__--",
    hip="--__",
    six="            6            -->>>O",
)
CLOCK_HEAD_WORK_3 = _work_frame(arm="__", shoulder="__--", hip="--__")
CLOCK_HEAD_WORK_2 = _work_frame(shoulder="__")
CLOCK_HEAD_WORK_1 = _work_frame(mouth="      |    \\__/   |")

CLOCK_HEAD_SLEEP_5 = _sleep_frame("zzzz", "zzz", "zz")
CLOCK_HEAD_SLEEP_4 = _sleep_frame("", "zzz", "zz")
CLOCK_HEAD_SLEEP_3 = _sleep_frame("", "", "zz")
CLOCK_HEAD_SLEEP_2 = _sleep_frame()
CLOCK_HEAD_SLEEP_1 = _sleep_frame(eyes=" ")


@dataclass
class Reel:
    """A looping sequence of frames, remembering which one is showing."""

    frames: Sequence[str]
    current_frame: int = 0

    def draw(self, out: TextIO) -> None:
        """Write the current frame to ``out``."""
        out.write(self.frames[self.current_frame])

    def next(self) -> None:
        """Advance to the next frame, wrapping to the first after the last."""
        if self.current_frame == len(self.frames) - 1:
            self.current_frame = 0
        else:
            self.current_frame += 1


def clock_head_work_reel() -> Reel:
    """The reel shown while working."""
    return Reel(
        [CLOCK_HEAD_WORK_1, CLOCK_HEAD_WORK_2, CLOCK_HEAD_WORK_3, CLOCK_HEAD_WORK_4]
    )


def clock_head_rest_reel() -> Reel:
    """The reel shown while resting."""
    return Reel(
        [
            CLOCK_HEAD_SLEEP_1,
            CLOCK_HEAD_SLEEP_2,
            CLOCK_HEAD_SLEEP_3,
            CLOCK_HEAD_SLEEP_4,
            CLOCK_HEAD_SLEEP_5,
        ]
    )