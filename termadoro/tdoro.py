"""A terminal pomodoro timer: a work period, an alarm, then a rest period."""

from __future__ import annotations

import enum
import subprocess
import sys
import time
from dataclasses import dataclass
from typing import Iterator, Sequence, TextIO

from termadoro.alarm import AlarmError, Bell, Ringer, ring_alarm
from termadoro.art import clock_head_rest_reel, clock_head_work_reel

SUCCESS = "Termadoro Success\n"
FAILED_BELL = "Failed to sound bell\n"
FAILED_SCHED = "Schedule args not numbers\n"

_TICK_SECONDS = 0.5
_DEFAULT_MINUTES = 0.0001


class ScheduleError(ValueError):
    """The work or rest length was not a number."""


class BellError(RuntimeError):
    """The final alarm could not be sounded."""


@dataclass(frozen=True)
class Schedule:
    """Lengths of the work and rest periods, in minutes."""

    work: float
    rest: float


class _Phase(enum.Enum):
    WORK = "work"
    REST = "rest"


def scheduler(work: float, rest: float) -> Schedule:
    """Build a schedule from work and rest lengths in minutes."""
    return Schedule(work=work, rest=rest)


def format_half_seconds(count: float) -> str:
    """Format a count of half seconds as HH:MM:SS."""
    total = int(count / 2)
    sign = -1 if total < 0 else 1
    magnitude = abs(total)
    hours = sign * (magnitude // 3600)
    minutes = sign * ((magnitude % 3600) // 60)
    seconds = sign * (magnitude % 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def _parse_minutes(text: str) -> float:
    if text != text.strip() or "_" in text:
        raise ValueError(text)
    return float(text)


def _ticker(interval: float) -> Iterator[None]:
    """Yield once per interval, dropping ticks that fall behind."""
    next_at = time.monotonic() + interval
    while True:
        delay = next_at - time.monotonic()
        if delay > 0:
            time.sleep(delay)
        yield
        next_at += interval
        now = time.monotonic()
        if next_at < now:
            next_at = now


def _countdown(
    schedule: Schedule, bell: Ringer, stderr: TextIO
) -> Iterator[tuple[_Phase, float]]:
    ticks = _ticker(_TICK_SECONDS)
    current = schedule.work * 60 * 2
    yield _Phase.WORK, current
    for _ in ticks:
        yield _Phase.WORK, current
        current -= 1
        if current <= 0:
            break
    try:
        ring_alarm(bell)
    except AlarmError:
        stderr.write(FAILED_BELL)
    current = schedule.rest * 60 * 2
    for _ in ticks:
        yield _Phase.REST, current
        current -= 1
        if current <= 0:
            break


def _clear_screen() -> None:
    try:
        subprocess.run(
            ["clear"], stdin=subprocess.DEVNULL, stderr=subprocess.DEVNULL, check=False
        )
    except OSError:
        pass


def run(args: Sequence[str], stdout: TextIO, stderr: TextIO, bell: Ringer) -> None:
    """Run a work period then a rest period, drawing the clock as it goes.

    ``args`` holds the program name followed by optional work and rest
    lengths in minutes.
    """
    if len(args) >= 3:
        try:
            work = _parse_minutes(args[1])
            rest = _parse_minutes(args[2])
        except ValueError as exc:
            stderr.write(FAILED_SCHED)
            raise ScheduleError(FAILED_SCHED.strip()) from exc
        schedule = scheduler(work, rest)
    else:
        schedule = Schedule(work=_DEFAULT_MINUTES, rest=_DEFAULT_MINUTES)

    reels = {_Phase.WORK: clock_head_work_reel(), _Phase.REST: clock_head_rest_reel()}
    for phase, count in _countdown(schedule, bell, stderr):
        _clear_screen()
        reel = reels[phase]
        reel.draw(stdout)
        reel.next()
        stdout.write(f"\t{format_half_seconds(count)}\n")

    stdout.write("ticker done\n")

    try:
        ring_alarm(bell)
    except AlarmError as exc:
        stderr.write(FAILED_BELL)
        raise BellError(FAILED_BELL.strip()) from exc

    stdout.write(SUCCESS)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point; returns the process exit status."""
    args = list(sys.argv if argv is None else argv)
    try:
        run(args, sys.stdout, sys.stderr, Bell())
    except (ScheduleError, BellError):
        return 1
    return 0