# termadoro

termadoro is a small pomodoro timer for the terminal. It runs one work
period and then one rest period. During each period it shows an animated
clock head and a countdown. At the end of each period it says "Time" out
loud.

## Installation

```
pip install .
```

To speak the alarm, `Bell` runs `say Time` on macOS and `spd-say Time` on
other systems. One of these programs must be on your `PATH`. The screen is
cleared with the `clear` command before each redraw. If `clear` is missing,
the timer runs without clearing the screen.

## Usage

```
tdoro WORK REST
```

`WORK` and `REST` are lengths in minutes. Fractions are accepted. This
example runs a 25 minute work period and then a 5 minute rest:

```
tdoro 25 5
```

- If you give fewer than two arguments, a very short schedule runs. Each
  period lasts 0.0001 minutes.
- If either argument is not a number, `Schedule args not numbers` goes to
  stderr and the command exits with status 1. Surrounding spaces and
  underscores also count as not a number.
- Every half second, the screen is redrawn with the next frame of the clock
  head and the time left as `HH:MM:SS`. The work period uses a "working"
  clock head and the rest period uses a sleeping one.
- When the work period ends, the alarm sounds. If it fails,
  `Failed to sound bell` goes to stderr and the rest period still runs.
- When the rest period ends, `ticker done` is printed and the alarm sounds
  again. If it succeeds, `Termadoro Success` is printed and the exit status
  is 0. If it fails, `Failed to sound bell` goes to stderr and the exit
  status is 1.

## Using it from Python

```python
import sys
from termadoro.tdoro import run, format_half_seconds, scheduler
from termadoro.alarm import Bell

print(format_half_seconds(3000))   # 00:25:00
print(scheduler(25, 5))            # Schedule(work=25, rest=5)
run(["tdoro", "25", "5"], sys.stdout, sys.stderr, Bell())
```

The modules are:

- `termadoro.tdoro` has these names:
  - `run(args, stdout, stderr, bell)`. In `args`, the program name comes first, then the optional work and rest lengths.
  - `main(argv=None)`, the command entry point. It returns the exit status.
  - `scheduler` and the `Schedule` dataclass.
  - `format_half_seconds`, which turns a count of half seconds into `HH:MM:SS`.
  - `run` raises `ScheduleError` for bad arguments and `BellError` when the final alarm fails.
- `termadoro.alarm` has these names:
  - `Bell`, the spoken alarm.
  - `Ringer`, a protocol for any object with a `ring()` method that raises on failure.
  - `ring_alarm(bell)`, which rings and wraps any failure in `AlarmError`.
- `termadoro.art` has the frames and these names:
  - `Reel`, a looping sequence of frames with `draw(out)` and `next()`.
  - `clock_head_work_reel()` and `clock_head_rest_reel()`.

Any object with a `ring()` method can be passed in place of `Bell`. This is
useful in tests, or to use a different kind of alarm.

## What it does not do

termadoro runs a single work period and a single rest period, then exits.
It does not repeat cycles, count completed pomodoros, pause or resume, or
read settings from a file. Lengths are taken only from the command line.

## Development

```
pip install -e ".[test]"
pytest
```