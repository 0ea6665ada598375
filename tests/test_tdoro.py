import io

import pytest

from termadoro.art import CLOCK_HEAD_WORK_1
from termadoro.tdoro import (
    FAILED_BELL,
    FAILED_SCHED,
    SUCCESS,
    BellError,
    Schedule,
    ScheduleError,
    format_half_seconds,
    main,
    run,
    scheduler,
)


class SuccessRinger:
    def __init__(self):
        self.rings = 0

    def ring(self):
        self.rings += 1


class FailRinger:
    def ring(self):
        raise RuntimeError("failed")


def test_successful_run():
    stdout = io.StringIO()
    stderr = io.StringIO()
    ringer = SuccessRinger()
    run(["nameOfBinary", "0.0001", "0.0001"], stdout, stderr, ringer)
    out = stdout.getvalue()
    assert SUCCESS in out
    assert "ticker done\n" in out
    assert CLOCK_HEAD_WORK_1 in out
    assert "\t00:00:00\n" in out
    assert ringer.rings == 2
    assert stderr.getvalue() == ""


def test_failed_run():
    stdout = io.StringIO()
    stderr = io.StringIO()
    with pytest.raises(BellError):
        run(["nameOfBinary", "0.0001", "0.0001"], stdout, stderr, FailRinger())
    assert stderr.getvalue() == FAILED_BELL + FAILED_BELL
    assert SUCCESS not in stdout.getvalue()


def test_work_arg_not_number():
    stdout = io.StringIO()
    stderr = io.StringIO()
    with pytest.raises(ScheduleError):
        run(["nameOfBinary", "under test", "0.0001"], stdout, stderr, SuccessRinger())
    assert stderr.getvalue() == "Schedule args not numbers\n"


def test_rest_arg_not_number():
    stdout = io.StringIO()
    stderr = io.StringIO()
    with pytest.raises(ScheduleError):
        run(["nameOfBinary", "0.0001", "under test"], stdout, stderr, SuccessRinger())
    assert stderr.getvalue() == FAILED_SCHED
    assert stdout.getvalue() == ""


def test_scheduler():
    got = scheduler(0.0001, 0.0001)
    assert got.work == 0.0001
    assert got.rest == 0.0001
    assert got == Schedule(work=0.0001, rest=0.0001)


@pytest.mark.parametrize(
    "count, expected",
    [
        (6000.0, "00:50:00"),
        (3000.0, "00:25:00"),
        (2678.0, "00:22:19"),
        (2999.0, "00:24:59"),
    ],
)
def test_format_half_seconds(count, expected):
    assert format_half_seconds(count) == expected


def test_format_half_seconds_hours():
    assert format_half_seconds(7200.0 * 2) == "02:00:00"


def test_main_bad_args_returns_failure(capsys):
    status = main(["tdoro", "bad", "1"])
    assert status == 1
    assert capsys.readouterr().err == FAILED_SCHED