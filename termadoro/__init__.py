"""Terminal pomodoro timer with an animated clock head and a spoken alarm."""

__version__ = "0.1.0"
__all__ = ["alarm", "art", "tdoro"]