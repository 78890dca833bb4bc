"""Exceptions raised by the timer engine."""


class TimerError(Exception):
    """Base class for timer engine errors."""


class DegenerateRoutine(TimerError):
    """The routine has zero work and zero rest, so it can never advance."""


class InvalidTransition(TimerError):
    """The requested control is not allowed in the current mode."""


class InvalidTickOrder(TimerError):
    """``now`` went backwards relative to the last observed instant."""
