"""Functions that may only be called a limited number of times per frame."""

from dataclasses import dataclass, field
from typing import Any, Callable

MAX_CALLS_MESSAGE = "Max calls reached on a LimitedFunction();"


@dataclass
class LimitedFunction:
    """A callable with a per-frame call budget; overruns are logged."""

    max_calls_per_frame: int
    function: Callable[[], Any]
    log: Any = field(repr=False)
    called_this_frame: int = 0

    def __call__(self):
        if not self.max_calls_per_frame > self.called_this_frame:
            self.log.add_error(MAX_CALLS_MESSAGE)
        result = self.function()
        self.called_this_frame += 1
        return result


class FrameBudget:
    """Registry of limited functions whose counters reset each frame."""

    def __init__(self, log) -> None:
        self.log = log
        self.functions: list[LimitedFunction] = []

    def register(self, max_calls_per_frame: int, function) -> LimitedFunction:
        """Wrap ``function`` with a per-frame budget and track it."""
        limited = LimitedFunction(max_calls_per_frame, function, self.log)
        self.functions.append(limited)
        return limited

    def reset(self) -> None:
        """Start a new frame for every registered function."""
        for limited in self.functions:
            limited.called_this_frame = 0