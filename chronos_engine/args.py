"""Command-line options the engine is launched with."""

import re
import sys
from dataclasses import dataclass

from .exitflag import ExitFlag

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class LaunchArgs:
    """Options read from ``--name value`` pairs."""

    game: str = ""
    save: str = ""
    debug: bool = True
    frames: int = 0
    use_frames: bool = False
    use_frame_debug: bool = False

    def decrement_frames(self, exit_flag: ExitFlag) -> None:
        """Count one frame down, requesting exit on the last one."""
        if self.frames > 1:
            self.frames -= 1
        else:
            exit_flag.request()


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"Not a number: {text!r}")
    return int(match.group(1))


def parse_args(argv, exit_flag: ExitFlag) -> LaunchArgs:
    """Parse option/value pairs; argv excludes the program name.

    An unknown option requests exit on ``exit_flag``.
    """
    items = list(sys.argv[1:] if argv is None else argv)
    if len(items) % 2 == 1:
        print(
            "Removing the last argumnent because there is no match for it. "
            f"The argument is : {items[-1]}."
        )
        items.pop()

    args = LaunchArgs()
    for name, value in zip(items[::2], items[1::2]):
        if name == "--game":
            args.game = value
        elif name == "--save":
            args.save = value
        elif name == "--debug":
            args.debug = value != "0"
        elif name == "--frames":
            args.frames = _leading_int(value)
            args.use_frames = True
        elif name == "--useframedebug":
            args.use_frame_debug = value == "true"
        else:
            exit_flag.request()
            print(f"{name} is not a valid argument")
    return args