"""Thread-safe flag that asks the main loop to stop."""

import threading


class ExitFlag:
    """A flag set once the program should leave its main loop."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._exit = False

    def reset(self) -> None:
        """Clear the flag so the main loop keeps running."""
        with self._lock:
            self._exit = False

    def request(self) -> None:
        """Ask the main loop to stop."""
        with self._lock:
            self._exit = True

    def is_set(self) -> bool:
        """Return whether an exit has been requested."""
        with self._lock:
            return self._exit