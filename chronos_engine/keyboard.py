"""Background polling of key states."""

import threading
from typing import Optional

KEY_CODE_COUNT = 65536


class Keyboard:
    """Polls every key code on a worker thread and keeps the latest states."""

    def __init__(self) -> None:
        self._codes: tuple = (False,) * KEY_CODE_COUNT
        self._codes_lock = threading.Lock()
        self._running = False
        self._running_lock = threading.Lock()
        self._main_running = False
        self._main_lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None

    @property
    def alive(self) -> bool:
        """Whether the polling thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start polling on a worker thread."""
        with self._running_lock:
            self._running = True
        with self._main_lock:
            self._main_running = True
        self._thread = threading.Thread(target=self._poll_loop, name="keyboard", daemon=True)
        self._thread.start()

    def cleanup(self) -> None:
        """Stop polling and wait for the worker to finish."""
        self.stop_running()
        with self._main_lock:
            self._main_running = False
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def stop_running(self) -> None:
        """Pause polling; the last states are kept."""
        with self._running_lock:
            self._running = False

    def start_running(self) -> None:
        """Resume polling."""
        with self._running_lock:
            self._running = True

    def read_all(self) -> tuple:
        """States of every key code, indexed by code."""
        with self._codes_lock:
            return self._codes

    def read(self, code: int) -> bool:
        """State of one key code."""
        if not 0 <= code < KEY_CODE_COUNT:
            raise IndexError(f"Key code out of range: {code}")
        with self._codes_lock:
            return self._codes[code]

    def detect_key_pressed(self, code: int) -> bool:
        """Whether a key is pressed; no key source is attached, so never."""
        return False

    def _detect_all(self) -> tuple:
        return tuple(self.detect_key_pressed(code) for code in range(KEY_CODE_COUNT))

    def _main_is_running(self) -> bool:
        with self._main_lock:
            return self._main_running

    def _poll_loop(self) -> None:
        while self._main_is_running():
            with self._running_lock:
                running = self._running
            if running:
                codes = self._detect_all()
                with self._codes_lock:
                    self._codes = codes