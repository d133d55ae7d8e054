"""Background thread that keeps the audio output running."""

import threading
from typing import Optional


class AudioThread:
    """Runs ``output_audio`` repeatedly on a worker thread until stopped."""

    def __init__(self) -> None:
        self._running = False
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        """Whether the worker thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the worker, stopping a previous one first."""
        self.stop()
        with self._lock:
            self._running = True
        self._thread = threading.Thread(target=self._work, name="audio", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Ask the worker to stop and wait for it."""
        with self._lock:
            self._running = False
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def output_audio(self) -> None:
        """Produce one chunk of audio output; nothing is output yet."""

    def _work(self) -> None:
        run = True
        while run:
            self.output_audio()
            with self._lock:
                run = self._running

    def __enter__(self) -> "AudioThread":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.stop()
        return False