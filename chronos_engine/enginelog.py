"""Collects FPS, error and info entries and writes periodic reports."""

import threading
from pathlib import Path

from .constants import LINES_IN_LOG_SETUP_FILE

DEFAULT_EVERY_X_FRAMES = 100


def function_name(func) -> str:
    """Return a readable name for a callable."""
    return getattr(func, "__qualname__", type(func).__qualname__)


class EngineLog:
    """Thread-safe log that is flushed to a file every N frames."""

    def __init__(self) -> None:
        self.every_x_frames = DEFAULT_EVERY_X_FRAMES
        self.output_dir = Path("")
        self.frames_since_last_add = 0
        self.num_log_files = 0
        self._fps: list[float] = []
        self._errors: list[str] = []
        self._infos: list[str] = []
        self._fps_lock = threading.Lock()
        self._errors_lock = threading.Lock()
        self._infos_lock = threading.Lock()

    def setup(self, game_dir) -> None:
        """Read ``Settings/Logs/LogSettings.txt`` under ``game_dir``.

        Without the file the defaults stay. With it, the first line is the
        report interval in frames and the second the output directory
        relative to ``game_dir``, which is created.
        """
        game_dir = Path(game_dir)
        settings_file = game_dir / "Settings" / "Logs" / "LogSettings.txt"
        try:
            with settings_file.open() as handle:
                lines = [line.rstrip("\n") for _, line in zip(range(LINES_IN_LOG_SETUP_FILE), handle)]
        except OSError:
            self.every_x_frames = DEFAULT_EVERY_X_FRAMES
            self.output_dir = Path("")
            return

        lines += [""] * (LINES_IN_LOG_SETUP_FILE - len(lines))
        self.every_x_frames = int(lines[0])
        relative = lines[1].replace("\\", "/").strip("/")
        self.output_dir = game_dir / relative if relative else game_dir
        self.output_dir.mkdir(parents=True, exist_ok=True)
        (self.output_dir / "VisualRenderer").mkdir(exist_ok=True)

    def add_fps(self, fps: float) -> None:
        with self._fps_lock:
            self._fps.append(fps)

    def add_error(self, message: str) -> None:
        with self._errors_lock:
            self._errors.append(message)

    def add_info(self, message: str) -> None:
        with self._infos_lock:
            self._infos.append(message)

    def fps_list(self) -> list[float]:
        with self._fps_lock:
            return list(self._fps)

    def errors(self) -> list[str]:
        with self._errors_lock:
            return list(self._errors)

    def infos(self) -> list[str]:
        with self._infos_lock:
            return list(self._infos)

    def update_counters(self, fps: float) -> None:
        """Count a frame and record its FPS."""
        with self._fps_lock:
            self.frames_since_last_add += 1
            self._fps.append(fps)

    def write_report(self, start_stamp: str):
        """Write a report once the interval is reached.

        Returns the path written, or None when nothing was written.
        """
        if self.frames_since_last_add != self.every_x_frames:
            return None

        path = self.output_dir / f"{start_stamp}LogFile{self.num_log_files}.ChronosLog"
        fps = self.fps_list()
        errors = self.errors()
        infos = self.infos()
        average = sum(fps) / len(fps) if fps else float("nan")

        try:
            with path.open("w") as out:
                out.write(f"FPS = {average:.6f} (Over {self.every_x_frames} frames)\n")
                out.writelines(f"{entry}\n" for entry in errors)
                out.writelines(f"{entry}\n" for entry in infos)
        except OSError:
            print(f"Error with : {path}")
            return None

        self.frames_since_last_add = 0
        self.num_log_files += 1
        with self._infos_lock:
            self._infos.clear()
        with self._errors_lock:
            self._errors.clear()
        with self._fps_lock:
            self._fps.clear()
        return path