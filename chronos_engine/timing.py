"""Frame timing, scoped timers and the timer trace files."""

import math
import os
import threading
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

DEFAULT_TIMER_NAME = "A function"
TRACE_CATEGORY = "ChronosEngineTimer"


def now_micros() -> int:
    """Current wall-clock time in whole microseconds since the epoch."""
    return time.time_ns() // 1000


def timestamp_label(moment: Optional[datetime] = None) -> str:
    """Format a moment (default: now, local time) as ``MMMddDyyyyY_hhH_mmM_ssS``."""
    if moment is None:
        moment = datetime.now()
    return (
        f"{moment.month:02d}M{moment.day:02d}D{moment.year}Y_"
        f"{moment.hour:02d}H_{moment.minute:02d}M_{moment.second:02d}S"
    )


class FrameClock:
    """Tracks frame times, delta time and FPS, and caps the frame rate."""

    def __init__(self, settings) -> None:
        self.settings = settings
        self.current_micros = 0
        self.last_frame_micros = 0
        self.difference_micros = 0
        self.delta_time = 0.0
        self.fps = 0.0
        self.started_at = ""

    def start(self) -> None:
        """Reset the clock and remember when the program started."""
        self.current_micros = now_micros() - 10
        self.last_frame_micros = 0
        self.difference_micros = 0
        self.delta_time = 0.0
        self.fps = 0.0
        self.started_at = timestamp_label()

    def tick(self) -> None:
        """Advance one frame and recompute delta time and FPS."""
        self.last_frame_micros = self.current_micros
        self.current_micros = now_micros()
        self.difference_micros = self.current_micros - self.last_frame_micros
        self.delta_time = self.difference_micros / 1_000_000
        self.fps = 1 / self.delta_time if self.delta_time else math.inf

    def sleep(self) -> None:
        """Wait out the rest of the frame when the frame rate is capped."""
        if not self.settings.set_fps_at_monitors_max:
            return
        micros_per_frame = 1_000_000 // self.settings.max_fps
        elapsed = now_micros() - self.current_micros
        delay = micros_per_frame - elapsed
        if delay > 0:
            time.sleep(delay / 1_000_000)


@dataclass
class TimerRecord:
    """One finished timer measurement."""

    name: str
    start_time: int
    total_time: int
    thread_id: int


class VisualRenderer:
    """Collects timer records and appends them to the trace files."""

    def __init__(self, game_dir, enabled: bool) -> None:
        directory = Path(game_dir) / "Logs" / "VisualRenderer"
        self.text_path = directory / "VisualRenderer.ChronosVisRen"
        self.browser_path = directory / "BrowserRenderer.json"
        self.enabled = enabled
        self._records: list[TimerRecord] = []
        self._lock = threading.Lock()

    @property
    def records(self) -> list:
        """Records waiting for the next flush."""
        with self._lock:
            return list(self._records)

    def start(self) -> None:
        """Create both trace files, empty except for the browser header."""
        self.text_path.parent.mkdir(parents=True, exist_ok=True)
        self.text_path.write_text("")
        self.browser_path.write_text('{\n    "traceEvents": [\n')

    def record(self, record: TimerRecord) -> None:
        """Queue a record when rendering is enabled."""
        if not self.enabled:
            return
        with self._lock:
            self._records.append(record)

    def flush(self) -> None:
        """Append queued records to both files and clear the queue."""
        if not self.enabled:
            return
        with self._lock:
            records = list(self._records)
            self._records.clear()

        with self.text_path.open("a") as out:
            out.write("".join(
                "{\n"
                f"    TimerName : {rec.name}\n"
                f"    StartTime : {rec.start_time}\n"
                f"    TotalTime : {rec.total_time}\n"
                f"    ThreadID : {rec.thread_id}\n"
                "},\n"
                for rec in records
            ))

        pid = os.getpid()
        with self.browser_path.open("a") as out:
            out.write("".join(
                _trace_event(rec, pid, "B", rec.start_time, ",\n")
                + _trace_event(rec, pid, "E", rec.start_time + rec.total_time, ",\n", last=True)
                for rec in records
            ))


def _trace_event(rec: TimerRecord, pid: int, phase: str, ts: int, lead: str, last: bool = False) -> str:
    opening = "        {\n" if last else f"{lead}        {{\n"
    closing = "        }" if last else "        },\n"
    return (
        opening
        + f'            "name": "{rec.name}",\n'
        + f'            "cat": "{TRACE_CATEGORY}",\n'
        + f'            "ph": "{phase}",\n'
        + f'            "ts": "{ts}",\n'
        + f'            "pid": "{pid}",\n'
        + f'            "tid": "{rec.thread_id}",\n'
        + '            "args": {\n'
        + f'                "functionName": "{rec.name}"\n'
        + "            }\n"
        + closing
    )


class ScopedTimer:
    """Context manager that reports how long its block took."""

    def __init__(self, name: str = DEFAULT_TIMER_NAME, use_log: bool = False, log=None, renderer=None) -> None:
        if use_log and log is None:
            raise ValueError("use_log requires a log")
        self.name = name
        self.use_log = use_log
        self.log = log
        self.renderer = renderer
        self.start_micros = now_micros()
        self.elapsed_micros: Optional[int] = None

    def __enter__(self) -> "ScopedTimer":
        self.start_micros = now_micros()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        end = now_micros()
        self.elapsed_micros = end - self.start_micros
        message = f"CHRONOS TIMER : {self.name} took {self.elapsed_micros} microseconds to execute"
        if self.use_log:
            self.log.add_info(message)
        else:
            print(message)
        if self.renderer is not None and self.renderer.enabled:
            self.renderer.record(TimerRecord(
                name=self.name,
                start_time=self.start_micros,
                total_time=self.elapsed_micros,
                thread_id=threading.get_ident(),
            ))
        return False