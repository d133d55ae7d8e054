import os
import re
import threading
import time
from datetime import datetime

import pytest

from chronos_engine.enginelog import EngineLog
from chronos_engine.settings import Settings
from chronos_engine.timing import (
    FrameClock,
    ScopedTimer,
    TimerRecord,
    VisualRenderer,
    now_micros,
    timestamp_label,
)

LABEL = re.compile(r"^\d{2}M\d{2}D\d{4}Y_\d{2}H_\d{2}M_\d{2}S$")


def test_timestamp_label_fixed_moment():
    assert timestamp_label(datetime(2025, 3, 7, 4, 5, 6)) == "03M07D2025Y_04H_05M_06S"


def test_timestamp_label_default_shape():
    label = timestamp_label()
    assert len(label) == 23
    assert label[2] == "M"
    assert label[5] == "D"
    assert label.endswith("S")
    assert LABEL.match(label)


def test_now_micros_close_to_wall_clock():
    reference = int(time.time() * 1_000_000)
    assert abs(now_micros() - reference) < 1_000_000


def test_frame_clock_start_resets():
    clock = FrameClock(Settings())
    clock.start()
    assert clock.delta_time == 0
    assert clock.fps == 0
    assert clock.last_frame_micros == 0
    assert LABEL.match(clock.started_at)


def test_frame_clock_tick_consistency():
    clock = FrameClock(Settings())
    clock.start()
    first = clock.current_micros
    time.sleep(0.002)
    clock.tick()
    assert clock.last_frame_micros == first
    assert clock.difference_micros == clock.current_micros - first
    assert clock.delta_time == pytest.approx(clock.difference_micros / 1_000_000)
    assert clock.fps == pytest.approx(1 / clock.delta_time)


def test_frame_clock_tick_after_long_frame():
    clock = FrameClock(Settings())
    clock.start()
    clock.current_micros = now_micros() - 1_000_000
    clock.tick()
    assert clock.difference_micros >= 1_000_000
    assert clock.delta_time >= 1.0
    assert clock.fps <= 1.0


def test_frame_clock_sleep_waits_for_frame():
    clock = FrameClock(Settings(set_fps_at_monitors_max=True, max_fps=100))
    clock.start()
    clock.sleep()
    assert now_micros() - clock.current_micros >= 9_000


def test_frame_clock_sleep_disabled_returns_fast():
    clock = FrameClock(Settings(set_fps_at_monitors_max=False, max_fps=1))
    clock.start()
    clock.sleep()
    assert now_micros() - clock.current_micros < 500_000


def test_visual_renderer_start_writes_header(tmp_path):
    renderer = VisualRenderer(tmp_path, True)
    renderer.start()
    assert renderer.text_path.read_text() == ""
    assert renderer.browser_path.read_text() == '{\n    "traceEvents": [\n'


def test_visual_renderer_flush_writes_records(tmp_path):
    renderer = VisualRenderer(tmp_path, True)
    renderer.start()
    renderer.record(TimerRecord("draw", 100, 25, 7))
    renderer.flush()
    text = renderer.text_path.read_text()
    assert "    TimerName : draw\n" in text
    assert "    StartTime : 100\n" in text
    assert "    TotalTime : 25\n" in text
    assert "    ThreadID : 7\n" in text
    browser = renderer.browser_path.read_text()
    assert '"ph": "B"' in browser
    assert '"ts": "125"' in browser
    assert f'"pid": "{os.getpid()}"' in browser
    assert renderer.records == []


def test_visual_renderer_disabled_ignores_records(tmp_path):
    renderer = VisualRenderer(tmp_path, False)
    renderer.start()
    renderer.record(TimerRecord("draw", 1, 2, 3))
    renderer.flush()
    assert renderer.records == []
    assert renderer.text_path.read_text() == ""


def test_scoped_timer_logs_info():
    log = EngineLog()
    with ScopedTimer("physics", use_log=True, log=log) as timer:
        pass
    infos = log.infos()
    assert len(infos) == 1
    assert infos[0] == f"CHRONOS TIMER : physics took {timer.elapsed_micros} microseconds to execute"


def test_scoped_timer_prints_without_log(capsys):
    with ScopedTimer():
        pass
    out = capsys.readouterr().out
    assert out.startswith("CHRONOS TIMER : A function took ")
    assert out.endswith(" microseconds to execute\n")


def test_scoped_timer_records_to_renderer(tmp_path, capsys):
    renderer = VisualRenderer(tmp_path, True)
    with ScopedTimer("frame", renderer=renderer) as timer:
        time.sleep(0.001)
    records = renderer.records
    assert len(records) == 1
    assert records[0].name == "frame"
    assert records[0].total_time == timer.elapsed_micros
    assert records[0].thread_id == threading.get_ident()
    assert timer.elapsed_micros >= 1000


def test_scoped_timer_use_log_requires_log():
    with pytest.raises(ValueError):
        ScopedTimer("x", use_log=True)