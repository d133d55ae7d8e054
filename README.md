# chronos_engine

The runtime pieces a small game engine is built from. They are plain Python
objects that you wire together yourself, and they use only the standard
library.

## Modules

- `chronos_engine.args`: `parse_args(argv, exit_flag)` reads launch options
  given as name/value pairs and returns a `LaunchArgs`. `argv` leaves out the
  program name, and `None` means `sys.argv[1:]`. The options are `--game`,
  `--save`, `--debug` (any value other than `0` turns debug on, and debug is
  on by default), `--frames` (a leading integer, which also sets `use_frames`)
  and `--useframedebug` (only `true` turns it on). If the last option has no
  value, it is dropped with a printed notice. An unknown option prints a
  message and calls `exit_flag.request()`.
  `LaunchArgs.decrement_frames(exit_flag)` counts the frame budget down by
  one, and requests exit when the budget reaches its last frame.
- `chronos_engine.exitflag`: `ExitFlag` is a thread-safe "stop the main loop"
  flag with `reset()`, `request()` and `is_set()`.
- `chronos_engine.binary`: converts strings of `0`/`1` to and from values.
  `binary_to_int` accepts up to 32 bits and returns a signed 32-bit integer.
  `binary_to_float` takes exactly 32 bits and reads them as an IEEE-754
  single-precision float. `binary_to_bool` looks only at the first character.
  The reverse functions are `int_to_binary` (the low 32 bits, in two's
  complement), `float_to_binary` and `bool_to_binary`. Malformed input raises
  `BinaryFormatError`, which is a subclass of `ValueError`.
- `chronos_engine.constants`: `GraphicLevel`, the quality scale from
  `ULTRA_LOW` to `UNREAL`, and the engine's default values.
- `chronos_engine.settings`: `Settings` is a dataclass of the graphics, audio,
  rendering and option settings.
  - `Settings.load(game_dir)` reads `Settings/PathOfSettingsFiles.txt`. That
    file names four files, relative to `game_dir`, in this order: graphics,
    audio, rendering and options. Each one is loaded with `load_graphics`,
    `load_audio`, `load_rendering` or `load_options`.
  - A file that is missing leaves the defaults in place and prints a notice.
    A malformed value raises `BinaryFormatError`.
  - `apply_graphic_level()` copies `graphic_level` into the lighting, shaders,
    particles, shadows and anti-aliasing settings.
  - `decode_graphic_level`, `encode_graphic_level` and `anti_aliasing_samples`
    map between levels, their names and their anti-aliasing sample counts.
- `chronos_engine.enginelog`: `EngineLog` collects FPS samples, errors and
  info lines, each behind its own lock.
  - `setup(game_dir)` reads the report interval and the output directory from
    `Settings/Logs/LogSettings.txt`, and creates that directory.
  - `update_counters(fps)` counts a frame.
  - Once the interval is reached, `write_report(start_stamp)` writes a
    `.ChronosLog` file, clears the collected entries and returns the file's
    path. It returns `None` otherwise.
  - `function_name(func)` gives a callable's qualified name.
- `chronos_engine.limited`: `FrameBudget(log).register(max_calls, function)`
  returns a `LimitedFunction`. Calling it runs the function and returns the
  function's result. Once the per-frame budget has been used, each further
  call also adds an error to the log. `FrameBudget.reset()` starts a new
  frame.
- `chronos_engine.timing`:
  - `FrameClock(settings)` has `start()`, `tick()` and `sleep()`. `tick()`
    measures `delta_time` and `fps`. `sleep()` waits out the rest of the
    frame when `settings.set_fps_at_monitors_max` is set.
  - `timestamp_label()` formats a moment as, for example,
    `03M07D2025Y_14H_05M_09S`. With no argument it uses the current local
    time.
  - `ScopedTimer` is a context manager that reports how long its block took.
    The report is printed, or, when `use_log=True`, added to a log as an info
    line.
  - `ScopedTimer` can also pass a `TimerRecord` to a `VisualRenderer`. The
    renderer writes its records under `Logs/VisualRenderer/` in two forms: a
    plain listing and a browser trace-event file.
- `chronos_engine.audio`: `AudioThread` runs `output_audio()` in a loop on a
  worker thread, between `start()` and `stop()`. It can also be used as a
  context manager.
- `chronos_engine.keyboard`: `Keyboard` polls every key code (0 to 65535) on a
  worker thread. Use `start()` and `cleanup()` to start and end the thread,
  `stop_running()` and `start_running()` to pause and resume polling, and
  `read(code)` and `read_all()` to read the key states.

## Example

```python
from chronos_engine.args import parse_args
from chronos_engine.exitflag import ExitFlag
from chronos_engine.timing import ScopedTimer

flag = ExitFlag()
args = parse_args(["--game", "MyGame", "--frames", "3"], flag)

with ScopedTimer("load"):
    ...

while not flag.is_set():
    args.decrement_frames(flag)
```

## What it does not do

- There is no command-line program and no main loop. You call the pieces
  from your own code.
- There is no rendering, and no loading of scenes or game projects.
- `AudioThread.output_audio()` produces no sound.
- `Keyboard.detect_key_pressed()` is not attached to any input source, so
  every key always reads as not pressed.

## Installing and testing

```
pip install .[test]
pytest
```