"""Engine settings loaded from binary-encoded text files."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .binary import binary_to_bool, binary_to_float, binary_to_int
from .constants import (
    DEFAULT_AA_DROPOFF,
    DEFAULT_ANTI_ALIASING_LEVEL,
    DEFAULT_FOV,
    DEFAULT_GRAPHIC_LEVEL,
    DEFAULT_LIGHTING_LEVEL,
    DEFAULT_MAX_FPS,
    DEFAULT_NUMBER_OF_BOUNCES,
    DEFAULT_PARTICLES_LEVEL,
    DEFAULT_RESOLUTION_X,
    DEFAULT_RESOLUTION_Y,
    DEFAULT_SENSITIVITY,
    DEFAULT_SHADERS_LEVEL,
    DEFAULT_SHADOW_LEVEL,
    DEFAULT_VOLUME,
    LINES_IN_AUDIO_SETUP_FILE,
    LINES_IN_GRAPHICS_SETUP_FILE,
    LINES_IN_LOAD_SETTINGS_SETUP_FILE,
    LINES_IN_OPTIONS_SETUP_FILE,
    LINES_IN_RENDERING_SETUP_FILE,
    USE_BOUNCES,
    USE_GPU_RENDERING,
    USE_MONITORS_MAX_FPS,
    GraphicLevel,
)

_LEVEL_NAMES = {
    GraphicLevel.UNREAL: "Unreal",
    GraphicLevel.REALISTIC: "Realistic",
    GraphicLevel.ULTRA: "Ultra",
    GraphicLevel.VERY_HIGH: "VeryHigh",
    GraphicLevel.HIGH: "High",
    GraphicLevel.MEDIUM_HIGH: "MediumHigh",
    GraphicLevel.MEDIUM: "Medium",
    GraphicLevel.MEDIUM_LOW: "MediumLow",
    GraphicLevel.LOW: "Low",
    GraphicLevel.ULTRA_LOW: "UltraLow",
}
_LEVELS_BY_NAME = {name: level for level, name in _LEVEL_NAMES.items()}

_AA_SAMPLES = {
    GraphicLevel.UNREAL: 16,
    GraphicLevel.REALISTIC: 16,
    GraphicLevel.ULTRA: 8,
    GraphicLevel.VERY_HIGH: 8,
    GraphicLevel.HIGH: 4,
    GraphicLevel.MEDIUM_HIGH: 4,
    GraphicLevel.MEDIUM: 2,
    GraphicLevel.MEDIUM_LOW: 2,
    GraphicLevel.LOW: 1,
}

INDEX_FILE = Path("Settings") / "PathOfSettingsFiles.txt"


def decode_graphic_level(name: str) -> GraphicLevel:
    """Map a level name to its level; unknown names give ULTRA_LOW."""
    return _LEVELS_BY_NAME.get(name, GraphicLevel.ULTRA_LOW)


def encode_graphic_level(level) -> str:
    """Map a level to its name; unknown levels give "UltraLow"."""
    try:
        return _LEVEL_NAMES[GraphicLevel(level)]
    except ValueError:
        return "UltraLow"


def anti_aliasing_samples(level) -> int:
    """Number of anti-aliasing samples used at a graphic level."""
    try:
        return _AA_SAMPLES.get(GraphicLevel(level), 1)
    except ValueError:
        return 1


def _wrap(value: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half


def _read_lines(path, count: int) -> Optional[list]:
    """Return the first ``count`` lines, padded with empty ones, or None."""
    if not path:
        return None
    try:
        with Path(path).open() as handle:
            lines = [line.rstrip("\r\n") for _, line in zip(range(count), handle)]
    except OSError:
        return None
    return lines + [""] * (count - len(lines))


def _report_default(path) -> None:
    print("Can't load settings. Chronos engine will use defaults")
    print("Settings files should be at : ")
    print(f"The file at : {path} could not be loaded by the settings loader")


def _resolve(game_dir: Path, relative: str) -> Optional[Path]:
    cleaned = relative.replace("\\", "/").strip("/")
    return game_dir / cleaned if cleaned else None


@dataclass
class Settings:
    """Graphics, audio, rendering and option settings of the engine."""

    resolution_x: int = DEFAULT_RESOLUTION_X
    resolution_y: int = DEFAULT_RESOLUTION_Y
    max_fps: int = DEFAULT_MAX_FPS
    set_fps_at_monitors_max: bool = USE_MONITORS_MAX_FPS
    graphic_level: GraphicLevel = DEFAULT_GRAPHIC_LEVEL
    lighting: GraphicLevel = DEFAULT_LIGHTING_LEVEL
    shaders: GraphicLevel = DEFAULT_SHADERS_LEVEL
    particles: GraphicLevel = DEFAULT_PARTICLES_LEVEL
    shadows: GraphicLevel = DEFAULT_SHADOW_LEVEL
    anti_aliasing: GraphicLevel = DEFAULT_ANTI_ALIASING_LEVEL
    aa_dropoff: float = DEFAULT_AA_DROPOFF
    volume: float = DEFAULT_VOLUME
    gpu_rendering: bool = USE_GPU_RENDERING
    use_bounces: bool = USE_BOUNCES
    bounces: int = DEFAULT_NUMBER_OF_BOUNCES
    fov: float = DEFAULT_FOV
    sensitivity: float = DEFAULT_SENSITIVITY

    @classmethod
    def load(cls, game_dir) -> "Settings":
        """Load every settings file listed in ``Settings/PathOfSettingsFiles.txt``.

        The index file holds four paths relative to ``game_dir``: graphics,
        audio, rendering and options. Anything missing falls back to defaults.
        """
        game_dir = Path(game_dir)
        settings = cls()
        lines = _read_lines(game_dir / INDEX_FILE, LINES_IN_LOAD_SETTINGS_SETUP_FILE)
        if lines is None:
            settings.load_graphics("")
            settings.load_audio("")
            settings.load_rendering("")
            settings.load_options("")
            print("Can't load settings. Chronos engine will use defaults")
            print("Settings files should be at")
            print(f"{game_dir / INDEX_FILE}")
            return settings

        graphics, audio, rendering, options = (_resolve(game_dir, line) for line in lines)
        settings.load_graphics(graphics)
        settings.load_audio(audio)
        settings.load_rendering(rendering)
        settings.load_options(options)
        return settings

    def load_graphics(self, path) -> None:
        """Load monitor and graphic-level settings from an 11-line file."""
        lines = _read_lines(path, LINES_IN_GRAPHICS_SETUP_FILE)
        if lines is None:
            self.resolution_x = DEFAULT_RESOLUTION_X
            self.resolution_y = DEFAULT_RESOLUTION_Y
            self.max_fps = DEFAULT_MAX_FPS
            self.set_fps_at_monitors_max = USE_MONITORS_MAX_FPS
            self.graphic_level = DEFAULT_GRAPHIC_LEVEL
            self.lighting = DEFAULT_LIGHTING_LEVEL
            self.shaders = DEFAULT_SHADERS_LEVEL
            self.particles = DEFAULT_PARTICLES_LEVEL
            self.shadows = DEFAULT_SHADOW_LEVEL
            self.anti_aliasing = DEFAULT_ANTI_ALIASING_LEVEL
            self.aa_dropoff = DEFAULT_AA_DROPOFF
            _report_default(path or "")
            return

        self.resolution_x = _wrap(binary_to_int(lines[0]), 16)
        self.resolution_y = _wrap(binary_to_int(lines[1]), 16)
        self.max_fps = binary_to_int(lines[2])
        self.set_fps_at_monitors_max = binary_to_bool(lines[3])
        self.graphic_level = decode_graphic_level(lines[4])
        self.lighting = decode_graphic_level(lines[5])
        self.shaders = decode_graphic_level(lines[6])
        self.particles = decode_graphic_level(lines[7])
        self.shadows = decode_graphic_level(lines[8])
        self.anti_aliasing = decode_graphic_level(lines[9])
        self.aa_dropoff = binary_to_float(lines[10])

    def load_audio(self, path) -> None:
        """Load the volume from a one-line file."""
        lines = _read_lines(path, LINES_IN_AUDIO_SETUP_FILE)
        if lines is None:
            self.volume = DEFAULT_VOLUME
            _report_default(path or "")
            return
        self.volume = binary_to_float(lines[0])

    def load_rendering(self, path) -> None:
        """Load GPU use and ray bounce settings from a three-line file."""
        lines = _read_lines(path, LINES_IN_RENDERING_SETUP_FILE)
        if lines is None:
            self.gpu_rendering = USE_GPU_RENDERING
            self.use_bounces = USE_BOUNCES
            self.bounces = DEFAULT_NUMBER_OF_BOUNCES
            _report_default(path or "")
            return
        self.gpu_rendering = binary_to_bool(lines[0])
        self.use_bounces = binary_to_bool(lines[1])
        self.bounces = _wrap(binary_to_int(lines[2]), 8)

    def load_options(self, path) -> None:
        """Load field of view and sensitivity from a two-line file."""
        lines = _read_lines(path, LINES_IN_OPTIONS_SETUP_FILE)
        if lines is None:
            self.fov = DEFAULT_FOV
            self.sensitivity = DEFAULT_SENSITIVITY
            _report_default(path or "")
            return
        self.fov = float(binary_to_int(lines[0]))
        self.sensitivity = binary_to_float(lines[1])

    def apply_graphic_level(self) -> None:
        """Set every graphics quality setting to the overall graphic level."""
        level = self.graphic_level
        self.lighting = level
        self.shaders = level
        self.particles = level
        self.shadows = level
        self.anti_aliasing = level