import pytest

from chronos_engine import constants
from chronos_engine.binary import (
    BinaryFormatError,
    bool_to_binary,
    float_to_binary,
    int_to_binary,
)
from chronos_engine.constants import GraphicLevel
from chronos_engine.settings import (
    Settings,
    anti_aliasing_samples,
    decode_graphic_level,
    encode_graphic_level,
)


def _write(path, lines):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n")
    return path


def _graphics_lines():
    return [
        int_to_binary(1920),
        int_to_binary(1080),
        int_to_binary(144),
        bool_to_binary(True),
        "High",
        "Ultra",
        "Medium",
        "Low",
        "VeryHigh",
        "Unreal",
        float_to_binary(1.5),
    ]


@pytest.mark.parametrize("level", list(GraphicLevel))
def test_level_name_round_trip(level):
    assert decode_graphic_level(encode_graphic_level(level)) is level


@pytest.mark.parametrize(
    "name, level",
    [("Unreal", GraphicLevel.UNREAL), ("MediumLow", GraphicLevel.MEDIUM_LOW), ("VeryHigh", GraphicLevel.VERY_HIGH)],
)
def test_decode_known_names(name, level):
    assert decode_graphic_level(name) is level


def test_decode_unknown_name_is_ultra_low():
    assert decode_graphic_level("nonsense") is GraphicLevel.ULTRA_LOW
    assert decode_graphic_level("") is GraphicLevel.ULTRA_LOW


def test_encode_unknown_level_is_ultra_low_name():
    assert encode_graphic_level(42) == "UltraLow"


@pytest.mark.parametrize(
    "level, samples",
    [
        (GraphicLevel.UNREAL, 16),
        (GraphicLevel.REALISTIC, 16),
        (GraphicLevel.ULTRA, 8),
        (GraphicLevel.VERY_HIGH, 8),
        (GraphicLevel.HIGH, 4),
        (GraphicLevel.MEDIUM_HIGH, 4),
        (GraphicLevel.MEDIUM, 2),
        (GraphicLevel.MEDIUM_LOW, 2),
        (GraphicLevel.LOW, 1),
        (GraphicLevel.ULTRA_LOW, 1),
    ],
)
def test_anti_aliasing_samples(level, samples):
    assert anti_aliasing_samples(level) == samples


def test_samples_never_decrease_with_level():
    samples = [anti_aliasing_samples(level) for level in GraphicLevel]
    assert samples == sorted(samples)


def test_load_without_files_uses_defaults(tmp_path, capsys):
    settings = Settings.load(tmp_path)
    assert settings.resolution_x == constants.DEFAULT_RESOLUTION_X
    assert settings.resolution_y == constants.DEFAULT_RESOLUTION_Y
    assert settings.max_fps == constants.DEFAULT_MAX_FPS
    assert settings.volume == constants.DEFAULT_VOLUME
    assert settings.fov == constants.DEFAULT_FOV
    assert settings.sensitivity == constants.DEFAULT_SENSITIVITY
    assert settings.bounces == constants.DEFAULT_NUMBER_OF_BOUNCES
    assert settings.anti_aliasing is constants.DEFAULT_ANTI_ALIASING_LEVEL
    assert "Can't load settings" in capsys.readouterr().out


def test_load_graphics_reads_file(tmp_path):
    path = _write(tmp_path / "graphics.txt", _graphics_lines())
    settings = Settings()
    settings.load_graphics(path)
    assert settings.resolution_x == 1920
    assert settings.resolution_y == 1080
    assert settings.max_fps == 144
    assert settings.set_fps_at_monitors_max is True
    assert settings.graphic_level is GraphicLevel.HIGH
    assert settings.lighting is GraphicLevel.ULTRA
    assert settings.shaders is GraphicLevel.MEDIUM
    assert settings.particles is GraphicLevel.LOW
    assert settings.shadows is GraphicLevel.VERY_HIGH
    assert settings.anti_aliasing is GraphicLevel.UNREAL
    assert settings.aa_dropoff == 1.5


def test_load_graphics_missing_file_resets_to_defaults(tmp_path):
    settings = Settings(resolution_x=800, lighting=GraphicLevel.HIGH)
    settings.load_graphics(tmp_path / "absent.txt")
    assert settings.resolution_x == constants.DEFAULT_RESOLUTION_X
    assert settings.lighting is constants.DEFAULT_LIGHTING_LEVEL


def test_load_audio_reads_volume(tmp_path):
    path = _write(tmp_path / "audio.txt", [float_to_binary(1659.5123291015625)])
    settings = Settings()
    settings.load_audio(path)
    assert settings.volume == 1659.5123291015625


def test_load_rendering_reads_file(tmp_path):
    path = _write(tmp_path / "render.txt", [bool_to_binary(True), bool_to_binary(False), int_to_binary(5)])
    settings = Settings()
    settings.load_rendering(path)
    assert settings.gpu_rendering is True
    assert settings.use_bounces is False
    assert settings.bounces == 5


def test_load_options_reads_file(tmp_path):
    path = _write(tmp_path / "options.txt", [int_to_binary(90), float_to_binary(1.5)])
    settings = Settings()
    settings.load_options(path)
    assert settings.fov == 90.0
    assert settings.sensitivity == 1.5


def test_bad_binary_line_raises(tmp_path):
    path = _write(tmp_path / "audio.txt", ["not binary"])
    with pytest.raises(BinaryFormatError):
        Settings().load_audio(path)


def test_short_graphics_file_raises(tmp_path):
    path = _write(tmp_path / "graphics.txt", _graphics_lines()[:3])
    with pytest.raises(BinaryFormatError):
        Settings().load_graphics(path)


def test_load_follows_index_file(tmp_path):
    _write(tmp_path / "Cfg" / "graphics.txt", _graphics_lines())
    _write(tmp_path / "Cfg" / "audio.txt", [float_to_binary(1.5)])
    _write(tmp_path / "Cfg" / "render.txt", ["1", "1", int_to_binary(3)])
    _write(tmp_path / "Cfg" / "options.txt", [int_to_binary(75), float_to_binary(1.5)])
    _write(
        tmp_path / "Settings" / "PathOfSettingsFiles.txt",
        ["\\Cfg\\graphics.txt", "\\Cfg\\audio.txt", "\\Cfg\\render.txt", "\\Cfg\\options.txt"],
    )
    settings = Settings.load(tmp_path)
    assert settings.max_fps == 144
    assert settings.anti_aliasing is GraphicLevel.UNREAL
    assert settings.volume == 1.5
    assert settings.gpu_rendering is True
    assert settings.bounces == 3
    assert settings.fov == 75.0


def test_apply_graphic_level_copies_level():
    settings = Settings(graphic_level=GraphicLevel.REALISTIC)
    settings.apply_graphic_level()
    levels = {settings.lighting, settings.shaders, settings.particles, settings.shadows, settings.anti_aliasing}
    assert levels == {GraphicLevel.REALISTIC}