"""Engine-wide constants and the graphic quality scale."""

from enum import IntEnum


class GraphicLevel(IntEnum):
    """Quality levels shared by all graphics settings, lowest first."""

    ULTRA_LOW = 0
    LOW = 1
    MEDIUM_LOW = 2
    MEDIUM = 3
    MEDIUM_HIGH = 4
    HIGH = 5
    VERY_HIGH = 6
    ULTRA = 7
    REALISTIC = 8
    UNREAL = 9


BIT_ONE = "1"
BIT_ZERO = "0"

LINES_IN_LOG_SETUP_FILE = 2

LINES_IN_GRAPHICS_SETUP_FILE = 11
LINES_IN_AUDIO_SETUP_FILE = 1
LINES_IN_RENDERING_SETUP_FILE = 3
LINES_IN_OPTIONS_SETUP_FILE = 2
LINES_IN_LOAD_SETTINGS_SETUP_FILE = 4

DEFAULT_FOV = 100.0
DEFAULT_SENSITIVITY = 1.0

USE_GPU_RENDERING = False
USE_BOUNCES = True
DEFAULT_NUMBER_OF_BOUNCES = 2
NUMBER_OF_FRAMES_BUFFERED = 2

DEFAULT_VOLUME = 100.0

DEFAULT_GRAPHIC_LEVEL = GraphicLevel.ULTRA_LOW
DEFAULT_LIGHTING_LEVEL = GraphicLevel.ULTRA_LOW
DEFAULT_SHADERS_LEVEL = GraphicLevel.ULTRA_LOW
DEFAULT_PARTICLES_LEVEL = GraphicLevel.ULTRA_LOW
DEFAULT_SHADOW_LEVEL = GraphicLevel.ULTRA_LOW
DEFAULT_ANTI_ALIASING_LEVEL = GraphicLevel.ULTRA_LOW
DEFAULT_AA_DROPOFF = 1.5

DEFAULT_RESOLUTION_X = 1920
DEFAULT_RESOLUTION_Y = 1080
DEFAULT_MAX_FPS = 120
USE_MONITORS_MAX_FPS = False