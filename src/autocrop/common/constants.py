"""
Constants and configuration values for the Autocrop engine.
Centralizes all magic numbers used by the engine and its collaborators.
"""


# Crop Engine Constants
class CropConstants:
    """Constants related to differencing and cropping."""

    # Pixel distance: squared RGB difference divided by 3 * 255^2
    DISTANCE_NORMALIZER = 195075.0

    # Leniency is a percentage in [0, 100)
    MIN_LENIENCY = 0.0
    MAX_LENIENCY = 100.0
    DEFAULT_LENIENCY = 0.0

    # Batch limits
    MIN_IMAGES = 2
    MAX_IMAGES = 10000

    # Coordinate sentinel for an empty bounding box (unsigned 32-bit max)
    COORD_MAX = 2**32 - 1

    # Fully transparent RGBA pixel
    TRANSPARENT = (0, 0, 0, 0)


# Output Constants
class OutputConstants:
    """Constants related to output naming and encoding."""

    EXTENSION = ".png"
    DEFAULT_CUSTOM_NAME = "name"
    DEFAULT_OUTPUT_PATH = "output"

    # PNG encoder settings (fast RLE strategy, light zlib level)
    PNG_COMPRESSION = 3

    # Filename validation
    ILLEGAL_CHARACTERS = '<>:"/\\|?*'
    MAX_CONTROL_CODE_POINT = 31
    RESERVED_NAMES = (
        "CON",
        "PRN",
        "AUX",
        "NUL",
        "COM1",
        "COM2",
        "COM3",
        "COM4",
        "COM5",
        "COM6",
        "COM7",
        "COM8",
        "COM9",
        "LPT1",
        "LPT2",
        "LPT3",
        "LPT4",
        "LPT5",
        "LPT6",
        "LPT7",
        "LPT8",
        "LPT9",
    )


# API Constants
class APIConstants:
    """Constants related to API operations."""

    API_PREFIX = "/api"
    DEFAULT_HOST = "0.0.0.0"
    DEFAULT_PORT = 8000


# System Constants
class SystemConstants:
    """System-wide constants."""

    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    CONFIG_FILE_ENV = "AUTOCROP_CONFIG_FILE"
