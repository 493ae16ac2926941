"""
Constants and configuration values for Image Processor.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the application.
"""

# Channel bounds
CHANNEL_MIN = 0
CHANNEL_MAX = 255

# Blend constants
DEFAULT_TRANSPARENCY_FACTOR = 0.5

# Blend mode keywords
BLEND_TRANSPARENCY = "transparency"
BLEND_MULTIPLY = "multiply"
BLEND_SCREEN = "screen"
BLEND_NONE = "none"

# Descriptor keywords
CMD_CROP = "crop"
CMD_BLEND = "blend"
CMD_INVERT = "invert"
CMD_GRAYSCALE = "grayscale"
CMD_SHARPEN = "sharpen"
CMD_BLUR = "blur"
CMD_EDGE = "edge"
CMD_EMBOSS = "emboss"

# Session command keywords
CMD_LOAD = "load"
CMD_SAVE = "save"
CMD_SIZE = "size"
CMD_EXIT = "exit"

# Predefined 3x3 kernel weights (row-major)
KERNEL_SIZE = 3
SHARPEN_WEIGHTS = (
    0.0, -1.0, 0.0,
    -1.0, 5.0, -1.0,
    0.0, -1.0, 0.0,
)
BLUR_WEIGHTS = (
    1.0, 2.0, 1.0,
    2.0, 4.0, 2.0,
    1.0, 2.0, 1.0,
)
EDGE_WEIGHTS = (
    1.0, 0.0, -1.0,
    2.0, 0.0, -2.0,
    1.0, 0.0, -1.0,
)
EMBOSS_WEIGHTS = (
    -2.0, -1.0, 0.0,
    -1.0, 1.0, 1.0,
    0.0, 1.0, 2.0,
)

# Usage messages
CROP_USAGE = "Invalid crop format. Usage: 'crop [x] [y] [w] [h]'"
BLEND_USAGE = "Invalid blend format. Usage: 'blend [path] [mode]'"
LOAD_USAGE = "Usage: 'load [path]'"
SAVE_USAGE = "Usage: 'save [path]'"
NO_IMAGE_MESSAGE = "No image loaded."

# File output
DEFAULT_OUTPUT_FORMAT = "PNG"
IMAGE_MODE = "RGB"

# Command loop
PROMPT = "> "

# Logging
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"
