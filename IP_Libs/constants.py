"""
Constants and configuration values for Open Image Processor.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the application.
"""

from pathlib import Path

# Channel limits
CHANNEL_MIN = 0
CHANNEL_MAX = 255

# Convolution kernels (3x3, applied per channel with clamp-to-edge borders)
BLUR_KERNEL = (
    (1 / 16, 2 / 16, 1 / 16),
    (2 / 16, 4 / 16, 2 / 16),
    (1 / 16, 2 / 16, 1 / 16),
)
SHARPEN_KERNEL = (
    (0.0, -1.0, 0.0),
    (-1.0, 5.0, -1.0),
    (0.0, -1.0, 0.0),
)

# Rec. 709 luma weights (red, green, blue)
LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)

# Sepia color transform, one row per output channel
SEPIA_MATRIX = (
    (0.393, 0.769, 0.189),
    (0.349, 0.686, 0.168),
    (0.272, 0.534, 0.131),
)

# Dithering
DITHER_THRESHOLD = 128

# Mosaic: upper bound on distance-matrix entries computed per row block
MOSAIC_BLOCK_ELEMENTS = 1 << 22

# Generators
RAINBOW_COLORS = (
    (255, 0, 0),      # Red
    (255, 127, 0),    # Orange
    (255, 255, 0),    # Yellow
    (0, 255, 0),      # Green
    (0, 0, 255),      # Blue
    (75, 0, 130),     # Indigo
    (148, 0, 211),    # Violet
)
CHECKERBOARD_COLORS = ((0, 0, 0), (255, 255, 255))
DEFAULT_CHECKERBOARD_SQUARES = 8

# History
DEFAULT_HISTORY_DEPTH = 50

# File formats (extension -> Pillow format name)
SUPPORTED_IMAGE_FORMATS = {
    ".png": "PNG",
    ".jpg": "JPEG",
    ".jpeg": "JPEG",
    ".bmp": "BMP",
    ".gif": "GIF",
}
DEFAULT_JPEG_QUALITY = 95
OPEN_FILE_FILTER = "Supported Images (*.png *.jpg *.jpeg *.bmp *.gif)"

# Editor configuration
CONFIG_FILE = Path.home() / ".image_processor.json"
DEFAULT_LOG_LEVEL = "INFO"

# UI constants
PROGRAM_NAME = "Open Image Processor"
DEFAULT_WINDOW_WIDTH = 900
DEFAULT_WINDOW_HEIGHT = 600
DEFAULT_IMAGE_PANE_WIDTH = 600
DEFAULT_IMAGE_PANE_HEIGHT = 400
EMPTY_IMAGE_TEXT = "Load an image to see it displayed here."
