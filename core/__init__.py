"""
Core modules for the image bridge
"""

from .enums import ChannelOrder, ColorMode
from .exceptions import BoundsError, EncodingError, ImageBridgeError, ShapeError
from .pixel_buffer import PixelBuffer

__all__ = [
    "PixelBuffer",
    "ChannelOrder",
    "ColorMode",
    "ImageBridgeError",
    "BoundsError",
    "ShapeError",
    "EncodingError",
]
