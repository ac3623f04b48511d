"""
Centralized enums for the image bridge.
"""

from enum import Enum


class ColorMode(str, Enum):
    """Color transform applied when converting a buffer to a tensor."""

    COLOR = "color"
    GRAYSCALE = "grayscale"


class ChannelOrder(str, Enum):
    """Native ordering of the samples stored in a pixel buffer."""

    BGR = "bgr"
    GRAY = "gray"


class TensorLayout(str, Enum):
    """Axis layout of an image tensor."""

    HWC = "hwc"
    CHW = "chw"


class BoundingRegionKind(str, Enum):
    """Discriminant of the bounding region variants."""

    RECTANGLE = "rectangle"
    MASK = "mask"
    LANDMARK = "landmark"
