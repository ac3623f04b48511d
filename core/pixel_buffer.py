"""
Pixel buffer wrapping an OpenCV image.

The buffer owns a ``uint8`` NumPy array in OpenCV layout:
- (H, W) for grayscale images
- (H, W, 3) for color images in BGR order

Dimensions are fixed at construction; pixel data is mutated in place by the
overlay renderer.
"""

from typing import Any

import numpy as np
from PIL import Image

from core.constants import ErrorMessages
from core.enums import ChannelOrder
from core.exceptions import BoundsError, ShapeError


class PixelBuffer:
    """
    Mutable 2D grid of pixels with a fixed channel order.

    Sub-images alias the parent's storage (like ``Mat.submat``); duplicates
    share nothing with the original.
    """

    def __init__(self, image: np.ndarray):
        """
        Wrap an already decoded OpenCV image.

        Args:
            image: NumPy array (H, W), (H, W, 1) or (H, W, 3) in BGR order

        Raises:
            ShapeError: If the array is not a non-empty 1 or 3 channel image
            ValueError: If the array is not uint8 or int8
        """
        if image.dtype == np.int8:
            image = image.view(np.uint8)
        if image.dtype != np.uint8:
            raise ValueError(ErrorMessages.INVALID_IMAGE_DTYPE.format(dtype=image.dtype))

        if image.ndim == 3 and image.shape[2] == 1:
            image = image[:, :, 0]

        if image.ndim not in (2, 3) or (image.ndim == 3 and image.shape[2] != 3):
            raise ShapeError(ErrorMessages.INVALID_IMAGE_SHAPE.format(shape=image.shape))

        if image.shape[0] == 0 or image.shape[1] == 0:
            raise ShapeError(ErrorMessages.EMPTY_IMAGE.format(shape=image.shape))

        self._image = image

    @classmethod
    def from_image(cls, image: Any) -> "PixelBuffer":
        """
        Create a buffer from a decoded image handle.

        Args:
            image: NumPy array (OpenCV BGR layout) or PIL Image (RGB)

        Returns:
            New PixelBuffer
        """
        if isinstance(image, np.ndarray):
            return cls(image)
        if isinstance(image, Image.Image):
            from core.image.converters import pil_to_numpy

            if image.mode not in ("L", "RGB"):
                image = image.convert("RGB")
            return cls(pil_to_numpy(image, bgr=True))
        raise TypeError(ErrorMessages.UNSUPPORTED_IMAGE_TYPE.format(type=type(image).__name__))

    @property
    def width(self) -> int:
        return self._image.shape[1]

    @property
    def height(self) -> int:
        return self._image.shape[0]

    @property
    def channels(self) -> int:
        return 1 if self._image.ndim == 2 else self._image.shape[2]

    @property
    def wrapped_image(self) -> np.ndarray:
        """Get the backing OpenCV image (not a copy)."""
        return self._image

    def raw_channel_order(self) -> ChannelOrder:
        """Get the native ordering of the stored samples."""
        return ChannelOrder.GRAY if self.channels == 1 else ChannelOrder.BGR

    def sub_image(self, x: int, y: int, width: int, height: int) -> "PixelBuffer":
        """
        Get a rectangular region of this buffer.

        The returned buffer is a view: it reflects the source at call time and
        writes through to it.

        Args:
            x: Left edge in pixels
            y: Top edge in pixels
            width: Region width in pixels
            height: Region height in pixels

        Returns:
            PixelBuffer aliasing ``[x, x+width) x [y, y+height)``

        Raises:
            BoundsError: If the region is not fully inside the buffer
        """
        if (
            x < 0
            or y < 0
            or width <= 0
            or height <= 0
            or x + width > self.width
            or y + height > self.height
        ):
            raise BoundsError(
                ErrorMessages.SUB_IMAGE_OUT_OF_BOUNDS.format(
                    x=x,
                    y=y,
                    width=width,
                    height=height,
                    bounds=f"{self.width}x{self.height}",
                )
            )
        return PixelBuffer(self._image[y : y + height, x : x + width])

    def duplicate(self) -> "PixelBuffer":
        """Get an independent deep copy of this buffer."""
        return PixelBuffer(self._image.copy())

    def __repr__(self) -> str:
        return (
            f"PixelBuffer(width={self.width}, height={self.height}, "
            f"channels={self.channels}, order={self.raw_channel_order().value})"
        )
