"""
Image format conversion utilities.

Handles conversions between different image representations:
- PixelBuffer (OpenCV BGR / grayscale NumPy arrays)
- Byte tensors (RGB or grayscale, HWC or CHW layout)
- PIL Images (RGB format)
- Grayscale/color conversions
"""

import logging
from typing import Optional

import cv2
import numpy as np
from PIL import Image

from core.constants import ErrorMessages, TensorConstants
from core.enums import ColorMode, TensorLayout
from core.exceptions import ShapeError
from core.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


def to_tensor(buffer: PixelBuffer, color_mode: ColorMode = ColorMode.COLOR) -> np.ndarray:
    """
    Convert a pixel buffer to a byte tensor.

    Args:
        buffer: Source buffer
        color_mode: COLOR for RGB output, GRAYSCALE for single channel luma

    Returns:
        Contiguous uint8 array of shape (height, width, 3) or (height, width, 1)
    """
    image = buffer.wrapped_image

    if color_mode == ColorMode.GRAYSCALE:
        gray = ensure_grayscale(image)
        return np.ascontiguousarray(gray[:, :, np.newaxis])

    if buffer.channels == 1:
        rgb = cv2.cvtColor(image, cv2.COLOR_GRAY2RGB)
    else:
        rgb = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
    return np.ascontiguousarray(rgb)


def infer_layout(shape) -> TensorLayout:
    """
    Decide whether a 3D image tensor shape is CHW or HWC.

    The first axis is taken as channels only when it is 1 or 3 and differs
    from both spatial extents; otherwise the last axis must be 1 or 3.
    A single row of RGB pixels (1, W, 3) is read as HWC.

    Args:
        shape: Tensor shape with exactly three dimensions

    Returns:
        Inferred layout

    Raises:
        ShapeError: If neither layout applies
    """
    first, second, last = shape
    valid = TensorConstants.VALID_CHANNEL_COUNTS

    if first in valid and last in valid:
        logger.warning(f"Ambiguous tensor shape {tuple(shape)}: both CHW and HWC are plausible")

    single_color_row = first == 1 and last == TensorConstants.COLOR_CHANNELS
    if first in valid and first != second and first != last and not single_color_row:
        return TensorLayout.CHW
    if last in valid:
        return TensorLayout.HWC
    raise ShapeError(ErrorMessages.AMBIGUOUS_TENSOR_LAYOUT.format(shape=tuple(shape)))


def from_tensor(tensor: np.ndarray) -> PixelBuffer:
    """
    Convert a byte tensor to a pixel buffer.

    Args:
        tensor: uint8 or int8 array shaped (H, W), (H, W, C) or (C, H, W)
            with C in {1, 3}; 3 channel tensors are RGB

    Returns:
        New PixelBuffer in native channel order (BGR or grayscale)

    Raises:
        ShapeError: If the shape cannot be read as an image
        ValueError: If the dtype is not a byte type
    """
    tensor = np.asarray(tensor)
    if tensor.dtype.name not in TensorConstants.ACCEPTED_DTYPES:
        raise ValueError(
            ErrorMessages.INVALID_TENSOR_DTYPE.format(
                accepted=TensorConstants.ACCEPTED_DTYPES, dtype=tensor.dtype
            )
        )
    if tensor.dtype == np.int8:
        tensor = tensor.view(np.uint8)

    if tensor.ndim == 4:
        raise ShapeError(ErrorMessages.BATCH_NOT_SUPPORTED.format(shape=tensor.shape))
    if tensor.ndim == 2:
        return PixelBuffer(tensor.copy())
    if tensor.ndim != 3:
        raise ShapeError(ErrorMessages.INVALID_TENSOR_RANK.format(shape=tensor.shape))

    if infer_layout(tensor.shape) == TensorLayout.CHW:
        tensor = tensor.transpose(1, 2, 0)

    image = np.ascontiguousarray(tensor)
    if image.shape[2] == TensorConstants.COLOR_CHANNELS:
        image = cv2.cvtColor(image, cv2.COLOR_RGB2BGR)
    else:
        image = image[:, :, 0].copy()

    return PixelBuffer(image)


def to_chw(tensor: np.ndarray) -> np.ndarray:
    """Transpose an HWC tensor to CHW."""
    return np.ascontiguousarray(tensor.transpose(2, 0, 1))


def numpy_to_pil(image: np.ndarray) -> Image.Image:
    """
    Convert NumPy array (OpenCV format) to PIL Image.

    Args:
        image: NumPy array in BGR format (OpenCV)

    Returns:
        PIL Image in RGB format
    """
    # Convert BGR to RGB if needed
    if len(image.shape) == 3 and image.shape[2] == 3:
        image_rgb = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
    else:
        image_rgb = image

    return Image.fromarray(image_rgb)


def pil_to_numpy(image: Image.Image, bgr: bool = True) -> np.ndarray:
    """
    Convert PIL Image to NumPy array.

    Args:
        image: PIL Image
        bgr: If True, convert to BGR format (OpenCV), else keep RGB

    Returns:
        NumPy array
    """
    array = np.array(image)

    # Convert RGB to BGR if needed
    if bgr and len(array.shape) == 3 and array.shape[2] == 3:
        array = cv2.cvtColor(array, cv2.COLOR_RGB2BGR)

    return array


def to_pil(buffer: PixelBuffer, color_mode: Optional[ColorMode] = None) -> Image.Image:
    """
    Convert a pixel buffer to a PIL Image.

    Args:
        buffer: Source buffer
        color_mode: Optional GRAYSCALE to force an "L" image

    Returns:
        PIL Image ("RGB" for color buffers, "L" for grayscale)
    """
    image = buffer.wrapped_image
    if color_mode == ColorMode.GRAYSCALE:
        image = ensure_grayscale(image)
    return numpy_to_pil(np.ascontiguousarray(image))


def ensure_grayscale(image: np.ndarray) -> np.ndarray:
    """
    Ensure image is grayscale (convert from BGR if needed).

    Args:
        image: Input image (grayscale or BGR)

    Returns:
        Grayscale image
    """
    if len(image.shape) == 3:
        return cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
    return image.copy()
