"""
Codec handoff.

Thin seam between pixel buffers and the OpenCV image codecs. Format tokens
are file extensions such as "png" or "jpg" (case-insensitive, leading dot
optional).
"""

import logging
from typing import BinaryIO

import cv2
import numpy as np

from core.constants import ErrorMessages
from core.exceptions import EncodingError
from core.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


def _extension(format: str) -> str:
    return "." + format.lower().lstrip(".")


def encode(buffer: PixelBuffer, format: str = "png") -> bytes:
    """
    Encode a pixel buffer to an image file format.

    Args:
        buffer: Image to encode
        format: Target format token ("png", "jpg", ...)

    Returns:
        Encoded bytes

    Raises:
        EncodingError: If OpenCV cannot encode to the requested format
    """
    try:
        success, encoded = cv2.imencode(_extension(format), buffer.wrapped_image)
    except cv2.error as e:
        logger.error(f"Failed to encode image as {format}: {e}")
        raise EncodingError(ErrorMessages.ENCODE_FAILED.format(format=format, error=e)) from e

    if not success:
        logger.error(f"Failed to encode image as {format}")
        raise EncodingError(
            ErrorMessages.ENCODE_FAILED.format(format=format, error="encoder returned no data")
        )
    return encoded.tobytes()


def save(buffer: PixelBuffer, stream: BinaryIO, format: str = "png") -> None:
    """
    Encode a pixel buffer and write it to a binary stream.

    Args:
        buffer: Image to encode
        stream: Writable binary stream
        format: Target format token

    Raises:
        EncodingError: If OpenCV cannot encode to the requested format
    """
    stream.write(encode(buffer, format))


def decode(data: bytes) -> PixelBuffer:
    """
    Decode image file bytes into a pixel buffer.

    Args:
        data: Encoded image (any format OpenCV can read)

    Returns:
        Color PixelBuffer in BGR order

    Raises:
        EncodingError: If the bytes are not a decodable image
    """
    array = np.frombuffer(data, dtype=np.uint8)
    try:
        image = cv2.imdecode(array, cv2.IMREAD_COLOR)
    except cv2.error as e:
        logger.error(f"Failed to decode image: {e}")
        raise EncodingError(ErrorMessages.DECODE_FAILED.format(error=e)) from e

    if image is None:
        logger.error("Failed to decode image: unrecognized data")
        raise EncodingError(ErrorMessages.DECODE_FAILED.format(error="unrecognized data"))
    return PixelBuffer(image)
