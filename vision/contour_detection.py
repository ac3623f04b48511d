"""
Contour-based bounding box extraction.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional

import cv2
import numpy as np

from config import get_settings
from core.image.converters import ensure_grayscale
from core.pixel_buffer import PixelBuffer
from schemas import Rectangle

logger = logging.getLogger(__name__)


def _normalized_bounding_rect(
    contour: np.ndarray, image_width: int, image_height: int
) -> Rectangle:
    """Get the bounding rectangle of a contour as fractions of the image size."""
    x, y, w, h = cv2.boundingRect(contour)
    return Rectangle(
        x=x / image_width,
        y=y / image_height,
        width=w / image_width,
        height=h / image_height,
    )


def find_bounding_boxes(
    buffer: PixelBuffer, max_workers: Optional[int] = None
) -> List[Rectangle]:
    """
    Find the bounding boxes of all contours in the buffer.

    Every non-zero pixel is treated as foreground, so the buffer should
    already be thresholded. Color buffers are converted to grayscale first.
    Contours are traced with list retrieval and simple approximation; the
    source buffer is not modified.

    Args:
        buffer: Input image
        max_workers: Worker threads for the per-contour step (None = settings)

    Returns:
        Normalized rectangles in contour discovery order
    """
    work = ensure_grayscale(buffer.wrapped_image)
    contours, _ = cv2.findContours(work, cv2.RETR_LIST, cv2.CHAIN_APPROX_SIMPLE)

    max_workers = max_workers or get_settings().contours.max_workers
    rectangles: List[Optional[Rectangle]] = [None] * len(contours)

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="contour-rect") as ex:
        futures = {
            ex.submit(_normalized_bounding_rect, contour, buffer.width, buffer.height): index
            for index, contour in enumerate(contours)
        }
        for future in as_completed(futures):
            rectangles[futures[future]] = future.result()

    logger.debug(f"Found {len(rectangles)} contours in {buffer.width}x{buffer.height} image")
    return rectangles
