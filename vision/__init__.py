"""
Geometric analysis of pixel buffers.
"""

from vision.contour_detection import find_bounding_boxes

__all__ = ["find_bounding_boxes"]
