"""
Schemas Package

This package contains the Pydantic schemas exchanged with inference code,
organized by domain:
- common: geometry and bounding region variants
- detection: detection results and pose joints
"""

# Re-export enums from centralized location for convenience
from core.enums import BoundingRegionKind

# Common models (geometry)
from .common import BoundingRegion, Landmark, Mask, Point, Rectangle

# Detection models
from .detection import DetectedObject, DetectedObjects, Joint, Joints

# Explicitly declare public API for re-export
__all__ = [
    # Common models
    "Point",
    "Rectangle",
    "Mask",
    "Landmark",
    "BoundingRegion",
    # Detection models
    "DetectedObject",
    "DetectedObjects",
    "Joint",
    "Joints",
    # Enums (re-exported from core.enums)
    "BoundingRegionKind",
]
