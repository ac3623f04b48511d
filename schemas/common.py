"""
Common geometry models.

Bounding regions form a closed tagged union discriminated by ``kind``:
- Rectangle: normalized box
- Mask: normalized box plus a per-pixel probability grid
- Landmark: ordered normalized points

All coordinates are normalized to the image size (fractions in [0, 1]).
Values outside that range are accepted and left to the drawing primitives
to clip.
"""

from typing import Annotated, List, Literal, Tuple, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Point(BaseModel):
    """2D Point in normalized coordinates"""

    x: float
    y: float

    def to_pixels(self, image_width: int, image_height: int) -> Tuple[int, int]:
        """Scale to pixel coordinates, truncating toward zero."""
        return int(self.x * image_width), int(self.y * image_height)


class Rectangle(BaseModel):
    """Axis-aligned rectangle in normalized coordinates."""

    kind: Literal["rectangle"] = "rectangle"

    x: float = Field(..., description="Left edge as a fraction of image width")
    y: float = Field(..., description="Top edge as a fraction of image height")
    width: float = Field(..., description="Width as a fraction of image width")
    height: float = Field(..., description="Height as a fraction of image height")

    def get_bounds(self) -> "Rectangle":
        """Get the rectangular bounds of this region."""
        return Rectangle(x=self.x, y=self.y, width=self.width, height=self.height)

    def to_pixels(self, image_width: int, image_height: int) -> Tuple[int, int, int, int]:
        """
        Scale to pixel coordinates.

        Args:
            image_width: Image width in pixels
            image_height: Image height in pixels

        Returns:
            Tuple of (x, y, width, height), each truncated toward zero
        """
        return (
            int(self.x * image_width),
            int(self.y * image_height),
            int(self.width * image_width),
            int(self.height * image_height),
        )

    def __str__(self) -> str:
        return (
            f"[x={self.x:.3f}, y={self.y:.3f}, "
            f"width={self.width:.3f}, height={self.height:.3f}]"
        )


class Mask(BaseModel):
    """
    Soft segmentation mask.

    The probability grid is indexed ``[x, y]`` (column first, so its shape is
    ``(grid_width, grid_height)``) and is rendered one cell per pixel starting
    at the normalized (x, y) origin; it is not rescaled to width/height.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: Literal["mask"] = "mask"

    x: float
    y: float
    width: float
    height: float
    probabilities: np.ndarray = Field(..., description="2D grid of probabilities in [0, 1]")

    @field_validator("probabilities", mode="before")
    @classmethod
    def validate_probabilities(cls, v):
        array = np.asarray(v, dtype=np.float32)
        if array.ndim != 2 or array.size == 0:
            raise ValueError(f"Mask probabilities must be a non-empty 2D grid, got {array.shape}")
        return array

    def get_bounds(self) -> Rectangle:
        return Rectangle(x=self.x, y=self.y, width=self.width, height=self.height)


class Landmark(BaseModel):
    """Ordered path of normalized points (e.g. facial keypoints)."""

    kind: Literal["landmark"] = "landmark"

    points: List[Point] = Field(..., min_length=1)

    def get_bounds(self) -> Rectangle:
        """Get the axis-aligned extent of the points."""
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return Rectangle(x=min(xs), y=min(ys), width=max(xs) - min(xs), height=max(ys) - min(ys))


BoundingRegion = Annotated[Union[Rectangle, Mask, Landmark], Field(discriminator="kind")]
