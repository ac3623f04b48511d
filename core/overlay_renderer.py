"""
Overlay rendering of inference results.

Draws detection results (boxes, labels, masks, landmarks) and pose joints
onto a PixelBuffer in place. Drawing accumulates: calling twice draws twice.
"""

import logging
from typing import Optional, Tuple

import cv2
import numpy as np

from config import DrawingSettings, get_settings
from core.constants import Colors, DrawingConstants
from core.enums import BoundingRegionKind
from core.pixel_buffer import PixelBuffer
from schemas import DetectedObjects, Joints, Landmark, Mask

logger = logging.getLogger(__name__)


class Annotator:
    """
    Renders detection results as overlays on pixel buffers.

    Box and joint colors are drawn from an explicit random generator, so a
    seeded annotator is reproducible. Not thread-safe: callers must not draw
    on the same buffer concurrently.
    """

    COLOR_LABEL_TEXT = Colors.LABEL_TEXT
    COLOR_LANDMARK = Colors.LANDMARK

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        settings: Optional[DrawingSettings] = None,
        font=DrawingConstants.LABEL_FONT,
        line_type=cv2.LINE_8,
    ):
        """
        Initialize annotator.

        Args:
            rng: Random generator for colors (takes precedence over seed)
            seed: Seed for a new generator (None = settings seed)
            settings: Drawing settings (None = application settings)
            font: OpenCV font type for labels
            line_type: Line type for boxes and labels
        """
        self.settings = settings or get_settings().drawing
        if rng is None:
            rng = np.random.default_rng(seed if seed is not None else self.settings.random_seed)
        self.rng = rng
        self.font = font
        self.line_type = line_type

    def random_color(self) -> Tuple[int, int, int]:
        """Pick a box color with every component below the configured maximum."""
        components = self.rng.integers(0, self.settings.color_component_max, size=3)
        return tuple(int(c) for c in components)

    def draw_bounding_boxes(self, buffer: PixelBuffer, detections: DetectedObjects) -> None:
        """
        Draw detection results in sequence order.

        Each detection gets an outline and a filled label in its own random
        color. Masks are additionally blended as a translucent overlay and
        landmarks marked with small squares.

        Args:
            buffer: Target buffer, mutated in place
            detections: Detection results to draw
        """
        image = buffer.wrapped_image
        image_width = buffer.width
        image_height = buffer.height

        for detection in detections.items:
            region = detection.bounding_box
            x, y, width, height = region.get_bounds().to_pixels(image_width, image_height)
            color = self.random_color()

            self.draw_bounding_box(image, x, y, width, height, color)
            self.draw_label(image, detection.class_name, x, y, color)

            if region.kind == BoundingRegionKind.MASK:
                self.draw_mask(buffer, region)
            elif region.kind == BoundingRegionKind.LANDMARK:
                self.draw_landmarks(buffer, region)
            elif region.kind != BoundingRegionKind.RECTANGLE:
                raise ValueError(f"Unknown bounding region kind: {region.kind}")

        logger.debug(
            f"Drew {len(detections.items)} detections on {image_width}x{image_height} image"
        )

    def draw_joints(self, buffer: PixelBuffer, joints: Joints) -> None:
        """
        Draw pose joints as filled anti-aliased circles.

        All joints of one call share a single random color. Joint confidence
        does not suppress drawing.

        Args:
            buffer: Target buffer, mutated in place
            joints: Joints to draw
        """
        image = buffer.wrapped_image
        color = self.random_color()
        for joint in joints.joints:
            center = (int(joint.x * buffer.width), int(joint.y * buffer.height))
            cv2.circle(image, center, self.settings.joint_radius, color, -1, cv2.LINE_AA)

        logger.debug(f"Drew {len(joints.joints)} joints")

    def draw_bounding_box(
        self,
        image: np.ndarray,
        x: int,
        y: int,
        width: int,
        height: int,
        color: Tuple[int, int, int],
        thickness: Optional[int] = None,
    ) -> np.ndarray:
        """
        Draw a bounding box outline on the image.

        Args:
            image: Input image
            x: Top-left x coordinate
            y: Top-left y coordinate
            width: Box width
            height: Box height
            color: Box color in BGR format
            thickness: Line thickness (None = use default)

        Returns:
            Image with bounding box drawn
        """
        thickness = thickness or self.settings.box_thickness
        cv2.rectangle(image, (x, y), (x + width, y + height), color, thickness, self.line_type)
        return image

    def draw_label(
        self,
        image: np.ndarray,
        text: str,
        x: int,
        y: int,
        color: Tuple[int, int, int],
    ) -> np.ndarray:
        """
        Draw a text label on a filled background below-right of (x, y).

        Args:
            image: Input image
            text: Text to draw
            x: Box top-left x coordinate
            y: Box top-left y coordinate
            color: Background color in BGR format

        Returns:
            Image with label drawn
        """
        scale = self.settings.label_font_scale
        thickness = self.settings.label_thickness
        padding = self.settings.label_padding

        (text_width, text_height), _ = cv2.getTextSize(text, self.font, scale, thickness)
        cv2.rectangle(
            image,
            (x, y),
            (x + text_width + padding, y + text_height + padding),
            color,
            -1,  # Filled
        )
        cv2.putText(
            image,
            text,
            (x, y + text_height + DrawingConstants.LABEL_BASELINE_OFFSET),
            self.font,
            scale,
            self.COLOR_LABEL_TEXT,
            thickness,
            self.line_type,
        )
        return image

    def draw_mask(self, buffer: PixelBuffer, mask: Mask) -> None:
        """
        Alpha-blend a mask's probability grid onto the buffer.

        The overlay color is random; each cell's opacity is its probability
        times the configured attenuation. The origin is clamped to be
        non-negative and the overlay is clipped to the buffer.

        Args:
            buffer: Target buffer, mutated in place
            mask: Mask to blend
        """
        image = buffer.wrapped_image
        red, green, blue = self.rng.random(3)

        x = max(0, int(mask.x * buffer.width))
        y = max(0, int(mask.y * buffer.height))
        grid_width, grid_height = mask.probabilities.shape
        width = min(grid_width, buffer.width - x)
        height = min(grid_height, buffer.height - y)
        if width <= 0 or height <= 0:
            logger.debug(f"Mask at ({x}, {y}) lies outside the image, skipped")
            return

        alpha = np.clip(
            mask.probabilities[:width, :height].T * self.settings.mask_attenuation, 0.0, 1.0
        )
        if buffer.channels == 1:
            overlay = np.float32(255.0 * (0.299 * red + 0.587 * green + 0.114 * blue))
        else:
            overlay = np.array([blue, green, red], dtype=np.float32) * 255.0
            alpha = alpha[:, :, np.newaxis]

        region = image[y : y + height, x : x + width]
        blended = region.astype(np.float32) * (1.0 - alpha) + overlay * alpha
        region[...] = np.clip(np.rint(blended), 0, 255).astype(np.uint8)

    def draw_landmarks(self, buffer: PixelBuffer, landmark: Landmark) -> None:
        """
        Mark each landmark point with a small filled square.

        Args:
            buffer: Target buffer, mutated in place
            landmark: Landmark whose points are drawn
        """
        image = buffer.wrapped_image
        half = self.settings.landmark_half_size
        for point in landmark.points:
            px, py = point.to_pixels(buffer.width, buffer.height)
            cv2.rectangle(
                image,
                (px - half, py - half),
                (px + half, py + half),
                self.COLOR_LANDMARK,
                -1,  # Filled
            )
