"""
Detection and pose models handed over by inference code.

This module contains:
- DetectedObject / DetectedObjects: labelled bounding regions
- Joint / Joints: pose keypoints
"""

from typing import List, Optional, Sequence

from pydantic import BaseModel, Field

from .common import BoundingRegion


class DetectedObject(BaseModel):
    """Single detection result"""

    class_name: str
    probability: float = Field(..., description="Confidence score, range not enforced")
    bounding_box: BoundingRegion


class DetectedObjects(BaseModel):
    """
    Ordered detection results.

    Order is caller-determined and preserved through rendering, since later
    detections are drawn over earlier ones.
    """

    items: List[DetectedObject] = Field(default_factory=list)

    @classmethod
    def from_lists(
        cls,
        class_names: Sequence[str],
        probabilities: Sequence[float],
        bounding_boxes: Sequence[BoundingRegion],
    ) -> "DetectedObjects":
        """
        Build results from parallel lists.

        Args:
            class_names: Class label of each detection
            probabilities: Confidence of each detection
            bounding_boxes: Bounding region of each detection

        Returns:
            DetectedObjects in list order

        Raises:
            ValueError: If the lists differ in length
        """
        if not len(class_names) == len(probabilities) == len(bounding_boxes):
            raise ValueError(
                f"Lists must have equal length, got {len(class_names)}, "
                f"{len(probabilities)} and {len(bounding_boxes)}"
            )
        return cls(
            items=[
                DetectedObject(class_name=name, probability=prob, bounding_box=box)
                for name, prob, box in zip(class_names, probabilities, bounding_boxes)
            ]
        )

    def best(self) -> Optional[DetectedObject]:
        """Get the most confident detection, or None if empty."""
        if not self.items:
            return None
        return max(self.items, key=lambda item: item.probability)

    def top_k(self, k: int) -> List[DetectedObject]:
        """Get the k most confident detections, highest first."""
        return sorted(self.items, key=lambda item: item.probability, reverse=True)[:k]

    def __len__(self) -> int:
        return len(self.items)


class Joint(BaseModel):
    """Pose keypoint in normalized coordinates"""

    x: float
    y: float
    confidence: float = Field(..., description="Accepted but not used to filter rendering")


class Joints(BaseModel):
    """Ordered set of pose keypoints"""

    joints: List[Joint] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.joints)
