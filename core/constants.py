"""
Constants and configuration values for the image bridge.
Centralizes all magic numbers and configuration constants.
"""


# Tensor Constants
class TensorConstants:
    """Constants related to tensor <-> buffer conversion."""

    # Channel counts a tensor may carry
    VALID_CHANNEL_COUNTS = (1, 3)
    COLOR_CHANNELS = 3

    # Accepted tensor dtypes (int8 is reinterpreted as raw bytes)
    ACCEPTED_DTYPES = ("uint8", "int8")


# Drawing Constants
class DrawingConstants:
    """Constants for annotation drawing operations."""

    # Bounding boxes
    BOX_THICKNESS = 2
    COLOR_COMPONENT_MAX = 178  # exclusive upper bound

    # Labels
    LABEL_FONT = 1  # cv2.FONT_HERSHEY_PLAIN
    LABEL_FONT_SCALE = 1.3
    LABEL_THICKNESS = 1
    LABEL_PADDING = 4
    LABEL_BASELINE_OFFSET = 2

    # Masks
    MASK_ATTENUATION = 0.8

    # Landmarks
    LANDMARK_HALF_SIZE = 4

    # Joints
    JOINT_RADIUS = 6


# Contour Constants
class ContourConstants:
    """Constants for contour extraction."""

    DEFAULT_MAX_WORKERS = 4


# System Constants
class SystemConstants:
    """Constants for system operations."""

    # Logging
    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Settings
    ENV_PREFIX = "IMAGE_BRIDGE_"
    ENV_NESTED_DELIMITER = "__"


# Color Constants (BGR format for OpenCV)
class Colors:
    """Standard colors for drawing operations (BGR format)."""

    WHITE = (255, 255, 255)
    LANDMARK = (0, 96, 246)

    # Semantic colors
    LABEL_TEXT = WHITE


# Error Messages
class ErrorMessages:
    """Standard error messages."""

    # Buffer errors
    EMPTY_IMAGE = "Image must have non-zero width and height, got shape {shape}"
    INVALID_IMAGE_SHAPE = "Image must be (H, W) or (H, W, 1|3), got shape {shape}"
    INVALID_IMAGE_DTYPE = "Image dtype must be uint8 or int8, got {dtype}"
    UNSUPPORTED_IMAGE_TYPE = "Unsupported image type: {type}"
    SUB_IMAGE_OUT_OF_BOUNDS = (
        "Sub-image (x={x}, y={y}, width={width}, height={height}) "
        "is out of image bounds {bounds}"
    )

    # Tensor errors
    INVALID_TENSOR_DTYPE = "Tensor dtype must be one of {accepted}, got {dtype}"
    BATCH_NOT_SUPPORTED = "Batch tensors are not supported, got shape {shape}"
    INVALID_TENSOR_RANK = "Tensor must have 2 or 3 dimensions, got shape {shape}"
    AMBIGUOUS_TENSOR_LAYOUT = "Tensor shape {shape} is neither CHW nor HWC"

    # Codec errors
    ENCODE_FAILED = "Failed to encode image as {format}: {error}"
    DECODE_FAILED = "Failed to decode image: {error}"
