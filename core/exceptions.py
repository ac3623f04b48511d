"""
Exception hierarchy for the image bridge.

All errors are deterministic input-contract violations and are raised to the
immediate caller without retries.
"""


class ImageBridgeError(Exception):
    """Base class for all image bridge errors."""


class BoundsError(ImageBridgeError):
    """A requested region is not representable within the source buffer."""


class ShapeError(ImageBridgeError):
    """A tensor shape cannot be interpreted as an image."""


class EncodingError(ImageBridgeError):
    """The codec could not serialize (or deserialize) an image."""
