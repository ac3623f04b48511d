"""
Image conversion utilities - modular architecture.

This package provides focused image utilities:
- converters: Buffer <-> tensor conversion, PIL interop, color spaces
- codec: Encoding and decoding of image file formats
"""

from core.image.codec import decode, encode, save
from core.image.converters import from_tensor, infer_layout, to_chw, to_pil, to_tensor

__all__ = [
    "to_tensor",
    "from_tensor",
    "infer_layout",
    "to_chw",
    "to_pil",
    "encode",
    "decode",
    "save",
]
