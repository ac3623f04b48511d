"""
Pytest configuration and fixtures for image bridge tests
"""

import cv2
import numpy as np
import pytest

from config import DrawingSettings
from core.overlay_renderer import Annotator
from core.pixel_buffer import PixelBuffer


@pytest.fixture
def test_image():
    """Create a test image for testing"""
    image = np.zeros((480, 640, 3), dtype=np.uint8)
    # Add some content
    cv2.rectangle(image, (100, 100), (300, 300), (255, 255, 255), -1)
    cv2.circle(image, (450, 350), 50, (128, 128, 128), -1)
    cv2.rectangle(image, (500, 50), (600, 150), (255, 0, 0), -1)
    return image


@pytest.fixture
def noise_image():
    """Create a random color image"""
    rng = np.random.default_rng(1234)
    return rng.integers(0, 256, size=(37, 53, 3), dtype=np.uint8)


@pytest.fixture
def color_buffer(test_image):
    """Wrap the test image in a PixelBuffer"""
    return PixelBuffer(test_image)


@pytest.fixture
def blank_buffer():
    """Create an all-black 100x100 color buffer"""
    return PixelBuffer(np.zeros((100, 100, 3), dtype=np.uint8))


@pytest.fixture
def gray_buffer():
    """Create a 60x80 grayscale buffer with a bright square"""
    image = np.zeros((60, 80), dtype=np.uint8)
    image[10:30, 20:50] = 200
    return PixelBuffer(image)


@pytest.fixture
def binary_grid():
    """5x5 binary grid with three separate blobs"""
    return np.array(
        [
            [0, 1, 1, 1, 0],
            [0, 0, 1, 0, 0],
            [0, 0, 0, 0, 0],
            [1, 1, 0, 0, 0],
            [1, 0, 0, 0, 1],
        ]
    )


@pytest.fixture
def drawing_settings():
    """Default drawing settings, independent of the environment"""
    return DrawingSettings()


@pytest.fixture
def annotator(drawing_settings):
    """Create a seeded Annotator"""
    return Annotator(seed=7, settings=drawing_settings)
