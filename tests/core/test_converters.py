"""
Tests for buffer <-> tensor conversion
"""

import logging

import cv2
import numpy as np
import pytest

from core.enums import ChannelOrder, ColorMode, TensorLayout
from core.exceptions import ShapeError
from core.image.converters import from_tensor, infer_layout, to_chw, to_pil, to_tensor
from core.pixel_buffer import PixelBuffer


class TestToTensor:
    """Test buffer -> tensor conversion"""

    def test_color_shape_and_dtype(self, color_buffer):
        tensor = to_tensor(color_buffer)
        assert tensor.shape == (480, 640, 3)
        assert tensor.dtype == np.uint8

    def test_color_is_rgb(self):
        """Test BGR samples are reordered to RGB"""
        image = np.zeros((2, 2, 3), dtype=np.uint8)
        image[0, 0] = (255, 0, 0)  # blue in BGR
        image[1, 1] = (10, 20, 30)
        tensor = to_tensor(PixelBuffer(image), ColorMode.COLOR)

        assert tuple(tensor[0, 0]) == (0, 0, 255)
        assert tuple(tensor[1, 1]) == (30, 20, 10)

    def test_grayscale_single_channel(self, color_buffer):
        tensor = to_tensor(color_buffer, ColorMode.GRAYSCALE)
        assert tensor.shape == (480, 640, 1)
        assert tensor.dtype == np.uint8

    def test_grayscale_matches_luma(self, noise_image):
        """Test grayscale uses the standard weighted luma conversion"""
        tensor = to_tensor(PixelBuffer(noise_image), ColorMode.GRAYSCALE)
        expected = cv2.cvtColor(noise_image, cv2.COLOR_BGR2GRAY)
        np.testing.assert_array_equal(tensor[:, :, 0], expected)

    def test_grayscale_deterministic(self, noise_image):
        buffer = PixelBuffer(noise_image)
        first = to_tensor(buffer, ColorMode.GRAYSCALE)
        second = to_tensor(buffer, ColorMode.GRAYSCALE)
        np.testing.assert_array_equal(first, second)

    def test_gray_buffer_color_mode_replicates(self, gray_buffer):
        tensor = to_tensor(gray_buffer, ColorMode.COLOR)
        assert tensor.shape == (60, 80, 3)
        np.testing.assert_array_equal(tensor[:, :, 0], gray_buffer.wrapped_image)
        np.testing.assert_array_equal(tensor[:, :, 1], tensor[:, :, 2])

    def test_gray_buffer_grayscale_mode(self, gray_buffer):
        tensor = to_tensor(gray_buffer, ColorMode.GRAYSCALE)
        np.testing.assert_array_equal(tensor[:, :, 0], gray_buffer.wrapped_image)

    def test_tensor_does_not_alias_buffer(self, noise_image):
        buffer = PixelBuffer(noise_image)
        tensor = to_tensor(buffer)
        assert not np.shares_memory(tensor, noise_image)

    def test_sub_image_tensor(self, color_buffer, test_image):
        """Test conversion of a non-contiguous sub-image"""
        sub = color_buffer.sub_image(0, 0, 4, 2)
        tensor = to_tensor(sub, ColorMode.GRAYSCALE)
        expected = cv2.cvtColor(np.ascontiguousarray(test_image[0:2, 0:4]), cv2.COLOR_BGR2GRAY)
        np.testing.assert_array_equal(tensor[:, :, 0], expected)


class TestFromTensor:
    """Test tensor -> buffer conversion"""

    def test_round_trip_color(self, noise_image):
        """Test from_tensor(to_tensor(b)) reproduces b exactly"""
        buffer = PixelBuffer(noise_image)
        restored = from_tensor(to_tensor(buffer, ColorMode.COLOR))

        assert restored.raw_channel_order() == ChannelOrder.BGR
        np.testing.assert_array_equal(restored.wrapped_image, noise_image)

    def test_round_trip_test_image(self, color_buffer, test_image):
        restored = from_tensor(to_tensor(color_buffer))
        np.testing.assert_array_equal(restored.wrapped_image, test_image)

    def test_chw_tensor(self, noise_image):
        """Test channel-first tensors are transposed back"""
        tensor = to_chw(to_tensor(PixelBuffer(noise_image)))
        assert tensor.shape == (3, 37, 53)

        restored = from_tensor(tensor)
        assert (restored.width, restored.height) == (53, 37)
        np.testing.assert_array_equal(restored.wrapped_image, noise_image)

    def test_grayscale_tensor(self, noise_image):
        tensor = to_tensor(PixelBuffer(noise_image), ColorMode.GRAYSCALE)
        restored = from_tensor(tensor)

        assert restored.channels == 1
        np.testing.assert_array_equal(restored.wrapped_image, tensor[:, :, 0])

    def test_single_channel_first(self):
        """Test (1, H, W) is read as channel-first"""
        restored = from_tensor(np.zeros((1, 5, 7), dtype=np.uint8))
        assert (restored.width, restored.height, restored.channels) == (7, 5, 1)

    def test_two_dimensional_tensor(self):
        restored = from_tensor(np.full((4, 9), 17, dtype=np.uint8))
        assert (restored.width, restored.height, restored.channels) == (9, 4, 1)
        assert np.all(restored.wrapped_image == 17)

    def test_two_dimensional_tensor_with_three_rows(self, caplog):
        """Test a 2D tensor is never mistaken for channel-first"""
        with caplog.at_level(logging.WARNING, logger="core.image.converters"):
            restored = from_tensor(np.full((3, 5), 17, dtype=np.uint8))

        assert (restored.width, restored.height, restored.channels) == (5, 3, 1)
        assert np.all(restored.wrapped_image == 17)
        assert caplog.text == ""

    def test_round_trip_single_row(self):
        """Test a color buffer one pixel tall survives the round trip"""
        image = np.arange(15, dtype=np.uint8).reshape(1, 5, 3)
        restored = from_tensor(to_tensor(PixelBuffer(image), ColorMode.COLOR))

        assert restored.raw_channel_order() == ChannelOrder.BGR
        np.testing.assert_array_equal(restored.wrapped_image, image)

    def test_round_trip_single_column(self):
        image = np.arange(12, dtype=np.uint8).reshape(4, 1, 3)
        restored = from_tensor(to_tensor(PixelBuffer(image), ColorMode.COLOR))
        np.testing.assert_array_equal(restored.wrapped_image, image)

    def test_int8_reinterpreted_as_bytes(self):
        """Test int8 values map to the same bytes (-1 -> 255)"""
        tensor = (np.array([[1, 0], [0, 1]]) * 255).astype(np.uint8).astype(np.int8)
        restored = from_tensor(tensor[np.newaxis, :, :])

        np.testing.assert_array_equal(restored.wrapped_image, [[255, 0], [0, 255]])

    def test_rejects_float_tensor(self):
        with pytest.raises(ValueError):
            from_tensor(np.zeros((4, 4, 3), dtype=np.float32))

    def test_rejects_batch(self):
        with pytest.raises(ShapeError):
            from_tensor(np.zeros((2, 4, 4, 3), dtype=np.uint8))

    def test_rejects_one_dimensional(self):
        with pytest.raises(ShapeError):
            from_tensor(np.zeros((12,), dtype=np.uint8))

    @pytest.mark.parametrize("shape", [(4, 5, 6), (3, 3, 5), (1, 1, 4)])
    def test_rejects_unresolvable_shapes(self, shape):
        with pytest.raises(ShapeError):
            from_tensor(np.zeros(shape, dtype=np.uint8))


class TestInferLayout:
    """Test CHW/HWC inference rule"""

    @pytest.mark.parametrize(
        "shape, layout",
        [
            ((3, 224, 224), TensorLayout.CHW),
            ((1, 28, 28), TensorLayout.CHW),
            ((224, 224, 3), TensorLayout.HWC),
            ((28, 28, 1), TensorLayout.HWC),
            ((3, 3, 3), TensorLayout.HWC),
            ((3, 4, 3), TensorLayout.HWC),
            ((1, 3, 3), TensorLayout.HWC),
            ((1, 5, 3), TensorLayout.HWC),
            ((1, 3, 5), TensorLayout.CHW),
            ((3, 1, 1), TensorLayout.CHW),
        ],
    )
    def test_layouts(self, shape, layout):
        assert infer_layout(shape) == layout

    def test_ambiguous_shape_is_logged(self, caplog):
        """Test shapes plausible both ways are flagged"""
        with caplog.at_level(logging.WARNING, logger="core.image.converters"):
            infer_layout((3, 3, 3))
        assert "Ambiguous tensor shape" in caplog.text

    def test_unambiguous_shape_not_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="core.image.converters"):
            infer_layout((224, 224, 3))
        assert caplog.text == ""

    def test_three_by_three_color_image(self):
        """Test a 3x3 RGB tensor decodes as HWC"""
        tensor = np.arange(27, dtype=np.uint8).reshape(3, 3, 3)
        restored = from_tensor(tensor)
        np.testing.assert_array_equal(restored.wrapped_image, tensor[:, :, ::-1])


class TestPilConversion:
    """Test PIL interop"""

    def test_to_pil_color(self):
        image = np.zeros((2, 3, 3), dtype=np.uint8)
        image[0, 0] = (255, 0, 0)
        pil_image = to_pil(PixelBuffer(image))

        assert pil_image.mode == "RGB"
        assert pil_image.size == (3, 2)
        assert pil_image.getpixel((0, 0)) == (0, 0, 255)

    def test_to_pil_grayscale(self, color_buffer):
        pil_image = to_pil(color_buffer, ColorMode.GRAYSCALE)
        assert pil_image.mode == "L"
        assert pil_image.size == (640, 480)

    def test_pil_round_trip(self, noise_image):
        restored = PixelBuffer.from_image(to_pil(PixelBuffer(noise_image)))
        np.testing.assert_array_equal(restored.wrapped_image, noise_image)
