"""
Tests for core.image.scanner module.

Tests the bounding box pass and the exact differing pixel pass.
"""

import numpy as np
import pytest

from autocrop.common.base import Point, RectangleRange
from autocrop.core.image.scanner import ScanResult, find_bounding_box, scan


class TestFindBoundingBox:
    """Tests for the bounding box pass."""

    def test_identical_images_give_empty_box(self, background):
        """Test that no difference leaves the box empty."""
        box = find_bounding_box(background, [background.copy(), background.copy()], 0.0)

        assert box.is_empty()
        assert box.width() == 0
        assert box.height() == 0

    def test_single_pixel(self, background, single_pixel_image):
        """Test the single differing pixel scenario."""
        box = find_bounding_box(background, [single_pixel_image], 0.0)

        assert box.min == Point(x=2, y=1)
        assert box.max == Point(x=2, y=1)
        assert box.width() == 0
        assert box.height() == 0

    def test_union_over_images(self, scene):
        """Test that the box encloses differences from every image."""
        bg, first, second = scene

        box = find_bounding_box(bg, [first, second], 0.0)

        assert box.min == Point(x=2, y=1)
        assert box.max == Point(x=6, y=5)

    def test_threshold_filters_small_changes(self, background):
        """Test that changes within leniency are ignored."""
        image = background.copy()
        image[0, 0] = (10, 10, 10, 255)  # distance 300/195075
        image[3, 3] = (255, 255, 255, 255)

        box = find_bounding_box(background, [image], 0.01)

        assert box.min == Point(x=3, y=3)
        assert box.max == Point(x=3, y=3)

    def test_alpha_only_change_ignored(self, background):
        """Test that alpha differences do not count."""
        image = background.copy()
        image[2, 2, 3] = 0

        assert find_bounding_box(background, [image], 0.0).is_empty()

    def test_no_comparisons(self, background):
        """Test that an empty comparison list gives an empty box."""
        assert find_bounding_box(background, [], 0.0).is_empty()


class TestScan:
    """Tests for the full scan."""

    def test_rectangle_scan_skips_exact_pixels(self, scene):
        """Test that exact pixels are not collected unless requested."""
        bg, first, second = scene

        result = scan(bg, [first, second], 0.0, exact=False)

        assert result.differing_pixels is None
        with pytest.raises(ValueError):
            result.pixels_for(1)

    def test_exact_pixels_per_image(self, scene):
        """Test that each image gets only its own differing pixels."""
        bg, first, second = scene

        result = scan(bg, [first, second], 0.0, exact=True)

        assert len(result.differing_pixels) == 2
        np.testing.assert_array_equal(result.pixels_for(1), [[2, 1], [3, 1], [2, 2], [3, 2]])
        np.testing.assert_array_equal(result.pixels_for(2), [[6, 5]])

    def test_exact_pixels_are_row_major(self):
        """Test pixel order: y ascending, then x ascending."""
        bg = np.zeros((3, 3, 4), dtype=np.uint8)
        image = bg.copy()
        for x, y in [(2, 0), (0, 2), (1, 1), (0, 0)]:
            image[y, x] = (255, 255, 255, 255)

        result = scan(bg, [image], 0.0, exact=True)

        np.testing.assert_array_equal(result.pixels_for(1), [[0, 0], [2, 0], [1, 1], [0, 2]])

    def test_exact_pixels_inside_box(self, scene):
        """Test that every exact pixel lies inside the bounding box."""
        bg, first, second = scene

        result = scan(bg, [first, second], 0.0, exact=True)

        for pixels in result.differing_pixels:
            for x, y in pixels:
                assert result.bounding_box.contains(int(x), int(y))

    def test_empty_box_gives_empty_sets(self, background):
        """Test exact scan with nothing differing."""
        result = scan(background, [background.copy(), background.copy()], 0.0, exact=True)

        assert result.bounding_box.is_empty()
        assert [len(p) for p in result.differing_pixels] == [0, 0]
        assert result.pixels_for(2).shape == (0, 2)

    def test_deterministic(self, scene):
        """Test that scanning twice gives identical results."""
        bg, first, second = scene

        a = scan(bg, [first, second], 0.0, exact=True)
        b = scan(bg, [first, second], 0.0, exact=True)

        assert a.bounding_box == b.bounding_box
        for pa, pb in zip(a.differing_pixels, b.differing_pixels):
            np.testing.assert_array_equal(pa, pb)

    def test_scan_result_defaults(self):
        """Test ScanResult construction without exact pixels."""
        result = ScanResult(bounding_box=RectangleRange())

        assert result.differing_pixels is None
