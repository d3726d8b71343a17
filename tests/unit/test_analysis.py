import sys
import unittest
from pathlib import Path

from PIL import Image

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from placeholder_renderer.analysis import ink_bbox, ink_coverage
from placeholder_renderer.models import Color


class InkAnalysisTests(unittest.TestCase):
    def test_flat_image_has_no_ink(self):
        img = Image.new("RGBA", (10, 10), (1, 2, 3, 255))
        self.assertIsNone(ink_bbox(img, Color(1, 2, 3)))
        self.assertEqual(ink_coverage(img, Color(1, 2, 3)), 0.0)

    def test_bbox_of_marked_pixels(self):
        img = Image.new("RGBA", (10, 8), (0, 0, 0, 255))
        img.putpixel((2, 3), (255, 255, 255, 255))
        img.putpixel((6, 5), (255, 255, 255, 255))
        self.assertEqual(ink_bbox(img, Color(0, 0, 0)), (2, 3, 7, 6))
        self.assertAlmostEqual(ink_coverage(img, Color(0, 0, 0)), 2 / 80)

    def test_rgb_input_is_converted(self):
        img = Image.new("RGB", (4, 4), (9, 9, 9))
        img.putpixel((0, 0), (10, 9, 9))
        self.assertEqual(ink_bbox(img, Color(9, 9, 9)), (0, 0, 1, 1))


if __name__ == "__main__":
    unittest.main()
