import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from placeholder_renderer.colors import GREY, ColorResolver, list_color_names, parse_hex_color, resolve, resolve_color
from placeholder_renderer.models import Color


class HexColorTests(unittest.TestCase):
    def test_hash_prefixed(self):
        self.assertEqual(resolve("#FF0000").color.as_tuple(), (255, 0, 0, 255))

    def test_without_hash(self):
        self.assertEqual(resolve("00ff7f").color, Color(0, 255, 127, 255))

    def test_mixed_case_digits(self):
        self.assertEqual(resolve_color("#aBcDeF"), Color(0xAB, 0xCD, 0xEF))

    def test_rejects_wrong_length_and_bad_digits(self):
        for value in ("#12345", "1234567", "#GG0000", "+fffff", " ffffff", "#", ""):
            with self.subTest(value=value):
                self.assertIsNone(parse_hex_color(value))

    def test_bad_hex_falls_back_to_grey(self):
        resolution = resolve("#12345")
        self.assertEqual(resolution.color, GREY)
        self.assertIsNotNone(resolution.warning)


class NamedColorTests(unittest.TestCase):
    def test_documented_names(self):
        expected = {
            "black": (0, 0, 0, 255),
            "white": (255, 255, 255, 255),
            "red": (255, 0, 0, 255),
            "green": (0, 255, 0, 255),
            "blue": (0, 0, 255, 255),
            "grey": (128, 128, 128, 255),
            "gray": (128, 128, 128, 255),
        }
        for name, rgba in expected.items():
            with self.subTest(name=name):
                resolution = resolve(name)
                self.assertEqual(resolution.color.as_tuple(), rgba)
                self.assertIsNone(resolution.warning)

    def test_names_are_case_insensitive(self):
        self.assertEqual(resolve_color("Black"), Color(0, 0, 0))
        self.assertEqual(resolve_color(" WHITE "), Color(255, 255, 255))
        self.assertEqual(resolve_color("GrAy"), GREY)

    def test_unknown_name_warns_and_returns_grey(self):
        resolution = resolve("chartreuse")
        self.assertEqual(resolution.color.as_tuple(), (128, 128, 128, 255))
        self.assertIn("chartreuse", resolution.warning)

    def test_empty_string_does_not_raise(self):
        resolution = resolve("")
        self.assertEqual(resolution.color, GREY)
        self.assertIsNotNone(resolution.warning)

    def test_list_names(self):
        self.assertEqual(list_color_names(), ["black", "blue", "gray", "green", "grey", "red", "white"])


class InjectedTableTests(unittest.TestCase):
    def test_custom_table_replaces_defaults(self):
        resolver = ColorResolver({"Brand": Color(255, 102, 0)})
        self.assertEqual(resolver.resolve("brand").color, Color(255, 102, 0))
        self.assertEqual(resolver.resolve("black").color, GREY)

    def test_with_names_extends(self):
        resolver = ColorResolver().with_names({"brand": Color(1, 2, 3)})
        self.assertEqual(resolver.resolve("BRAND").color, Color(1, 2, 3))
        self.assertEqual(resolver.resolve("red").color, Color(255, 0, 0))

    def test_custom_fallback(self):
        resolver = ColorResolver(fallback=Color(0, 0, 0))
        resolution = resolver.resolve("nope")
        self.assertEqual(resolution.color, Color(0, 0, 0))
        self.assertIsNotNone(resolution.warning)

    def test_hex_wins_over_names(self):
        resolver = ColorResolver({"abcdef": Color(1, 1, 1)})
        self.assertEqual(resolver.resolve("abcdef").color, Color(0xAB, 0xCD, 0xEF))


if __name__ == "__main__":
    unittest.main()
