"""
Tests for the style value types and the style registry.

The registry is the Flyweight cache, so most of these tests are about object
identity: equal attribute combinations must come back as the *same* object
(`assertIs`), and any difference in a single field must produce a different
object (`assertIsNot`).
"""

import unittest
from dataclasses import FrozenInstanceError

from flyweight_editor import Alignment, Color, StyleDescriptor, StyleRegistry

ARIAL_RED = ("Arial", 12, True, False, Color.RED, True, Alignment.CENTER)


class TestStyleDescriptor(unittest.TestCase):
    """Test the immutable style value object"""

    def test_fields_round_trip(self):
        """Test that every field is exposed exactly as given"""
        style = StyleDescriptor(*ARIAL_RED)
        self.assertEqual(style.font, "Arial")
        self.assertEqual(style.size, 12)
        self.assertTrue(style.bold)
        self.assertFalse(style.italic)
        self.assertIs(style.color, Color.RED)
        self.assertTrue(style.underline)
        self.assertIs(style.alignment, Alignment.CENTER)

    def test_key_is_field_tuple(self):
        """Test that the cache key is the seven-field tuple in declaration order"""
        self.assertEqual(StyleDescriptor(*ARIAL_RED).key, ARIAL_RED)

    def test_is_immutable(self):
        """Test that fields cannot be reassigned after construction"""
        style = StyleDescriptor(*ARIAL_RED)
        with self.assertRaises(FrozenInstanceError):
            style.size = 14  # type: ignore[misc]

    def test_equality_is_field_wise(self):
        """Test that separately built descriptors with equal fields compare equal"""
        self.assertEqual(StyleDescriptor(*ARIAL_RED), StyleDescriptor(*ARIAL_RED))
        self.assertEqual(hash(StyleDescriptor(*ARIAL_RED)), hash(StyleDescriptor(*ARIAL_RED)))

    def test_size_is_not_validated(self):
        """Test that zero and negative sizes are accepted unchanged"""
        for size in (0, -3):
            style = StyleDescriptor("Arial", size, False, False, Color.WHITE, False, Alignment.LEFT)
            self.assertEqual(style.size, size)

    def test_describe_field_order(self):
        """Test the one-line summary lists all seven fields in the fixed order"""
        style = StyleDescriptor(
            "Times New Roman", 14, False, True, Color.DARK_BLUE, False, Alignment.RIGHT
        )
        self.assertEqual(
            style.describe(),
            "Font: Times New Roman, Size: 14, Bold: False, Italic: True, "
            "Color: DarkBlue, Underline: False, Text Alignment: Right",
        )

    def test_str_matches_describe(self):
        """Test that str() gives the same summary as describe()"""
        style = StyleDescriptor(*ARIAL_RED)
        self.assertEqual(str(style), style.describe())


class TestEnums:
    """Tests for the Color and Alignment display names."""

    def test_palette_has_sixteen_colors(self):
        assert len(Color) == 16

    def test_color_str_is_display_name(self):
        assert str(Color.RED) == "Red"
        assert str(Color.DARK_YELLOW) == "DarkYellow"
        assert f"{Color.WHITE}" == "White"

    def test_alignment_str_is_display_name(self):
        assert [str(a) for a in Alignment] == ["Left", "Center", "Right"]


class TestStyleRegistry(unittest.TestCase):
    """Test the Flyweight cache"""

    def setUp(self):
        self.registry = StyleRegistry()

    def test_same_parameters_return_same_instance(self):
        """Test that identical attribute tuples share one object"""
        first = self.registry.get_or_create(*ARIAL_RED)
        second = self.registry.get_or_create(*ARIAL_RED)
        self.assertIs(first, second)

    def test_different_size_returns_different_instance(self):
        """Test that changing only the size yields a new object"""
        first = self.registry.get_or_create(*ARIAL_RED)
        second = self.registry.get_or_create(
            "Arial", 14, True, False, Color.RED, True, Alignment.CENTER
        )
        self.assertIsNot(first, second)

    def test_any_single_field_change_returns_different_instance(self):
        """Test that a change to any one of the seven fields is a cache miss"""
        base = self.registry.get_or_create(*ARIAL_RED)
        variants = [
            ("Roboto", 12, True, False, Color.RED, True, Alignment.CENTER),
            ("Arial", 13, True, False, Color.RED, True, Alignment.CENTER),
            ("Arial", 12, False, False, Color.RED, True, Alignment.CENTER),
            ("Arial", 12, True, True, Color.RED, True, Alignment.CENTER),
            ("Arial", 12, True, False, Color.BLUE, True, Alignment.CENTER),
            ("Arial", 12, True, False, Color.RED, False, Alignment.CENTER),
            ("Arial", 12, True, False, Color.RED, True, Alignment.LEFT),
        ]
        for variant in variants:
            with self.subTest(variant=variant):
                self.assertIsNot(self.registry.get_or_create(*variant), base)
        self.assertEqual(len(self.registry), len(variants) + 1)

    def test_returned_style_carries_requested_fields(self):
        """Test that a newly created style holds exactly the requested values"""
        style = self.registry.get_or_create(*ARIAL_RED)
        self.assertEqual(style.key, ARIAL_RED)

    def test_delimiter_like_font_names_do_not_collide(self):
        """Test that a font name shaped like a joined key stays distinct"""
        plain = self.registry.get_or_create(
            "Arial", 12, True, False, Color.RED, True, Alignment.LEFT
        )
        tricky = self.registry.get_or_create(
            "Arial_12_True", 12, True, False, Color.RED, True, Alignment.LEFT
        )
        self.assertIsNot(plain, tricky)
        self.assertEqual(tricky.font, "Arial_12_True")

    def test_counts_creations_and_reuses(self):
        """Test the cache miss/hit counters"""
        self.registry.get_or_create(*ARIAL_RED)
        self.registry.get_or_create(*ARIAL_RED)
        self.registry.get_or_create(*ARIAL_RED)
        self.assertEqual(len(self.registry), 1)
        self.assertEqual(self.registry.created, 1)
        self.assertEqual(self.registry.reused, 2)

    def test_new_registry_is_empty(self):
        """Test that a fresh registry holds no styles"""
        self.assertEqual(len(self.registry), 0)
        self.assertEqual(self.registry.styles(), ())

    def test_styles_in_creation_order(self):
        """Test that styles() lists descriptors oldest first"""
        first = self.registry.get_or_create(*ARIAL_RED)
        second = self.registry.get_or_create(
            "Roboto", 10, False, False, Color.GREEN, False, Alignment.LEFT
        )
        self.registry.get_or_create(*ARIAL_RED)
        self.assertEqual(self.registry.styles(), (first, second))
        self.assertEqual(list(self.registry), [first, second])

    def test_contains_checks_identity(self):
        """Test membership by key and by registered instance only"""
        style = self.registry.get_or_create(*ARIAL_RED)
        self.assertIn(style, self.registry)
        self.assertIn(ARIAL_RED, self.registry)
        # Equal by value but not the shared instance
        self.assertNotIn(StyleDescriptor(*ARIAL_RED), self.registry)
        self.assertNotIn("Arial", self.registry)


if __name__ == "__main__":
    unittest.main()
