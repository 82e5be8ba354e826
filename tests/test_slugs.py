from __future__ import annotations

import unittest

from fetsch.core.slugs import SLUG_TRANSLITERATION, slugify


class SlugifyTests(unittest.TestCase):
    def test_basic_samples(self) -> None:
        samples = [
            ("Héllo World!", "hello-world"),
            ("  multiple   spaces  ", "multiple-spaces"),
            ("Tom & Jerry", "tom-and-jerry"),
            ("Crème Brûlée", "creme-brulee"),
            ("Łódź, Poland", "lodz-poland"),
            ("straße", "strase"),
            ("path/to:file;name", "path-to-file-name"),
            ("snake_case_name", "snake-case-name"),
            ("---Already-Slugged---", "already-slugged"),
            ("Version 2.0 (beta)", "version-20-beta"),
        ]
        for text, expected in samples:
            with self.subTest(text=text):
                self.assertEqual(slugify(text), expected)

    def test_empty_and_degenerate_input(self) -> None:
        self.assertEqual(slugify(""), "")
        self.assertEqual(slugify(None), "")
        self.assertEqual(slugify("!!!"), "")
        self.assertEqual(slugify("   "), "")

    def test_non_string_input_is_stringified(self) -> None:
        self.assertEqual(slugify(2024), "2024")

    def test_characters_outside_table_are_removed(self) -> None:
        self.assertEqual(slugify("日本 tokyo"), "tokyo")
        self.assertEqual(slugify("Ægir"), "agir")

    def test_uppercase_accents_are_lowered_before_lookup(self) -> None:
        self.assertEqual(slugify("ÉCOLE"), "ecole")

    def test_table_maps_punctuation_to_hyphen(self) -> None:
        for char in "·/_,:;":
            with self.subTest(char=char):
                self.assertEqual(chr(SLUG_TRANSLITERATION[ord(char)]), "-")

    def test_result_is_stable(self) -> None:
        slug = slugify("Ünïcödé & Friends")

        self.assertEqual(slug, "unicode-and-friends")
        self.assertEqual(slugify(slug), slug)


if __name__ == "__main__":
    unittest.main()
