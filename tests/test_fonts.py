import tempfile
import unittest
from pathlib import Path
from unittest import mock

import requests

from fonts import EmbeddedFont, FontError, builtin_font, fetch_url, load_font, read_file, resolve_font_source
from fonts.source import DEFAULT_FONT_URL
from tests.pdf_factory import cyrillic_font


class TestEmbeddedFont(unittest.TestCase):
    def test_builtin_cyrillic_font(self):
        font = EmbeddedFont(cyrillic_font())
        self.assertEqual(font.name, "artlabel")
        self.assertGreater(font.text_width("Арт: F/034", 14), 0)
        self.assertGreater(font.height_at(14), 0)

    def test_width_scales_with_size(self):
        font = EmbeddedFont(cyrillic_font())
        self.assertAlmostEqual(font.text_width("Арт", 20), 2 * font.text_width("Арт", 10), places=3)

    def test_empty_buffer(self):
        with self.assertRaises(FontError):
            EmbeddedFont(b"")

    def test_garbage_buffer(self):
        with self.assertRaises(FontError):
            EmbeddedFont(b"definitely not a font file")

    def test_missing_cyrillic_glyphs(self):
        fake = mock.MagicMock()
        fake.name = "LatinOnly"
        fake.has_glyph.side_effect = lambda cp: 0 if cp > 127 else 1
        with mock.patch("fonts.source.fitz.Font", return_value=fake):
            with self.assertRaises(FontError) as ctx:
                EmbeddedFont(b"latin-only")
        self.assertIn("Арт", str(ctx.exception))


class TestFontSources(unittest.TestCase):
    def test_fetch_url(self):
        resp = mock.Mock(content=b"font-bytes")
        with mock.patch("fonts.source.requests.get", return_value=resp) as get:
            self.assertEqual(fetch_url("https://example.org/f.ttf", timeout=5), b"font-bytes")
        get.assert_called_once_with("https://example.org/f.ttf", timeout=5)
        resp.raise_for_status.assert_called_once_with()

    def test_fetch_url_network_error(self):
        with mock.patch("fonts.source.requests.get", side_effect=requests.ConnectionError("offline")):
            with self.assertRaises(FontError):
                fetch_url("https://example.org/f.ttf")

    def test_fetch_url_http_error(self):
        resp = mock.Mock()
        resp.raise_for_status.side_effect = requests.HTTPError("404")
        with mock.patch("fonts.source.requests.get", return_value=resp):
            with self.assertRaises(FontError):
                fetch_url("https://example.org/missing.ttf")

    def test_read_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "font.ttf"
            path.write_bytes(b"abc")
            self.assertEqual(read_file(path), b"abc")
            with self.assertRaises(FontError):
                read_file(Path(tmp) / "missing.ttf")

    def test_builtin_font(self):
        self.assertTrue(builtin_font("helv"))

    def test_resolve_dispatch(self):
        with mock.patch("fonts.source.fetch_url", return_value=b"url") as fetch:
            self.assertEqual(resolve_font_source(None, timeout=7)(), b"url")
            fetch.assert_called_once_with(DEFAULT_FONT_URL, 7)
        with mock.patch("fonts.source.builtin_font", return_value=b"builtin") as builtin:
            self.assertEqual(resolve_font_source("builtin:helv")(), b"builtin")
            builtin.assert_called_once_with("helv")
        with mock.patch("fonts.source.read_file", return_value=b"file") as read:
            self.assertEqual(resolve_font_source(" fonts/Roboto.ttf ")(), b"file")
            read.assert_called_once_with("fonts/Roboto.ttf")

    def test_resolve_is_lazy(self):
        with mock.patch("fonts.source.fetch_url") as fetch:
            resolve_font_source("https://example.org/f.ttf")
            fetch.assert_not_called()

    def test_load_font(self):
        font = load_font(lambda: cyrillic_font(), name="F9")
        self.assertEqual(font.name, "F9")


if __name__ == "__main__":
    unittest.main()
