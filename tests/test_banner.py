"""
pixelfont test suite
command-line banner tests
"""

import io
import unittest
from contextlib import redirect_stdout

from PIL import Image

from pixelfont import InvalidGlyphSheet
from pixelfont.plumbing import gather_text, EXIT_BAD_FONT
from pixelfont.scripts.banner import main
from .base import BaseTester, assert_text_eq, INK, SENTINEL


class TestBanner(BaseTester):
    """Test the banner script."""

    def setUp(self):
        super().setUp()
        self.font_path = str(self.temp_path / 'sheet.png')
        self.sheet.save(self.font_path)

    def run_banner(self, *args):
        output = io.StringIO()
        with redirect_stdout(output):
            main(['--font', self.font_path, *args])
        return output.getvalue()

    def test_text(self):
        assert_text_eq(self.run_banner('AB'), """\
.@.@@.
@.@@.@
@@@@@.
@.@@.@
@.@@@.
""")

    def test_text_ink_paper(self):
        assert_text_eq(self.run_banner('A', '--ink', '#', '--paper', '-'), """\
-#-
#-#
###
#-#
#-#
""")

    def test_lines(self):
        text = self.run_banner('A', 'A')
        assert len(text.splitlines()) == 10

    def test_escapes(self):
        assert self.run_banner(r'A\nA') == self.run_banner('A', 'A')

    def test_measure(self):
        assert self.run_banner('AB', '--measure') == '(0,0)-(6,5)\n'

    def test_measure_wrapped(self):
        assert self.run_banner('AB AB', '--measure', '--width', '10') == '(0,0)-(6,10)\n'

    def test_text_output_file(self):
        path = self.temp_path / 'banner.txt'
        assert self.run_banner('AB', '-o', str(path)) == ''
        assert path.read_text() == self.run_banner('AB')

    def test_image_output_file(self):
        path = self.temp_path / 'banner.png'
        self.run_banner('AB', '--margin', '1,2', '-o', str(path))
        with Image.open(path) as image:
            assert image.size == (8, 9)
            assert image.getpixel((2, 2)) == INK
            assert image.getpixel((0, 0))[3] == 0

    def test_missing_font(self):
        with self.assertRaises(SystemExit) as cm:
            main(['--font', str(self.temp_path / 'missing.png'), 'A'])
        assert cm.exception.code == 1

    def test_blank_sheet(self):
        path = self.temp_path / 'blank.png'
        Image.new('RGBA', (8, 8), SENTINEL).save(path)
        with self.assertRaises(SystemExit) as cm:
            main(['--font', str(path), 'A'])
        assert cm.exception.code == EXIT_BAD_FONT

    def test_blank_sheet_debug(self):
        path = self.temp_path / 'blank.png'
        Image.new('RGBA', (8, 8), SENTINEL).save(path)
        with self.assertRaises(InvalidGlyphSheet):
            main(['--font', str(path), '--debug', 'A'])

    def test_gather_text(self):
        assert gather_text(['A', 'B']) == 'A\nB'
        assert gather_text([], io.StringIO(r'A\x42')) == 'AB'


if __name__ == '__main__':
    unittest.main()
