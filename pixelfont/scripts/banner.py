"""
Render text with a sprite-sheet font
(c) 2026 pixelfont contributors, licence: https://opensource.org/licenses/MIT
"""

import sys
import argparse
import logging

import pixelfont
from pixelfont.base import Coord, Rect, RGBA
from pixelfont.plumbing import wrap_main, gather_text


TRANSPARENT = RGBA(0, 0, 0, 0)


def get_parser():
    parser = argparse.ArgumentParser(
        description='Lay out text in a sprite-sheet bitmap font and show the result.'
    )
    parser.add_argument(
        'text', nargs='*', type=str,
        help='lines of text to render; read from standard input if none given'
    )
    parser.add_argument(
        '--font', '-f', type=str, required=True,
        help='sprite-sheet image holding the font'
    )
    parser.add_argument(
        '--width', '-w', type=int, default=None,
        help='wrap words at this width in pixels'
    )
    parser.add_argument(
        '--margin', '-m', type=Coord.create, default=Coord(0, 0),
        help='blank pixels to add around the text, as X,Y (default: 0,0)'
    )
    parser.add_argument(
        '--ink', '-fg', type=str, default='@',
        help='text output: character for inked pixels (default: @)'
    )
    parser.add_argument(
        '--paper', '-bg', type=str, default='.',
        help=(
            'text output: character for background pixels (default: .); '
            'image output: background colour as R,G,B[,A] (default: transparent)'
        )
    )
    parser.add_argument(
        '--image', action='store_true',
        help='produce an image instead of text'
    )
    parser.add_argument(
        '--output', '-o', type=str, default='',
        help=(
            'file to write to. a .txt file receives text, '
            'any other extension an image in that format'
        )
    )
    parser.add_argument(
        '--measure', action='store_true',
        help='only print the rectangle the text covers'
    )
    parser.add_argument(
        '--debug', action='store_true',
        help='log sheet parsing and show tracebacks on errors'
    )
    return parser


def measure_text(font, text, width):
    if width is None:
        return pixelfont.measure(font, text)
    return pixelfont.measure_wrapped(font, text, Rect(0, 0, width, 0))


def write_image(glyph_map, args):
    paper = TRANSPARENT if args.paper == '.' else RGBA.create(args.paper)
    image = glyph_map.as_image(paper=paper, margin=args.margin)
    if args.output:
        image.save(args.output)
    else:
        image.show()


def write_text(glyph_map, args):
    output = glyph_map.as_text(ink=args.ink, paper=args.paper, margin=args.margin)
    if args.output:
        with open(args.output, 'w') as outfile:
            outfile.write(output)
    else:
        sys.stdout.write(output)


def main(argv=None):
    args = get_parser().parse_args(argv)
    with wrap_main(args.debug):
        text = gather_text(args.text)
        font = pixelfont.load(args.font)
        logging.info('Loaded %r from `%s`.', font, args.font)
        if args.measure:
            sys.stdout.write(f'{measure_text(font, text, args.width)}\n')
            return
        glyph_map = pixelfont.render(font, text, width=args.width)
        if args.image or args.output and not args.output.endswith('.txt'):
            write_image(glyph_map, args)
        else:
            write_text(glyph_map, args)


if __name__ == '__main__':
    main()
