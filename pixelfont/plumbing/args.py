"""
pixelfont.plumbing.args - frame for command-line scripts

(c) 2026 pixelfont contributors
licence: https://opensource.org/licenses/MIT
"""

import os
import sys
import logging
from contextlib import contextmanager

from pixelfont.base import FileFormatError


# exit status when the sprite sheet cannot be used
EXIT_BAD_FONT = 2


@contextmanager
def wrap_main(debug=False):
    """
    Run a script's main body with logging configured and errors reported.

    debug: log at DEBUG level and let exceptions propagate with a traceback
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(levelname)s: %(message)s',
        force=True,
    )
    try:
        yield
    except BrokenPipeError:
        # output closed early, e.g. piped into `head`
        sys.stdout = os.fdopen(1)
    except FileFormatError as exc:
        logging.error('Unusable sprite sheet: %s', exc)
        if debug:
            raise
        sys.exit(EXIT_BAD_FONT)
    except Exception as exc:
        logging.error(exc)
        if debug:
            raise
        sys.exit(1)


def gather_text(lines, instream=None):
    """
    Join text arguments into one string with a line break between them,
    or read from the stream (default: stdin) if there are none.
    Escape sequences are interpolated.
    """
    if lines:
        text = '\n'.join(lines)
    else:
        text = (instream or sys.stdin).read()
    return unescape(text)


def unescape(text):
    """Interpolate backslash escape sequences such as \\n and \\x41."""
    # raw-unicode-escape keeps backslashes and escapes characters beyond latin-1,
    # so that unicode_escape can decode both kinds of sequence
    return text.encode('raw-unicode-escape').decode('unicode_escape')
