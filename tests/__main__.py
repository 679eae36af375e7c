"""
pixelfont test suite
"""

import unittest

from tests.test_sheet import *
from tests.test_layout import *
from tests.test_render import *
from tests.test_banner import *


if __name__ == '__main__':
    unittest.main()
