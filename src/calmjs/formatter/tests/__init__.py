# -*- coding: utf-8 -*-
import unittest
import doctest
from os.path import dirname


def make_suite():  # pragma: no cover
    from calmjs.formatter import document

    optflags = doctest.NORMALIZE_WHITESPACE | doctest.ELLIPSIS

    test_loader = unittest.TestLoader()
    test_suite = test_loader.discover(
        'calmjs.formatter.tests', pattern='test_*.py',
        top_level_dir=dirname(__file__)
    )
    test_suite.addTest(doctest.DocTestSuite(document, optionflags=optflags))

    return test_suite
