# -*- coding: utf-8 -*-
"""
Helpers for testing builders: a flat rendering of document fragments,
and generators of TestCase classes from manifests of nodes paired with
the layout expected for them.
"""

import logging
import unittest
from io import StringIO

from calmjs.formatter import build_document
from calmjs.formatter import document

_line_modes = {
    'line': ' ',
    'soft': '',
    'hard': '\n',
}


def flatten(fragment):
    """
    Render the fragment as if every group fits on one line, so that
    hard lines are the only line breaks.  Indentation is not applied.
    """

    if isinstance(fragment, (document.Text, document.Comment)):
        return fragment.value
    if isinstance(fragment, document.Concat):
        return ''.join(flatten(part) for part in fragment.parts)
    if isinstance(fragment, (document.Group, document.Indent)):
        return flatten(fragment.contents)
    if isinstance(fragment, document.Line):
        return _line_modes[fragment.mode]
    raise TypeError('not a document fragment: %r' % (fragment,))


def format_flat(node, options=None, formatter=build_document):
    """
    Build the document for node with the formatter and flatten it.
    """

    return flatten(formatter(node, options))


def build_manifest_testcase(name, manifest, create_test_method, **attrs):
    """
    Create a TestCase subclass with a test method for every entry of the
    manifest, an iterable of (label, argument, answer) 3-tuples.  The
    methods are produced by create_test_method(argument, answer) and
    named after the label.
    """

    for label, argument, answer in manifest:
        method_name = 'test_' + label
        if method_name in attrs:
            raise ValueError(
                "manifest label '%s' is used more than once" % label)
        attrs[method_name] = create_test_method(argument, answer)

    return type(str(name), (unittest.TestCase,), attrs)


def build_layout_testcase(name, manifest, options=None,
                          formatter=build_document):
    """
    Create a TestCase subclass that checks the flattened layout built
    for a node.

    name
        The name of the TestCase subclass that will be created
    manifest
        An iterable of 3-tuples of:

        - label, will be used as name of created test method
        - the node to build
        - the expected flattened layout.
    options
        The FormatOptions to build with; the defaults if None.
    formatter
        The Formatter to build with; the default one if not provided.
    """

    def create_test_method(node, answer):
        def test_method(self):
            self.assertEqual(answer, format_flat(node, options, formatter))

        return test_method

    return build_manifest_testcase(
        name, manifest, create_test_method, maxDiff=None)


def build_exception_testcase(name, f, manifest, exception):
    """
    Create a TestCase subclass that checks that calling f with each of
    the arguments raises the exception.

    manifest
        An iterable of 3-tuples of label, argument and the expected
        message of the exception, or None to not check the message.
    """

    def create_test_method(argument, msg):
        def test_method(self):
            with self.assertRaises(exception) as e:
                f(argument)
            if msg is not None:
                self.assertEqual(msg, str(e.exception))

        return test_method

    return build_manifest_testcase(name, manifest, create_test_method)


def setup_logger(testcase, logger, level=logging.DEBUG):
    """
    Capture the records emitted by logger at level for the duration of
    the testcase, returning the stream they are written to.
    """

    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter('%(levelname)s %(message)s'))
    testcase.addCleanup(logger.setLevel, logger.level)
    testcase.addCleanup(logger.removeHandler, handler)
    logger.addHandler(handler)
    logger.setLevel(level)
    return stream
