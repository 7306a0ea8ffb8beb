# -*- coding: utf-8 -*-
"""
Quick access helper functions

``build_document`` turns a tree into a document fragment using every
builder; its registry is populated and audited as this package is
imported.
"""

from calmjs.formatter.base import Formatter

build_document = Formatter()
