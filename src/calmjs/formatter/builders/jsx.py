# -*- coding: utf-8 -*-
"""
Description for markup embedded inside script.
"""

from calmjs.formatter.ruletypes import (
    Attr,
    Text,
    Optional,
    JoinAttr,
)
from calmjs.formatter.builders.common import markup_element

definitions = (
    ('JSXAttribute', (
        Attr('name'), Optional('value', (Text(value='='), Attr('value'))),
    )),
    ('JSXElement', markup_element),
    ('JSXEmptyExpression', ()),
    ('JSXExpressionContainer', (
        Text(value='{'), Attr('expression'), Text(value='}'),
    )),
    ('JSXFragment', (
        Text(value='<>'), JoinAttr('children', value=()), Text(value='</>'),
    )),
    ('JSXIdentifier', (Attr('name'),)),
    ('JSXMemberExpression', (
        Attr('object'), Text(value='.'), Attr('property'),
    )),
    ('JSXNamespacedName', (
        Attr('namespace'), Text(value=':'), Attr('name'),
    )),
    ('JSXReferenceIdentifier', (Attr('name'),)),
    ('JSXSpreadAttribute', (
        Text(value='{...'), Attr('argument'), Text(value='}'),
    )),
    ('JSXSpreadChild', (
        Text(value='{...'), Attr('expression'), Text(value='}'),
    )),
    ('JSXText', (Attr('value'),)),
)
