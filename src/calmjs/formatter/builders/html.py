# -*- coding: utf-8 -*-
"""
Description for markup document nodes.
"""

from calmjs.formatter.ruletypes import (
    Space,
    HardLine,
)
from calmjs.formatter.ruletypes import (
    Attr,
    Text,
    Optional,
    Quoted,
)
from calmjs.formatter.ruletypes import hardline_separated
from calmjs.formatter.builders.common import markup_element

definitions = (
    ('HTMLRoot', (
        hardline_separated('body'),
        Optional('body', (HardLine,)),
    )),
    ('HTMLDoctypeTag', (
        Text(value='<!DOCTYPE'), Space, Attr('value'), Text(value='>'),
    )),
    ('HTMLElement', markup_element),
    ('HTMLAttribute', (
        Attr('name'), Optional('value', (Text(value='='), Attr('value'))),
    )),
    ('HTMLIdentifier', (Attr('name'),)),
    ('HTMLString', (Quoted('value', jsx=True),)),
    ('HTMLText', (Attr('value'),)),
)
