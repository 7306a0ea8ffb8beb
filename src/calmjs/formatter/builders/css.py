# -*- coding: utf-8 -*-
"""
Description for stylesheet nodes.
"""

from calmjs.formatter.ruletypes import (
    Space,
    Line,
    SoftLine,
    HardLine,
)
from calmjs.formatter.ruletypes import (
    Attr,
    Text,
    Optional,
    Flag,
    Literal,
    Quoted,
    Group,
    Indent,
    JoinAttr,
)
from calmjs.formatter.ruletypes import (
    comma_separated,
    hardline_separated,
    space_separated,
)


def block(attr='body'):
    return (
        Text(value='{'),
        Optional(attr, (
            Indent(value=(HardLine, hardline_separated(attr))),
            HardLine,
        )),
        Text(value='}'),
    )


def at_rule(keyword, *rules):
    return (Text(value='@' + keyword),) + rules


dimension = (
    Literal('value'), Optional('unit', (Attr('unit'),)),
)

function = (
    Attr('name'), Text(value='('),
    Group(value=(
        Indent(value=(SoftLine, comma_separated('arguments'))),
        SoftLine,
    )),
    Text(value=')'),
)

definitions = (
    ('CSSRoot', (
        hardline_separated('body'),
        Optional('body', (HardLine,)),
    )),
    ('CSSRulesetStatement', (
        Group(value=(JoinAttr('selectors', value=(Text(value=','), Line)),)),
        Space,
    ) + block()),
    ('CSSRuleDeclaration', (
        Attr('property'), Text(value=':'), Space,
        space_separated('value'),
        Flag('important', (Space, Text(value='!important'))),
        Text(value=';'),
    )),

    # at-rules
    ('CSSCharSetAtStatement', at_rule(
        'charset', Space, Quoted('charset'), Text(value=';'),
    )),
    ('CSSCounterStyleAtStatement', at_rule(
        'counter-style', Space, Attr('name'), Space, *block()
    )),
    ('CSSDocumentAtStatement', at_rule(
        'document', Space, comma_separated('matchers'), Space, *block()
    )),
    ('CSSFontFaceAtStatement', at_rule('font-face', Space, *block())),
    ('CSSImportAtStatement', at_rule(
        'import', Space, Attr('url'),
        Optional('media', (Space, comma_separated('media'))),
        Text(value=';'),
    )),
    ('CSSKeyframesAtStatement', at_rule(
        'keyframes', Space, Attr('name'), Space, *block()
    )),
    ('CSSMediaAtStatement', at_rule(
        'media', Space, comma_separated('queries'), Space, *block()
    )),
    ('CSSNamespaceAtStatement', at_rule(
        'namespace', Optional('prefix', (Space, Attr('prefix'))),
        Space, Attr('url'), Text(value=';'),
    )),
    ('CSSPageAtStatement', at_rule(
        'page', Optional('selector', (Space, Attr('selector'))),
        Space, *block()
    )),
    ('CSSSupportsAtStatement', at_rule(
        'supports', Space, Attr('condition'), Space, *block()
    )),
    ('CSSViewportAtStatement', at_rule('viewport', Space, *block())),

    # keyframes
    ('CSSKeyframesFromKeyword', (Text(value='from'),)),
    ('CSSKeyframesToKeyword', (Text(value='to'),)),
    ('CSSKeyframesRuleDeclaration', (
        comma_separated('selectors'), Space,
    ) + block()),

    # selectors
    ('CSSSelectorAttribute', (
        Text(value='['), Attr('attribute'),
        Optional('matcher', (
            Attr('matcher'), Optional('value', (Quoted('value'),)),
        )),
        Flag('case_insensitive', (Space, Text(value='i'))),
        Text(value=']'),
    )),
    ('CSSSelectorChain', (
        JoinAttr('selectors', value=()),
    )),
    ('CSSSelectorClass', (Text(value='.'), Attr('name'))),
    ('CSSSelectorCombinator', (
        Space, Attr('combinator'), Space,
    )),
    ('CSSSelectorId', (Text(value='#'), Attr('name'))),
    ('CSSSelectorPseudoClass', (
        Text(value=':'), Attr('name'),
        Optional('arguments', (
            Text(value='('), comma_separated('arguments'), Text(value=')'),
        )),
    )),
    ('CSSSelectorPseudoElementSelector', (Text(value='::'), Attr('name'))),
    ('CSSSelectorTag', (Attr('name'),)),
    ('CSSSelectorUniversal', (Text(value='*'),)),

    # values
    ('CSSAnglePercentageType', dimension),
    ('CSSAngleType', dimension),
    ('CSSBasicShapeType', function),
    ('CSSBlendModeType', (Attr('value'),)),
    ('CSSDimensionType', dimension),
    ('CSSFrequencyPercentageType', dimension),
    ('CSSFrequencyType', dimension),
    ('CSSGradientType', function),
    ('CSSIdentifierType', (Attr('name'),)),
    ('CSSImageType', function),
    ('CSSIntegerType', (Literal('value'),)),
    ('CSSLengthPercentageType', dimension),
    ('CSSLengthType', dimension),
    ('CSSNumberType', (Literal('value'),)),
    ('CSSPercentageType', (Literal('value'), Text(value='%'))),
    ('CSSRatioType', (
        Literal('numerator'), Text(value='/'), Literal('denominator'),
    )),
    ('CSSResolutionType', dimension),
    ('CSSShapeType', function),
    ('CSSStringType', (Quoted('value'),)),
    ('CSSTimePercentageType', dimension),
    ('CSSTimeType', dimension),
    ('CSSTransformFunctionType', function),
    ('CSSURLType', (
        Text(value='url('), Quoted('value'), Text(value=')'),
    )),
)
