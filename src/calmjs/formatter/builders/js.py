# -*- coding: utf-8 -*-
"""
Description for script nodes.
"""

from calmjs.formatter import document
from calmjs.formatter.asttypes import kindof
from calmjs.formatter.ruletypes import (
    Space,
    Line,
    SoftLine,
    HardLine,
)
from calmjs.formatter.ruletypes import (
    Attr,
    Text,
    Operator,
    Optional,
    Absent,
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
)
from calmjs.formatter.builders.common import leading_comments


def block(attr='body'):
    return (
        Text(value='{'),
        Optional(attr, (
            Indent(value=(HardLine, hardline_separated(attr))),
            HardLine,
        )),
        Text(value='}'),
    )


def semicolon():
    return Text(value=';')


def type_annotation(attr='type_annotation'):
    return Optional(attr, (Text(value=':'), Space, Attr(attr)))


call_arguments = Group(value=(
    Text(value='('),
    Indent(value=(SoftLine, comma_separated('arguments'))),
    SoftLine,
    Text(value=')'),
))

binary = (
    Group(value=(
        Attr('left'), Space, Operator(attr='operator'),
        Indent(value=(Line, Attr('right'))),
    )),
)

function_prefix = (
    Flag('is_async', (Text(value='async'), Space)),
)

method = (
    Attr('meta'),
    Flag('is_async', (Text(value='async'), Space)),
    Flag('generator', (Text(value='*'),)),
    Optional('kind', (Attr('kind'), Space)),
    Attr('key'), Attr('head'), Space, Attr('body'),
)


def array_pattern():
    return (
        Group(value=(
            Text(value='['),
            Indent(value=(
                SoftLine, comma_separated('elements'),
                Optional('rest', (
                    Optional('elements', (Text(value=','), Line)),
                    Text(value='...'), Attr('rest'),
                )),
            )),
            SoftLine,
            Text(value=']'),
        )),
        Attr('meta'),
    )


def object_pattern():
    return (
        Group(value=(
            Text(value='{'),
            Indent(value=(
                Line, comma_separated('properties'),
                Optional('rest', (
                    Optional('properties', (Text(value=','), Line)),
                    Text(value='...'), Attr('rest'),
                )),
            )),
            Line,
            Text(value='}'),
        )),
        Attr('meta'),
    )


def child_builder(node, context, build):
    def child(value):
        return build(value, context.descend(node, value))
    return child


_string = Quoted('value')
_jsx_string = Quoted('value', jsx=True)


def string_literal(node, context, build):
    # attribute values of embedded markup take the markup quote.
    if kindof(context.parent) == 'JSXAttribute':
        quoted = _jsx_string
    else:
        quoted = _string
    return document.concat(
        leading_comments(node, context, build),
        quoted(node, context, build),
    )


def template_literal(node, context, build):
    child = child_builder(node, context, build)
    expressions = node.get('expressions') or ()
    parts = [leading_comments(node, context, build), document.text('`')]
    for idx, quasi in enumerate(node.get('quasis') or ()):
        parts.append(child(quasi))
        if idx < len(expressions):
            parts.extend((
                document.text('${'), child(expressions[idx]),
                document.text('}'),
            ))
    parts.append(document.text('`'))
    return document.concat(*parts)


def unary_expression(node, context, build):
    child = child_builder(node, context, build)
    operator = node.operator
    return document.concat(
        leading_comments(node, context, build),
        document.text(operator),
        # typeof, void, delete
        document.space if operator.isalpha() else None,
        child(node.argument),
    )


def regexp_quantified(node, context, build):
    child = child_builder(node, context, build)
    low, high = node.get('min', 0), node.get('max')
    if (low, high) == (0, None):
        quantifier = '*'
    elif (low, high) == (1, None):
        quantifier = '+'
    elif (low, high) == (0, 1):
        quantifier = '?'
    elif low == high:
        quantifier = '{%d}' % low
    elif high is None:
        quantifier = '{%d,}' % low
    else:
        quantifier = '{%d,%d}' % (low, high)
    if node.get('lazy'):
        quantifier += '?'
    return document.concat(
        leading_comments(node, context, build),
        child(node.target),
        document.text(quantifier),
    )


def module_specifiers(node, context, build):
    """
    The specifiers of an import or a re-export, e.g. ``a, {b, c}``.
    """

    child = child_builder(node, context, build)
    heads = [
        child(value) for value in (
            node.get('default_specifier'), node.get('namespace_specifier'))
        if value is not None
    ]
    named = [child(value) for value in node.get('named_specifiers') or ()]
    if named:
        heads.append(document.group(
            document.text('{'),
            document.indent(
                document.line,
                document.join(
                    document.concat(document.text(','), document.line),
                    named,
                ),
            ),
            document.line,
            document.text('}'),
        ))
    return document.join(document.text(', '), heads)


def _module_declaration(keyword, kind_attr):
    def builder(node, context, build):
        child = child_builder(node, context, build)
        specifiers = module_specifiers(node, context, build)
        kind = node.get(kind_attr)
        return document.concat(
            leading_comments(node, context, build),
            document.text(keyword),
            document.space,
            document.concat(
                document.text(kind), document.space,
            ) if kind and kind != 'value' else None,
            document.concat(
                specifiers, document.space, document.text('from'),
                document.space,
            ) if specifiers != document.empty else None,
            child(node.source),
            document.text(';'),
        )
    builder.__name__ = keyword + '_declaration'
    return builder


import_declaration = _module_declaration('import', 'import_kind')
export_external_declaration = _module_declaration('export', 'export_kind')


definitions = (
    ('JSRoot', (
        Optional('interpreter', (Attr('interpreter'), HardLine)),
        hardline_separated(('directives', 'body')),
        Optional(('directives', 'body'), (HardLine,)),
    )),
    ('JSDirective', (Quoted('value'), semicolon())),
    ('JSInterpreterDirective', (Text(value='#!'), Attr('value'))),

    # auxiliary
    ('JSArrayHole', ()),
    ('JSCatchClause', (
        Text(value='catch'),
        Optional('param', (
            Space, Text(value='('), Attr('param'), Text(value=')'),
        )),
        Space, Attr('body'),
    )),
    ('JSComputedMemberProperty', (
        Flag('optional', (Text(value='?.'),)),
        Text(value='['), Attr('value'), Text(value=']'),
    )),
    ('JSFunctionHead', (
        Attr('type_parameters'),
        Group(value=(
            Text(value='('),
            Indent(value=(
                SoftLine,
                comma_separated(('this_type', 'params')),
                Optional('rest', (
                    Optional(('this_type', 'params'), (
                        Text(value=','), Line)),
                    Text(value='...'), Attr('rest'),
                )),
            )),
            SoftLine,
            Text(value=')'),
        )),
        type_annotation('return_type'),
    )),
    ('JSIdentifier', (Attr('name'),)),
    ('JSSpreadElement', (Text(value='...'), Attr('argument'))),
    ('JSStaticMemberProperty', (
        Flag('optional', (Text(value='?'),)),
        Text(value='.'), Attr('value'),
    )),
    ('JSSwitchCase', (
        Optional('test', (Text(value='case'), Space, Attr('test'))),
        Absent('test', (Text(value='default'),)),
        Text(value=':'),
        Optional('consequent', (
            Indent(value=(HardLine, hardline_separated('consequent'))),
        )),
    )),
    ('JSTemplateElement', (Attr('raw'),)),
    ('JSVariableDeclaration', (
        Attr('kind'), Space,
        Group(value=(
            Indent(value=(
                JoinAttr('declarations', value=(Text(value=','), Line)),
            )),
        )),
    )),
    ('JSVariableDeclarator', (
        Attr('id'),
        Optional('init', (
            Space, Text(value='='), Space, Attr('init'),
        )),
    )),

    # classes
    ('JSClassDeclaration', (
        Flag('declare', (Text(value='declare'), Space)),
        Flag('abstract', (Text(value='abstract'), Space)),
        Text(value='class'), Optional('id', (Space, Attr('id'))),
        Attr('meta'),
    )),
    ('JSClassExpression', (
        Text(value='class'), Optional('id', (Space, Attr('id'))),
        Attr('meta'),
    )),
    ('JSClassHead', (
        Attr('type_parameters'),
        Optional('super_class', (
            Space, Text(value='extends'), Space, Attr('super_class'),
            Attr('super_type_parameters'),
        )),
        Optional('implements', (
            Space, Text(value='implements'), Space,
            comma_separated('implements'),
        )),
        Space,
    ) + block()),
    ('JSClassMethod', method),
    ('JSClassPrivateMethod', method),
    ('JSClassPrivateProperty', (
        Attr('meta'), Attr('key'), type_annotation(),
        Optional('value', (Space, Text(value='='), Space, Attr('value'))),
        semicolon(),
    )),
    ('JSClassProperty', (
        Attr('meta'), Attr('key'),
        Flag('definite', (Text(value='!'),)),
        type_annotation(),
        Optional('value', (Space, Text(value='='), Space, Attr('value'))),
        semicolon(),
    )),
    ('JSClassPropertyMeta', (
        Optional('accessibility', (Attr('accessibility'), Space)),
        Flag('static', (Text(value='static'), Space)),
        Flag('abstract', (Text(value='abstract'), Space)),
        Flag('readonly', (Text(value='readonly'), Space)),
    )),
    ('JSPrivateName', (Text(value='#'), Attr('id'))),

    # expressions
    ('JSArrayExpression', (
        Group(value=(
            Text(value='['),
            Indent(value=(SoftLine, comma_separated('elements'))),
            SoftLine,
            Text(value=']'),
        )),
    )),
    ('JSArrowFunctionExpression', function_prefix + (
        Attr('head'), Space, Text(value='=>'), Space, Attr('body'),
    )),
    ('JSAssignmentExpression', (
        Attr('left'), Space, Operator(attr='operator'), Space, Attr('right'),
    )),
    ('JSAwaitExpression', (
        Text(value='await'), Optional('argument', (Space, Attr('argument'))),
    )),
    ('JSBinaryExpression', binary),
    ('JSCallExpression', (
        Attr('callee'), Attr('type_arguments'), call_arguments,
    )),
    ('JSConditionalExpression', (
        Group(value=(
            Attr('test'),
            Indent(value=(
                Line, Text(value='?'), Space, Attr('consequent'),
                Line, Text(value=':'), Space, Attr('alternate'),
            )),
        )),
    )),
    ('JSDoExpression', (Text(value='do'), Space, Attr('body'))),
    ('JSFunctionExpression', function_prefix + (
        Text(value='function'), Flag('generator', (Text(value='*'),)),
        Optional('id', (Space, Attr('id'))),
        Attr('head'), Space, Attr('body'),
    )),
    ('JSLogicalExpression', binary),
    ('JSMemberExpression', (Attr('object'), Attr('property'))),
    ('JSMetaProperty', (Attr('meta'), Text(value='.'), Attr('property'))),
    ('JSNewExpression', (
        Text(value='new'), Space, Attr('callee'), Attr('type_arguments'),
        call_arguments,
    )),
    ('JSOptionalCallExpression', (
        Attr('callee'), Text(value='?.'), Attr('type_arguments'),
        call_arguments,
    )),
    ('JSReferenceIdentifier', (Attr('name'),)),
    ('JSSequenceExpression', (
        JoinAttr('expressions', value=(Text(value=','), Line)),
    )),
    ('JSSuper', (Text(value='super'),)),
    ('JSTaggedTemplateExpression', (
        Attr('tag'), Attr('type_arguments'), Attr('quasi'),
    )),
    ('JSThisExpression', (Text(value='this'),)),
    ('JSUnaryExpression', unary_expression),
    ('JSUpdateExpression', (
        Flag('prefix', (Operator(attr='operator'),)),
        Attr('argument'),
        Absent('prefix', (Operator(attr='operator'),)),
    )),
    ('JSYieldExpression', (
        Text(value='yield'), Flag('delegate', (Text(value='*'),)),
        Optional('argument', (Space, Attr('argument'))),
    )),

    # literals
    ('JSBigIntLiteral', (Attr('value'), Text(value='n'))),
    ('JSBooleanLiteral', (Literal('value'),)),
    ('JSNullLiteral', (Text(value='null'),)),
    ('JSNumericLiteral', (Literal('value'),)),
    ('JSRegExpLiteral', (
        Text(value='/'), Attr('expression'), Text(value='/'), Attr('flags'),
    )),
    ('JSStringLiteral', string_literal),
    ('JSTemplateLiteral', template_literal),

    # modules
    ('JSExportAllDeclaration', (
        Text(value='export'), Space, Text(value='*'), Space,
        Text(value='from'), Space, Attr('source'), semicolon(),
    )),
    ('JSExportDefaultDeclaration', (
        Text(value='export'), Space, Text(value='default'), Space,
        Attr('declaration'),
    )),
    ('JSExportDefaultSpecifier', (Attr('exported'),)),
    ('JSExportExternalDeclaration', export_external_declaration),
    ('JSExportExternalSpecifier', (
        Attr('local'),
        Optional('exported', (
            Space, Text(value='as'), Space, Attr('exported'),
        )),
    )),
    ('JSExportLocalDeclaration', (
        Text(value='export'), Space,
        Optional('declaration', (Attr('declaration'),)),
        Absent('declaration', (
            Group(value=(
                Text(value='{'),
                Indent(value=(Line, comma_separated('specifiers'))),
                Line,
                Text(value='}'),
            )),
            semicolon(),
        )),
    )),
    ('JSExportLocalSpecifier', (
        Attr('local'),
        Optional('exported', (
            Space, Text(value='as'), Space, Attr('exported'),
        )),
    )),
    ('JSExportNamespaceSpecifier', (
        Text(value='*'), Space, Text(value='as'), Space, Attr('exported'),
    )),
    ('JSImportCall', (
        Text(value='import('), Attr('argument'), Text(value=')'),
    )),
    ('JSImportDeclaration', import_declaration),
    ('JSImportDefaultSpecifier', (Attr('local'),)),
    ('JSImportNamespaceSpecifier', (
        Text(value='*'), Space, Text(value='as'), Space, Attr('local'),
    )),
    ('JSImportSpecifier', (
        Attr('imported'),
        Optional('local', (Space, Text(value='as'), Space, Attr('local'))),
    )),
    ('JSImportSpecifierLocal', (Attr('name'),)),

    # objects
    ('JSComputedPropertyKey', (
        Text(value='['), Attr('value'), Text(value=']'),
    )),
    ('JSObjectExpression', (
        Group(value=(
            Text(value='{'),
            Optional('properties', (
                Indent(value=(Line, comma_separated('properties'))),
                Line,
            )),
            Text(value='}'),
        )),
    )),
    ('JSObjectMethod', method[1:]),
    ('JSObjectProperty', (
        Attr('key'), Text(value=':'), Space, Attr('value'),
    )),
    ('JSSpreadProperty', (Text(value='...'), Attr('argument'))),
    ('JSStaticPropertyKey', (Attr('value'),)),

    # patterns
    ('JSAssignmentArrayPattern', array_pattern()),
    ('JSAssignmentAssignmentPattern', (
        Attr('left'), Space, Text(value='='), Space, Attr('right'),
    )),
    ('JSAssignmentIdentifier', (Attr('name'),)),
    ('JSAssignmentObjectPattern', object_pattern()),
    ('JSAssignmentObjectPatternProperty', (
        Attr('key'), Text(value=':'), Space, Attr('value'),
    )),
    ('JSBindingArrayPattern', array_pattern()),
    ('JSBindingAssignmentPattern', (
        Attr('left'), Space, Text(value='='), Space, Attr('right'),
    )),
    ('JSBindingIdentifier', (Attr('name'), Attr('meta'))),
    ('JSBindingObjectPattern', object_pattern()),
    ('JSBindingObjectPatternProperty', (
        Attr('key'), Text(value=':'), Space, Attr('value'),
    )),
    ('JSPatternMeta', (
        Flag('optional', (Text(value='?'),)),
        type_annotation(),
    )),

    # regular expressions
    ('JSRegExpAlternation', (Attr('left'), Text(value='|'), Attr('right'))),
    ('JSRegExpAnyCharacter', (Text(value='.'),)),
    ('JSRegExpCharacter', (Attr('value'),)),
    ('JSRegExpCharSet', (
        Text(value='['), Flag('invert', (Text(value='^'),)),
        JoinAttr('body', value=()), Text(value=']'),
    )),
    ('JSRegExpCharSetRange', (
        Attr('start'), Text(value='-'), Attr('end'),
    )),
    ('JSRegExpControlCharacter', (Text(value='\\c'), Attr('value'))),
    ('JSRegExpDigitCharacter', (Text(value='\\d'),)),
    ('JSRegExpEndCharacter', (Text(value='$'),)),
    ('JSRegExpGroupCapture', (
        Text(value='('),
        Optional('name', (Text(value='?<'), Attr('name'), Text(value='>'))),
        Attr('expression'), Text(value=')'),
    )),
    ('JSRegExpGroupNonCapture', (
        Text(value='('), Attr('kind'), Attr('expression'), Text(value=')'),
    )),
    ('JSRegExpNamedBackReference', (
        Text(value='\\k<'), Attr('name'), Text(value='>'),
    )),
    ('JSRegExpNonDigitCharacter', (Text(value='\\D'),)),
    ('JSRegExpNonWhiteSpaceCharacter', (Text(value='\\S'),)),
    ('JSRegExpNonWordBoundaryCharacter', (Text(value='\\B'),)),
    ('JSRegExpNonWordCharacter', (Text(value='\\W'),)),
    ('JSRegExpNumericBackReference', (Text(value='\\'), Literal('value'))),
    ('JSRegExpQuantified', regexp_quantified),
    ('JSRegExpStartCharacter', (Text(value='^'),)),
    ('JSRegExpSubExpression', (JoinAttr('body', value=()),)),
    ('JSRegExpWhiteSpaceCharacter', (Text(value='\\s'),)),
    ('JSRegExpWordBoundaryCharacter', (Text(value='\\b'),)),
    ('JSRegExpWordCharacter', (Text(value='\\w'),)),

    # statements
    ('JSBlockStatement', (
        Text(value='{'),
        Optional(('directives', 'body'), (
            Indent(value=(
                HardLine, hardline_separated(('directives', 'body')),
            )),
            HardLine,
        )),
        Text(value='}'),
    )),
    ('JSBreakStatement', (
        Text(value='break'), Optional('label', (Space, Attr('label'))),
        semicolon(),
    )),
    ('JSContinueStatement', (
        Text(value='continue'), Optional('label', (Space, Attr('label'))),
        semicolon(),
    )),
    ('JSDebuggerStatement', (Text(value='debugger'), semicolon())),
    ('JSDoWhileStatement', (
        Text(value='do'), Space, Attr('body'), Space,
        Text(value='while'), Space,
        Text(value='('), Attr('test'), Text(value=')'), semicolon(),
    )),
    ('JSEmptyStatement', (semicolon(),)),
    ('JSExpressionStatement', (Attr('expression'), semicolon())),
    ('JSForInStatement', (
        Text(value='for'), Space, Text(value='('),
        Attr('left'), Space, Text(value='in'), Space, Attr('right'),
        Text(value=')'), Space, Attr('body'),
    )),
    ('JSForOfStatement', (
        Text(value='for'), Flag('is_await', (Space, Text(value='await'))),
        Space, Text(value='('),
        Attr('left'), Space, Text(value='of'), Space, Attr('right'),
        Text(value=')'), Space, Attr('body'),
    )),
    ('JSForStatement', (
        Text(value='for'), Space, Text(value='('),
        Attr('init'), Text(value=';'),
        Optional('test', (Space, Attr('test'))), Text(value=';'),
        Optional('update', (Space, Attr('update'))),
        Text(value=')'), Space, Attr('body'),
    )),
    ('JSFunctionDeclaration', function_prefix + (
        Text(value='function'), Flag('generator', (Text(value='*'),)),
        Optional('id', (Space, Attr('id'))),
        Attr('head'), Space, Attr('body'),
    )),
    ('JSIfStatement', (
        Text(value='if'), Space,
        Text(value='('), Attr('test'), Text(value=')'), Space,
        Attr('consequent'),
        Optional('alternate', (
            Space, Text(value='else'), Space, Attr('alternate'),
        )),
    )),
    ('JSLabeledStatement', (
        Attr('label'), Text(value=':'), Space, Attr('body'),
    )),
    ('JSReturnStatement', (
        Text(value='return'), Optional('argument', (Space, Attr('argument'))),
        semicolon(),
    )),
    ('JSSwitchStatement', (
        Text(value='switch'), Space,
        Text(value='('), Attr('discriminant'), Text(value=')'), Space,
    ) + block('cases')),
    ('JSThrowStatement', (
        Text(value='throw'), Space, Attr('argument'), semicolon(),
    )),
    ('JSTryStatement', (
        Text(value='try'), Space, Attr('block'),
        Optional('handler', (Space, Attr('handler'))),
        Optional('finalizer', (
            Space, Text(value='finally'), Space, Attr('finalizer'),
        )),
    )),
    ('JSVariableDeclarationStatement', (Attr('declaration'), semicolon())),
    ('JSWhileStatement', (
        Text(value='while'), Space,
        Text(value='('), Attr('test'), Text(value=')'), Space,
        Attr('body'),
    )),
    ('JSWithStatement', (
        Text(value='with'), Space,
        Text(value='('), Attr('object'), Text(value=')'), Space,
        Attr('body'),
    )),

    # flow type casts that could not be told apart from a sequence
    ('JSAmbiguousFlowTypeCastExpression', (
        Text(value='('), Attr('expression'),
        type_annotation(), Text(value=')'),
    )),
)
