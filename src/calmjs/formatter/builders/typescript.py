# -*- coding: utf-8 -*-
"""
Description for the type annotation nodes of typed script.
"""

from calmjs.formatter import document
from calmjs.formatter.asttypes import kindof
from calmjs.formatter.ruletypes import (
    Space,
    Line,
    HardLine,
)
from calmjs.formatter.ruletypes import (
    Attr,
    Text,
    Operator,
    Optional,
    Flag,
    Literal,
    Quoted,
    Group,
    Indent,
    JoinAttr,
    resolve,
)
from calmjs.formatter.ruletypes import (
    comma_separated,
    hardline_separated,
)
from calmjs.formatter.builders.common import leading_comments
from calmjs.formatter.builders.js import block
from calmjs.formatter.builders.js import semicolon
from calmjs.formatter.builders.js import type_annotation


def keyword(value):
    return (Text(value=value),)


def type_parameter(node, context, build):
    # a mapped type declares its key as `K in T`, elsewhere `T extends U`
    if kindof(context.parent) == 'TSMappedType':
        constraint_keyword = 'in'
    else:
        constraint_keyword = 'extends'
    constraint = node.get('constraint')
    default = node.get('default')
    return document.concat(
        leading_comments(node, context, build),
        resolve(node.name, node, context, build),
        document.concat(
            document.space, document.text(constraint_keyword),
            document.space, resolve(constraint, node, context, build),
        ) if constraint is not None else None,
        document.concat(
            document.space, document.text('='), document.space,
            resolve(default, node, context, build),
        ) if default is not None else None,
    )


as_expression = (
    Attr('expression'), Space, Text(value='as'), Space,
    Attr('type_annotation'),
)

type_assertion = (
    Text(value='<'), Attr('type_annotation'), Text(value='>'),
    Attr('expression'),
)

non_null = (Attr('expression'), Text(value='!'))

type_parameters = (
    Group(value=(
        Text(value='<'), comma_separated('params'), Text(value='>'),
    )),
)

definitions = (
    # keywords
    ('TSAnyKeywordTypeAnnotation', keyword('any')),
    ('TSBigIntKeywordTypeAnnotation', keyword('bigint')),
    ('TSBooleanKeywordTypeAnnotation', keyword('boolean')),
    ('TSEmptyKeywordTypeAnnotation', keyword('empty')),
    ('TSMixedKeywordTypeAnnotation', keyword('mixed')),
    ('TSNeverKeywordTypeAnnotation', keyword('never')),
    ('TSNullKeywordTypeAnnotation', keyword('null')),
    ('TSNumberKeywordTypeAnnotation', keyword('number')),
    ('TSObjectKeywordTypeAnnotation', keyword('object')),
    ('TSStringKeywordTypeAnnotation', keyword('string')),
    ('TSSymbolKeywordTypeAnnotation', keyword('symbol')),
    ('TSThisType', keyword('this')),
    ('TSUndefinedKeywordTypeAnnotation', keyword('undefined')),
    ('TSUnknownKeywordTypeAnnotation', keyword('unknown')),
    ('TSVoidKeywordTypeAnnotation', keyword('void')),

    # literal types
    ('TSBooleanLiteralTypeAnnotation', (Literal('value'),)),
    ('TSNumericLiteralTypeAnnotation', (Literal('value'),)),
    ('TSStringLiteralTypeAnnotation', (Quoted('value'),)),
    ('TSTemplateLiteralTypeAnnotation', (
        Text(value='`'), Attr('value'), Text(value='`'),
    )),

    # expressions
    ('TSAsExpression', as_expression),
    ('TSAssignmentAsExpression', as_expression),
    ('TSAssignmentNonNullExpression', non_null),
    ('TSAssignmentTypeAssertion', type_assertion),
    ('TSExpressionWithTypeArguments', (
        Attr('expression'), Attr('type_parameters'),
    )),
    ('TSNonNullExpression', non_null),
    ('TSTypeAssertion', type_assertion),

    # type constructs
    ('TSArrayType', (Attr('element_type'), Text(value='[]'))),
    ('TSConditionalType', (
        Group(value=(
            Attr('check_type'), Space, Text(value='extends'), Space,
            Attr('extends_type'),
            Indent(value=(
                Line, Text(value='?'), Space, Attr('true_type'),
                Line, Text(value=':'), Space, Attr('false_type'),
            )),
        )),
    )),
    ('TSConstructorType', (
        Text(value='new'), Space, Attr('meta'), Space, Text(value='=>'),
        Space, Attr('type_annotation'),
    )),
    ('TSFunctionType', (
        Attr('meta'), Space, Text(value='=>'), Space, Attr('type_annotation'),
    )),
    ('TSImportType', (
        Text(value='import('), Attr('argument'), Text(value=')'),
        Optional('qualifier', (Text(value='.'), Attr('qualifier'))),
        Attr('type_parameters'),
    )),
    ('TSIndexedAccessType', (
        Attr('object_type'), Text(value='['), Attr('index_type'),
        Text(value=']'),
    )),
    ('TSInferType', (
        Text(value='infer'), Space, Attr('type_parameter'),
    )),
    ('TSIntersectionTypeAnnotation', (
        JoinAttr('types', value=(Space, Text(value='&'), Space)),
    )),
    ('TSMappedType', (
        Group(value=(
            Text(value='{'),
            Indent(value=(
                Line,
                Flag('readonly', (Text(value='readonly'), Space)),
                Text(value='['), Attr('type_parameter'), Text(value=']'),
                Flag('optional', (Text(value='?'),)),
                type_annotation(), Text(value=';'),
            )),
            Line,
            Text(value='}'),
        )),
    )),
    ('TSObjectTypeAnnotation', (
        Group(value=(
            Text(value='{'),
            Optional('members', (
                Indent(value=(Line, JoinAttr('members', value=(Line,)))),
                Line,
            )),
            Text(value='}'),
        )),
    )),
    ('TSParenthesizedType', (
        Text(value='('), Attr('type_annotation'), Text(value=')'),
    )),
    ('TSQualifiedName', (Attr('left'), Text(value='.'), Attr('right'))),
    ('TSTupleElement', (
        Optional('name', (
            Attr('name'), Flag('optional', (Text(value='?'),)),
            Text(value=':'), Space,
        )),
        Attr('type_annotation'),
    )),
    ('TSTupleType', (
        Group(value=(
            Text(value='['),
            comma_separated('element_types'),
            Optional('rest_type', (
                Optional('element_types', (Text(value=','), Line)),
                Text(value='...'), Attr('rest_type'),
            )),
            Text(value=']'),
        )),
    )),
    ('TSTypeOperator', (
        Operator(attr='operator'), Space, Attr('type_annotation'),
    )),
    ('TSTypeParameter', type_parameter),
    ('TSTypeParameterDeclaration', type_parameters),
    ('TSTypeParameterInstantiation', type_parameters),
    ('TSTypePredicate', (
        Flag('asserts', (Text(value='asserts'), Space)),
        Attr('parameter_name'),
        Optional('type_annotation', (
            Space, Text(value='is'), Space, Attr('type_annotation'),
        )),
    )),
    ('TSTypeQuery', (Text(value='typeof'), Space, Attr('expr_name'))),
    ('TSTypeReference', (Attr('type_name'), Attr('type_parameters'))),
    ('TSUnionTypeAnnotation', (
        Group(value=(
            Indent(value=(
                JoinAttr('types', value=(Line, Text(value='|'), Space)),
            )),
        )),
    )),

    # signatures
    ('TSCallSignatureDeclaration', (
        Attr('meta'), type_annotation(), semicolon(),
    )),
    ('TSConstructSignatureDeclaration', (
        Text(value='new'), Space, Attr('meta'), type_annotation(),
        semicolon(),
    )),
    ('TSIndexSignature', (
        Flag('readonly', (Text(value='readonly'), Space)),
        Text(value='['), comma_separated('parameters'), Text(value=']'),
        type_annotation(), semicolon(),
    )),
    ('TSMethodSignature', (
        Attr('key'), Flag('optional', (Text(value='?'),)), Attr('meta'),
        type_annotation('return_type'), semicolon(),
    )),
    ('TSPropertySignature', (
        Flag('readonly', (Text(value='readonly'), Space)),
        Attr('key'), Flag('optional', (Text(value='?'),)),
        type_annotation(), semicolon(),
    )),
    ('TSSignatureDeclarationMeta', (
        Attr('type_parameters'),
        Group(value=(
            Text(value='('),
            comma_separated('parameters'),
            Optional('rest', (
                Optional('parameters', (Text(value=','), Line)),
                Text(value='...'), Attr('rest'),
            )),
            Text(value=')'),
        )),
    )),

    # declarations
    ('TSDeclareFunction', (
        Text(value='declare'), Space, Text(value='function'), Space,
        Attr('id'), Attr('head'), semicolon(),
    )),
    ('TSDeclareMethod', (
        Attr('meta'), Optional('kind', (Attr('kind'), Space)),
        Attr('key'), Attr('head'), semicolon(),
    )),
    ('TSEnumDeclaration', (
        Flag('declare', (Text(value='declare'), Space)),
        Flag('is_const', (Text(value='const'), Space)),
        Text(value='enum'), Space, Attr('id'), Space, Text(value='{'),
        Optional('members', (
            Indent(value=(
                HardLine,
                JoinAttr('members', value=(Text(value=','), HardLine)),
                Text(value=','),
            )),
            HardLine,
        )),
        Text(value='}'),
    )),
    ('TSEnumMember', (
        Attr('id'),
        Optional('initializer', (
            Space, Text(value='='), Space, Attr('initializer'),
        )),
    )),
    ('TSExportAssignment', (
        Text(value='export'), Space, Text(value='='), Space,
        Attr('expression'), semicolon(),
    )),
    ('TSExternalModuleReference', (
        Text(value='require('), Attr('expression'), Text(value=')'),
    )),
    ('TSImportEqualsDeclaration', (
        Flag('is_export', (Text(value='export'), Space)),
        Text(value='import'), Space, Attr('id'), Space, Text(value='='),
        Space, Attr('module_reference'), semicolon(),
    )),
    ('TSInterfaceBody', (
        Text(value='{'),
        Optional('body', (
            Indent(value=(HardLine, hardline_separated('body'))),
            HardLine,
        )),
        Text(value='}'),
    )),
    ('TSInterfaceDeclaration', (
        Flag('declare', (Text(value='declare'), Space)),
        Text(value='interface'), Space, Attr('id'), Attr('type_parameters'),
        Optional('extends', (
            Space, Text(value='extends'), Space, comma_separated('extends'),
        )),
        Space, Attr('body'),
    )),
    ('TSModuleBlock', block()),
    ('TSModuleDeclaration', (
        Flag('declare', (Text(value='declare'), Space)),
        Attr('keyword'),
        Optional('id', (Space, Attr('id'))),
        Optional('body', (Space, Attr('body'))),
    )),
    ('TSNamespaceExportDeclaration', (
        Text(value='export'), Space, Text(value='as'), Space,
        Text(value='namespace'), Space, Attr('id'), semicolon(),
    )),
    ('TSTypeAlias', (
        Flag('declare', (Text(value='declare'), Space)),
        Text(value='type'), Space, Attr('id'), Attr('type_parameters'),
        Space, Text(value='='), Space, Attr('right'), semicolon(),
    )),
)
