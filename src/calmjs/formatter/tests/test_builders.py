# -*- coding: utf-8 -*-
import unittest
from types import ModuleType

from calmjs.formatter import builders
from calmjs.formatter import document
from calmjs.formatter.asttypes import Node
from calmjs.formatter.audit import audit
from calmjs.formatter.context import PrintContext
from calmjs.formatter.dispatcher import Dispatcher
from calmjs.formatter.exceptions import DuplicateRegistration
from calmjs.formatter.kinds import ALL_KINDS
from calmjs.formatter.options import FormatOptions
from calmjs.formatter.registry import Registry
from calmjs.formatter.ruletypes import Definition
from calmjs.formatter.ruletypes import Text
from calmjs.formatter.testing.util import build_layout_testcase
from calmjs.formatter.testing.util import format_flat
from calmjs.formatter.testing.util import setup_logger


def ref(name):
    return Node('JSReferenceIdentifier', name=name)


def binding(name):
    return Node('JSBindingIdentifier', name=name)


def ident(name):
    return Node('JSIdentifier', name=name)


def num(value):
    return Node('JSNumericLiteral', value=value)


def string(value):
    return Node('JSStringLiteral', value=value)


def stmt(expression, **kw):
    return Node('JSExpressionStatement', expression=expression, **kw)


def quantified(target, **kw):
    return Node('JSRegExpQuantified', target=target, **kw)


class RegistryPopulationTestCase(unittest.TestCase):

    def test_create_registry(self):
        registry = builders.create_registry()
        self.assertTrue(registry.frozen)
        self.assertEqual(len(ALL_KINDS), len(registry))
        self.assertEqual(((), ()), tuple(audit(registry)))

    def test_create_registry_distinct(self):
        self.assertIsNot(
            builders.create_registry(), builders.create_registry())

    def test_definitions_disjoint(self):
        seen = set()
        for module in builders.modules:
            tags = set(tag for tag, definition in module.definitions)
            self.assertEqual(
                len(module.definitions), len(tags), module.__name__)
            self.assertFalse(seen & tags, module.__name__)
            seen.update(tags)
        self.assertEqual(ALL_KINDS, frozenset(seen))

    def test_every_builder_callable(self):
        for tag, builder in builders.create_registry():
            self.assertTrue(callable(builder), tag)

    def test_rule_tables_compiled(self):
        registry = builders.create_registry()
        self.assertTrue(
            isinstance(registry.lookup('JSIdentifier'), Definition))
        self.assertIs(
            builders.js.string_literal, registry.lookup('JSStringLiteral'))

    def test_as_builder(self):
        self.assertIs(
            builders.js.unary_expression,
            builders.as_builder('JSUnaryExpression',
                                builders.js.unary_expression),
        )
        definition = builders.as_builder('JSSuper', ())
        self.assertTrue(isinstance(definition, Definition))
        self.assertEqual('JSSuper', definition.name)

    def test_populate_twice(self):
        registry = builders.populate(Registry())
        with self.assertRaises(DuplicateRegistration):
            builders.populate(registry)

    def test_populate_duplicate_in_module(self):
        module = ModuleType('calmjs.formatter.builders.dupe')
        module.definitions = (
            ('JSSuper', (Text(value='super'),)),
            ('JSSuper', (Text(value='this'),)),
        )
        registry = Registry()
        with self.assertRaises(DuplicateRegistration) as e:
            builders.populate(registry, modules=(module,))
        self.assertEqual('JSSuper', e.exception.tag)
        # the first listing stands
        self.assertEqual(
            'super', registry.lookup('JSSuper').rules[0].value)

    def test_populate_logs(self):
        stream = setup_logger(self, builders.logger)
        builders.populate(Registry(), modules=(builders.common,))
        self.assertIn(
            "registered 3 builders from 'calmjs.formatter.builders.common'",
            stream.getvalue(),
        )

    def test_bare_nodes_for_rule_tables(self):
        # every rule table copes with a node that carries no fields
        dispatcher = Dispatcher(builders.create_registry())
        for tag, builder in dispatcher.registry:
            if not isinstance(builder, Definition):
                continue
            result = dispatcher.build(Node(tag), PrintContext())
            self.assertTrue(document.is_fragment(result), tag)


class OptionsThreadingTestCase(unittest.TestCase):

    def test_quote_option(self):
        node = stmt(string("it's"))
        self.assertEqual('"it\'s";', format_flat(node))
        self.assertEqual("'it\\'s';", format_flat(
            node, FormatOptions(quote="'")))

    def test_jsx_quote_option(self):
        node = Node(
            'JSXAttribute', name=Node('JSXIdentifier', name='title'),
            value=string("a'b"),
        )
        self.assertEqual('title="a\'b"', format_flat(node))
        self.assertEqual("title='a&apos;b'", format_flat(
            node, FormatOptions(jsx_quote="'")))


CommonTestCase = build_layout_testcase('CommonTestCase', [(
    'comment_line',
    Node('CommentLine', value=' note'),
    '// note',
), (
    'comment_block',
    Node('CommentBlock', value='* doc '),
    '/** doc */',
), (
    'mock_parent',
    Node('MockParent'),
    '',
), (
    'leading_comments',
    Node('JSRoot', body=[
        stmt(ref('a'), comments=[
            Node('CommentLine', value=' one'),
            Node('CommentBlock', value=' two '),
        ]),
    ]),
    '// one\n/* two */\na;\n',
)])


ScriptTestCase = build_layout_testcase('ScriptTestCase', [(
    'call_statement',
    Node('JSRoot', body=[
        stmt(Node(
            'JSCallExpression', callee=ref('f'),
            arguments=[num(1), string('a')],
        )),
    ]),
    'f(1, "a");\n',
), (
    'interpreter_and_directive',
    Node(
        'JSRoot',
        interpreter=Node('JSInterpreterDirective', value='/usr/bin/env node'),
        directives=[Node('JSDirective', value='use strict')],
        body=[stmt(ref('a'))],
    ),
    '#!/usr/bin/env node\n"use strict";\na;\n',
), (
    'empty_root',
    Node('JSRoot'),
    '',
), (
    'variable_declaration',
    Node('JSVariableDeclarationStatement', declaration=Node(
        'JSVariableDeclaration', kind='const', declarations=[
            Node(
                'JSVariableDeclarator', id=binding('x'),
                init=Node(
                    'JSBinaryExpression', left=ref('a'), operator='+',
                    right=ref('b'),
                ),
            ),
            Node('JSVariableDeclarator', id=binding('y')),
        ],
    )),
    'const x = a + b, y;',
), (
    'unary_keyword',
    Node('JSUnaryExpression', operator='typeof', argument=ref('x')),
    'typeof x',
), (
    'unary_symbol',
    Node('JSUnaryExpression', operator='!', argument=ref('x')),
    '!x',
), (
    'update_postfix',
    Node(
        'JSUpdateExpression', operator='++', prefix=False,
        argument=ref('i'),
    ),
    'i++',
), (
    'update_prefix',
    Node(
        'JSUpdateExpression', operator='--', prefix=True,
        argument=ref('i'),
    ),
    '--i',
), (
    'literals',
    Node('JSArrayExpression', elements=[
        num(1.5),
        Node('JSBooleanLiteral', value=False),
        Node('JSNullLiteral'),
        Node('JSBigIntLiteral', value='10'),
    ]),
    '[1.5, false, null, 10n]',
), (
    'template_literal',
    Node(
        'JSTemplateLiteral',
        quasis=[
            Node('JSTemplateElement', raw='a'),
            Node('JSTemplateElement', raw=''),
        ],
        expressions=[ref('b')],
    ),
    '`a${b}`',
), (
    'member_expressions',
    Node(
        'JSMemberExpression',
        object=Node(
            'JSMemberExpression', object=ref('a'),
            property=Node('JSStaticMemberProperty', value=ident('b')),
        ),
        property=Node(
            'JSComputedMemberProperty', value=num(0), optional=True),
    ),
    'a.b?.[0]',
), (
    'object_expression',
    Node('JSObjectExpression', properties=[
        Node(
            'JSObjectProperty',
            key=Node('JSStaticPropertyKey', value=ident('a')),
            value=num(1),
        ),
        Node('JSSpreadProperty', argument=ref('b')),
    ]),
    '{ a: 1, ...b }',
), (
    'object_expression_empty',
    Node('JSObjectExpression', properties=[]),
    '{}',
), (
    'arrow_function',
    Node(
        'JSArrowFunctionExpression', is_async=True,
        head=Node('JSFunctionHead', params=[binding('x')]),
        body=ref('x'),
    ),
    'async (x) => x',
), (
    'function_declaration',
    Node(
        'JSFunctionDeclaration', generator=True, id=binding('g'),
        head=Node(
            'JSFunctionHead', params=[binding('a')], rest=binding('b')),
        body=Node('JSBlockStatement', body=[
            stmt(Node('JSYieldExpression', argument=ref('a'))),
        ]),
    ),
    'function* g(a, ...b) {\nyield a;\n}',
), (
    'if_else',
    Node(
        'JSIfStatement', test=ref('a'),
        consequent=Node('JSBlockStatement', body=[
            Node('JSReturnStatement', argument=num(1)),
        ]),
        alternate=Node('JSBlockStatement', body=[]),
    ),
    'if (a) {\nreturn 1;\n} else {}',
), (
    'switch',
    Node(
        'JSSwitchStatement', discriminant=ref('a'), cases=[
            Node('JSSwitchCase', test=num(1), consequent=[
                Node('JSBreakStatement'),
            ]),
            Node('JSSwitchCase'),
        ],
    ),
    'switch (a) {\ncase 1:\nbreak;\ndefault:\n}',
), (
    'try_catch_finally',
    Node(
        'JSTryStatement', block=Node('JSBlockStatement'),
        handler=Node(
            'JSCatchClause', param=binding('e'),
            body=Node('JSBlockStatement'),
        ),
        finalizer=Node('JSBlockStatement'),
    ),
    'try {} catch (e) {} finally {}',
), (
    'for_of_await',
    Node(
        'JSForOfStatement', is_await=True, left=binding('x'),
        right=ref('xs'), body=Node('JSEmptyStatement'),
    ),
    'for await (x of xs) ;',
), (
    'class_declaration',
    Node(
        'JSClassDeclaration', id=binding('A'),
        meta=Node(
            'JSClassHead', super_class=ref('B'), body=[
                Node(
                    'JSClassProperty',
                    meta=Node('JSClassPropertyMeta', static=True),
                    key=ident('x'), value=num(1),
                ),
            ],
        ),
    ),
    'class A extends B {\nstatic x = 1;\n}',
)])


RegExpTestCase = build_layout_testcase('RegExpTestCase', [(
    'literal_with_flags',
    Node(
        'JSRegExpLiteral',
        expression=Node('JSRegExpSubExpression', body=[
            quantified(Node('JSRegExpCharacter', value='a'), min=1),
            quantified(
                Node('JSRegExpDigitCharacter'), min=2, max=4, lazy=True),
        ]),
        flags='gi',
    ),
    '/a+\\d{2,4}?/gi',
), (
    'star',
    quantified(Node('JSRegExpAnyCharacter')),
    '.*',
), (
    'optional',
    quantified(Node('JSRegExpAnyCharacter'), min=0, max=1),
    '.?',
), (
    'exact',
    quantified(Node('JSRegExpAnyCharacter'), min=3, max=3),
    '.{3}',
), (
    'at_least',
    quantified(Node('JSRegExpAnyCharacter'), min=2),
    '.{2,}',
), (
    'alternation_and_groups',
    Node(
        'JSRegExpAlternation',
        left=Node(
            'JSRegExpGroupCapture', name='word',
            expression=Node('JSRegExpWordCharacter'),
        ),
        right=Node(
            'JSRegExpCharSet', invert=True, body=[
                Node(
                    'JSRegExpCharSetRange',
                    start=Node('JSRegExpCharacter', value='a'),
                    end=Node('JSRegExpCharacter', value='z'),
                ),
            ],
        ),
    ),
    '(?<word>\\w)|[^a-z]',
)])


ModuleTestCase = build_layout_testcase('ModuleTestCase', [(
    'import_default_and_named',
    Node(
        'JSImportDeclaration',
        default_specifier=Node(
            'JSImportDefaultSpecifier',
            local=Node('JSImportSpecifierLocal', name=binding('a')),
        ),
        named_specifiers=[
            Node(
                'JSImportSpecifier', imported=ident('b'),
                local=Node('JSImportSpecifierLocal', name=binding('c')),
            ),
        ],
        source=string('m'),
    ),
    'import a, { b as c } from "m";',
), (
    'import_namespace_type',
    Node(
        'JSImportDeclaration', import_kind='type',
        namespace_specifier=Node(
            'JSImportNamespaceSpecifier',
            local=Node('JSImportSpecifierLocal', name=binding('ns')),
        ),
        source=string('m'),
    ),
    'import type * as ns from "m";',
), (
    'import_side_effect',
    Node('JSImportDeclaration', import_kind='value', source=string('m')),
    'import "m";',
), (
    'export_external',
    Node(
        'JSExportExternalDeclaration',
        named_specifiers=[
            Node('JSExportExternalSpecifier', local=ident('a')),
        ],
        source=string('m'),
    ),
    'export { a } from "m";',
), (
    'export_local',
    Node('JSExportLocalDeclaration', specifiers=[
        Node(
            'JSExportLocalSpecifier', local=ident('a'),
            exported=ident('b'),
        ),
    ]),
    'export { a as b };',
), (
    'export_all',
    Node('JSExportAllDeclaration', source=string('m')),
    'export * from "m";',
)])


MarkupTestCase = build_layout_testcase('MarkupTestCase', [(
    'jsx_element',
    Node(
        'JSXElement', name=Node('JSXIdentifier', name='a'),
        attributes=[
            Node(
                'JSXAttribute', name=Node('JSXIdentifier', name='href'),
                value=string('x"y'),
            ),
        ],
        children=[
            Node('JSXText', value='hi '),
            Node('JSXExpressionContainer', expression=ref('name')),
        ],
    ),
    '<a href="x&quot;y">hi {name}</a>',
), (
    'jsx_self_closing',
    Node(
        'JSXElement', name=Node('JSXIdentifier', name='br'),
        self_closing=True,
    ),
    '<br />',
), (
    'jsx_self_closing_attributes',
    Node(
        'JSXElement', name=Node('JSXIdentifier', name='img'),
        attributes=[
            Node('JSXSpreadAttribute', argument=ref('props')),
        ],
        self_closing=True,
    ),
    '<img {...props} />',
), (
    'jsx_fragment',
    Node('JSXFragment', children=[
        Node('JSXText', value='a'),
        Node(
            'JSXElement',
            name=Node(
                'JSXMemberExpression',
                object=Node('JSXReferenceIdentifier', name='UI'),
                property=Node('JSXIdentifier', name='B'),
            ),
            self_closing=True,
        ),
    ]),
    '<>a<UI.B /></>',
), (
    'html_document',
    Node('HTMLRoot', body=[
        Node('HTMLDoctypeTag', value='html'),
        Node(
            'HTMLElement', name=Node('HTMLIdentifier', name='p'),
            attributes=[
                Node(
                    'HTMLAttribute',
                    name=Node('HTMLIdentifier', name='class'),
                    value=Node('HTMLString', value='x'),
                ),
            ],
            children=[Node('HTMLText', value='hi')],
        ),
    ]),
    '<!DOCTYPE html>\n<p class="x">hi</p>\n',
)])


StylesheetTestCase = build_layout_testcase('StylesheetTestCase', [(
    'ruleset',
    Node('CSSRoot', body=[
        Node(
            'CSSRulesetStatement',
            selectors=[
                Node('CSSSelectorChain', selectors=[
                    Node('CSSSelectorTag', name='a'),
                    Node('CSSSelectorClass', name='b'),
                ]),
                Node('CSSSelectorId', name='c'),
            ],
            body=[
                Node(
                    'CSSRuleDeclaration', property='color',
                    value=[Node('CSSIdentifierType', name='red')],
                    important=True,
                ),
                Node(
                    'CSSRuleDeclaration', property='margin',
                    value=[
                        Node('CSSLengthType', value=10, unit='px'),
                        Node('CSSPercentageType', value=5),
                    ],
                ),
            ],
        ),
    ]),
    'a.b, #c {\ncolor: red !important;\nmargin: 10px 5%;\n}\n',
), (
    'charset',
    Node('CSSCharSetAtStatement', charset='utf-8'),
    '@charset "utf-8";',
), (
    'url',
    Node('CSSURLType', value='a.png'),
    'url("a.png")',
), (
    'function',
    Node('CSSGradientType', name='linear-gradient', arguments=[
        Node('CSSAngleType', value=45, unit='deg'),
        Node('CSSIdentifierType', name='red'),
    ]),
    'linear-gradient(45deg, red)',
), (
    'media',
    Node(
        'CSSMediaAtStatement',
        queries=[Node('CSSIdentifierType', name='print')],
        body=[],
    ),
    '@media print {}',
)])


TypedScriptTestCase = build_layout_testcase('TypedScriptTestCase', [(
    'type_alias_union',
    Node(
        'TSTypeAlias', id=binding('T'),
        right=Node('TSUnionTypeAnnotation', types=[
            Node('TSStringKeywordTypeAnnotation'),
            Node('TSNumberKeywordTypeAnnotation'),
        ]),
    ),
    'type T = string | number;',
), (
    'type_parameter_declaration',
    Node('TSTypeParameterDeclaration', params=[
        Node(
            'TSTypeParameter', name='T',
            constraint=Node('TSTypeReference', type_name=ref('U')),
            default=Node('TSStringKeywordTypeAnnotation'),
        ),
        Node('TSTypeParameter', name='V'),
    ]),
    '<T extends U = string, V>',
), (
    'mapped_type',
    Node(
        'TSMappedType', readonly=True,
        type_parameter=Node(
            'TSTypeParameter', name='K',
            constraint=Node('TSTypeReference', type_name=ref('Keys')),
        ),
        type_annotation=Node('TSStringKeywordTypeAnnotation'),
    ),
    '{ readonly [K in Keys]: string; }',
), (
    'array_of_reference',
    Node('TSArrayType', element_type=Node(
        'TSTypeReference', type_name=ref('A'),
        type_parameters=Node('TSTypeParameterInstantiation', params=[
            Node('TSAnyKeywordTypeAnnotation'),
        ]),
    )),
    'A<any>[]',
), (
    'as_expression',
    Node(
        'TSAsExpression', expression=ref('a'),
        type_annotation=Node('TSUnknownKeywordTypeAnnotation'),
    ),
    'a as unknown',
), (
    'enum',
    Node(
        'TSEnumDeclaration', is_const=True, id=binding('E'), members=[
            Node('TSEnumMember', id=ident('A'), initializer=num(1)),
            Node('TSEnumMember', id=ident('B')),
        ],
    ),
    'const enum E {\nA = 1,\nB,\n}',
), (
    'interface',
    Node(
        'TSInterfaceDeclaration', id=binding('I'),
        extends=[Node(
            'TSExpressionWithTypeArguments', expression=ref('J'))],
        body=Node('TSInterfaceBody', body=[
            Node(
                'TSPropertySignature', readonly=True, key=ident('a'),
                optional=True,
                type_annotation=Node('TSNumberKeywordTypeAnnotation'),
            ),
        ]),
    ),
    'interface I extends J {\nreadonly a?: number;\n}',
), (
    'literal_types',
    Node('TSIntersectionTypeAnnotation', types=[
        Node('TSBooleanLiteralTypeAnnotation', value=True),
        Node('TSNumericLiteralTypeAnnotation', value=2),
        Node('TSStringLiteralTypeAnnotation', value='s'),
    ]),
    'true & 2 & "s"',
)])

SingleQuoteTestCase = build_layout_testcase('SingleQuoteTestCase', [(
    'string_line_terminators',
    stmt(string('a\u2028b\r\n')),
    "'a\\u2028b\\r\\n';",
), (
    'directive',
    Node('JSDirective', value="use 'strict'"),
    "'use \\'strict\\'';",
), (
    'typed_string_literal',
    Node('TSStringLiteralTypeAnnotation', value='s'),
    "'s'",
)], options=FormatOptions(quote="'"))
