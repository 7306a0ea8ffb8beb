# -*- coding: utf-8 -*-
"""
The authoritative enumeration of node kinds.

Every kind tag that a parser may place in a tree is listed here, grouped
by the grammar that produces it.  The tag namespace is flat; a tag is
never shared between grammars.  This listing is maintained separately
from the builder tables on purpose, so that a builder that was never
written shows up as a difference between the two (see the audit module).
"""

COMMON = (
    'CommentBlock',
    'CommentLine',
    'MockParent',
)

CSS = (
    'CSSAnglePercentageType',
    'CSSAngleType',
    'CSSBasicShapeType',
    'CSSBlendModeType',
    'CSSCharSetAtStatement',
    'CSSCounterStyleAtStatement',
    'CSSDimensionType',
    'CSSDocumentAtStatement',
    'CSSFontFaceAtStatement',
    'CSSFrequencyPercentageType',
    'CSSFrequencyType',
    'CSSGradientType',
    'CSSIdentifierType',
    'CSSImageType',
    'CSSImportAtStatement',
    'CSSIntegerType',
    'CSSKeyframesAtStatement',
    'CSSKeyframesFromKeyword',
    'CSSKeyframesRuleDeclaration',
    'CSSKeyframesToKeyword',
    'CSSLengthPercentageType',
    'CSSLengthType',
    'CSSMediaAtStatement',
    'CSSNamespaceAtStatement',
    'CSSNumberType',
    'CSSPageAtStatement',
    'CSSPercentageType',
    'CSSRatioType',
    'CSSResolutionType',
    'CSSRoot',
    'CSSRuleDeclaration',
    'CSSRulesetStatement',
    'CSSSelectorAttribute',
    'CSSSelectorChain',
    'CSSSelectorClass',
    'CSSSelectorCombinator',
    'CSSSelectorId',
    'CSSSelectorPseudoClass',
    'CSSSelectorPseudoElementSelector',
    'CSSSelectorTag',
    'CSSSelectorUniversal',
    'CSSShapeType',
    'CSSStringType',
    'CSSSupportsAtStatement',
    'CSSTimePercentageType',
    'CSSTimeType',
    'CSSTransformFunctionType',
    'CSSURLType',
    'CSSViewportAtStatement',
)

HTML = (
    'HTMLAttribute',
    'HTMLDoctypeTag',
    'HTMLElement',
    'HTMLIdentifier',
    'HTMLRoot',
    'HTMLString',
    'HTMLText',
)

JS = (
    'JSAmbiguousFlowTypeCastExpression',
    'JSArrayExpression',
    'JSArrayHole',
    'JSArrowFunctionExpression',
    'JSAssignmentArrayPattern',
    'JSAssignmentAssignmentPattern',
    'JSAssignmentExpression',
    'JSAssignmentIdentifier',
    'JSAssignmentObjectPattern',
    'JSAssignmentObjectPatternProperty',
    'JSAwaitExpression',
    'JSBigIntLiteral',
    'JSBinaryExpression',
    'JSBindingArrayPattern',
    'JSBindingAssignmentPattern',
    'JSBindingIdentifier',
    'JSBindingObjectPattern',
    'JSBindingObjectPatternProperty',
    'JSBlockStatement',
    'JSBooleanLiteral',
    'JSBreakStatement',
    'JSCallExpression',
    'JSCatchClause',
    'JSClassDeclaration',
    'JSClassExpression',
    'JSClassHead',
    'JSClassMethod',
    'JSClassPrivateMethod',
    'JSClassPrivateProperty',
    'JSClassProperty',
    'JSClassPropertyMeta',
    'JSComputedMemberProperty',
    'JSComputedPropertyKey',
    'JSConditionalExpression',
    'JSContinueStatement',
    'JSDebuggerStatement',
    'JSDirective',
    'JSDoExpression',
    'JSDoWhileStatement',
    'JSEmptyStatement',
    'JSExportAllDeclaration',
    'JSExportDefaultDeclaration',
    'JSExportDefaultSpecifier',
    'JSExportExternalDeclaration',
    'JSExportExternalSpecifier',
    'JSExportLocalDeclaration',
    'JSExportLocalSpecifier',
    'JSExportNamespaceSpecifier',
    'JSExpressionStatement',
    'JSForInStatement',
    'JSForOfStatement',
    'JSForStatement',
    'JSFunctionDeclaration',
    'JSFunctionExpression',
    'JSFunctionHead',
    'JSIdentifier',
    'JSIfStatement',
    'JSImportCall',
    'JSImportDeclaration',
    'JSImportDefaultSpecifier',
    'JSImportNamespaceSpecifier',
    'JSImportSpecifier',
    'JSImportSpecifierLocal',
    'JSInterpreterDirective',
    'JSLabeledStatement',
    'JSLogicalExpression',
    'JSMemberExpression',
    'JSMetaProperty',
    'JSNewExpression',
    'JSNullLiteral',
    'JSNumericLiteral',
    'JSObjectExpression',
    'JSObjectMethod',
    'JSObjectProperty',
    'JSOptionalCallExpression',
    'JSPatternMeta',
    'JSPrivateName',
    'JSReferenceIdentifier',
    'JSRegExpAlternation',
    'JSRegExpAnyCharacter',
    'JSRegExpCharSet',
    'JSRegExpCharSetRange',
    'JSRegExpCharacter',
    'JSRegExpControlCharacter',
    'JSRegExpDigitCharacter',
    'JSRegExpEndCharacter',
    'JSRegExpGroupCapture',
    'JSRegExpGroupNonCapture',
    'JSRegExpLiteral',
    'JSRegExpNamedBackReference',
    'JSRegExpNonDigitCharacter',
    'JSRegExpNonWhiteSpaceCharacter',
    'JSRegExpNonWordBoundaryCharacter',
    'JSRegExpNonWordCharacter',
    'JSRegExpNumericBackReference',
    'JSRegExpQuantified',
    'JSRegExpStartCharacter',
    'JSRegExpSubExpression',
    'JSRegExpWhiteSpaceCharacter',
    'JSRegExpWordBoundaryCharacter',
    'JSRegExpWordCharacter',
    'JSReturnStatement',
    'JSRoot',
    'JSSequenceExpression',
    'JSSpreadElement',
    'JSSpreadProperty',
    'JSStaticMemberProperty',
    'JSStaticPropertyKey',
    'JSStringLiteral',
    'JSSuper',
    'JSSwitchCase',
    'JSSwitchStatement',
    'JSTaggedTemplateExpression',
    'JSTemplateElement',
    'JSTemplateLiteral',
    'JSThisExpression',
    'JSThrowStatement',
    'JSTryStatement',
    'JSUnaryExpression',
    'JSUpdateExpression',
    'JSVariableDeclaration',
    'JSVariableDeclarationStatement',
    'JSVariableDeclarator',
    'JSWhileStatement',
    'JSWithStatement',
    'JSYieldExpression',
)

JSX = (
    'JSXAttribute',
    'JSXElement',
    'JSXEmptyExpression',
    'JSXExpressionContainer',
    'JSXFragment',
    'JSXIdentifier',
    'JSXMemberExpression',
    'JSXNamespacedName',
    'JSXReferenceIdentifier',
    'JSXSpreadAttribute',
    'JSXSpreadChild',
    'JSXText',
)

TS = (
    'TSAnyKeywordTypeAnnotation',
    'TSArrayType',
    'TSAsExpression',
    'TSAssignmentAsExpression',
    'TSAssignmentNonNullExpression',
    'TSAssignmentTypeAssertion',
    'TSBigIntKeywordTypeAnnotation',
    'TSBooleanKeywordTypeAnnotation',
    'TSBooleanLiteralTypeAnnotation',
    'TSCallSignatureDeclaration',
    'TSConditionalType',
    'TSConstructSignatureDeclaration',
    'TSConstructorType',
    'TSDeclareFunction',
    'TSDeclareMethod',
    'TSEmptyKeywordTypeAnnotation',
    'TSEnumDeclaration',
    'TSEnumMember',
    'TSExportAssignment',
    'TSExpressionWithTypeArguments',
    'TSExternalModuleReference',
    'TSFunctionType',
    'TSImportEqualsDeclaration',
    'TSImportType',
    'TSIndexSignature',
    'TSIndexedAccessType',
    'TSInferType',
    'TSInterfaceBody',
    'TSInterfaceDeclaration',
    'TSIntersectionTypeAnnotation',
    'TSMappedType',
    'TSMethodSignature',
    'TSMixedKeywordTypeAnnotation',
    'TSModuleBlock',
    'TSModuleDeclaration',
    'TSNamespaceExportDeclaration',
    'TSNeverKeywordTypeAnnotation',
    'TSNonNullExpression',
    'TSNullKeywordTypeAnnotation',
    'TSNumberKeywordTypeAnnotation',
    'TSNumericLiteralTypeAnnotation',
    'TSObjectKeywordTypeAnnotation',
    'TSObjectTypeAnnotation',
    'TSParenthesizedType',
    'TSPropertySignature',
    'TSQualifiedName',
    'TSSignatureDeclarationMeta',
    'TSStringKeywordTypeAnnotation',
    'TSStringLiteralTypeAnnotation',
    'TSSymbolKeywordTypeAnnotation',
    'TSTemplateLiteralTypeAnnotation',
    'TSThisType',
    'TSTupleElement',
    'TSTupleType',
    'TSTypeAlias',
    'TSTypeAssertion',
    'TSTypeOperator',
    'TSTypeParameter',
    'TSTypeParameterDeclaration',
    'TSTypeParameterInstantiation',
    'TSTypePredicate',
    'TSTypeQuery',
    'TSTypeReference',
    'TSUndefinedKeywordTypeAnnotation',
    'TSUnionTypeAnnotation',
    'TSUnknownKeywordTypeAnnotation',
    'TSVoidKeywordTypeAnnotation',
)

GRAMMARS = (
    ('common', COMMON),
    ('css', CSS),
    ('html', HTML),
    ('js', JS),
    ('jsx', JSX),
    ('ts', TS),
)

ALL_KINDS = frozenset(tag for name, tags in GRAMMARS for tag in tags)

_grammar_by_kind = {tag: name for name, tags in GRAMMARS for tag in tags}


def grammar_of(tag):
    """
    Return the name of the grammar that defines the kind tag, or None if
    the tag is not a known kind.
    """

    return _grammar_by_kind.get(tag)
