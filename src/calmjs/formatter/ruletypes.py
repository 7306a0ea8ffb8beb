# -*- coding: utf-8 -*-
"""
Rule types are used for describing how a given kind of node is turned
into a document fragment.

A description (a definition) is a tuple of rules.  Layout rules are
given as the classes themselves; Token rules must be instantiated.  A
Definition compiles such a tuple into a builder that can be placed into
a registry.
"""

from copy import copy

from calmjs.formatter import document
from calmjs.formatter.asttypes import kindof

# a quoted script string may not contain any of these unescaped.
line_terminator_escapes = (
    ('\n', '\\n'),
    ('\r', '\\r'),
    ('\u2028', '\\u2028'),
    ('\u2029', '\\u2029'),
)


def is_empty(value):
    """
    Report whether an attribute value counts as missing: None, False or
    an empty string or sequence.  Zero is a value.
    """

    return value is None or value is False or (
        isinstance(value, (str, tuple, list)) and not value)


def resolve(value, node, context, build):
    """
    Produce a fragment for an attribute value of node.  Child nodes are
    built through the provided build callable.
    """

    if is_empty(value):
        return document.empty
    if kindof(value) is not None:
        return build(value, context.descend(node, value))
    if document.is_fragment(value):
        return value
    if isinstance(value, str):
        return document.text(value)
    if isinstance(value, (tuple, list)):
        return document.concat(*(
            resolve(item, node, context, build) for item in value))
    raise TypeError(
        "cannot produce a fragment from %r inside '%s'" % (
            value, kindof(node)))


def run(rules, node, context, build):
    """
    Apply the rules on the node, returning the concatenated fragment.
    """

    return document.concat(*(
        rule.fragment if isinstance(rule, type) else rule(
            node, context, build)
        for rule in rules
    ))


class Rule(object):
    """
    The base type.
    """


class Layout(Rule):
    """
    Layout rules stand for a fixed fragment.  They are used directly as
    types inside a definition, without being instantiated.
    """

    fragment = document.empty


class Space(Layout):
    """
    A single space.
    """

    fragment = document.space


class Line(Layout):
    """
    A line break, or a space if the enclosing group fits.
    """

    fragment = document.line


class SoftLine(Layout):
    """
    A line break, or nothing if the enclosing group fits.
    """

    fragment = document.softline


class HardLine(Layout):
    """
    A line break, always.
    """

    fragment = document.hardline


class Token(Rule):
    """
    Token rules are callable rules that produce the fragment for some
    part of the given node, using the build function for any child
    nodes they reach.
    """

    def __init__(self, attr=None, value=None):
        """
        Arguments

        attr
            Should reference some attribute of the referenced node
        value
            Some value that will be assigned to this token for use in
            the production of the fragment; for tokens that nest, a
            tuple of rules.
        """

        self.attr = attr
        self.value = value

    def evolve(self, value):
        """
        Return a copy of this token with a different value.
        """

        result = copy(self)
        result.value = value
        return result

    def _getattr(self, node):
        if not isinstance(self.attr, tuple):
            return getattr(node, self.attr, None)
        # a tuple of attributes is read as one sequence, in order.
        values = []
        for attr in self.attr:
            value = getattr(node, attr, None)
            if isinstance(value, (tuple, list)):
                values.extend(value)
            elif value is not None:
                values.append(value)
        return tuple(values)

    def __call__(self, node, context, build):
        """
        Arguments

        node
            the node being built.
        context
            the PrintContext for the node.
        build
            the build function for child nodes.
        """

        raise NotImplementedError

    def __repr__(self):
        return '%s(attr=%r, value=%r)' % (
            type(self).__name__, self.attr, self.value)


class Attr(Token):
    """
    Build the value held by the attribute.
    """

    def __call__(self, node, context, build):
        return resolve(self._getattr(node), node, context, build)


class Text(Token):
    """
    Produce the value as literal text.
    """

    def __call__(self, node, context, build):
        return document.text(self.value)


class Operator(Attr):
    """
    An operator symbol, either read from the attribute or given as the
    value.
    """

    def __call__(self, node, context, build):
        if self.attr:
            return document.text(self._getattr(node))
        return document.text(self.value)


class JoinAttr(Attr):
    """
    Join the nodes held by the attribute with value, a tuple of rules.
    """

    def __call__(self, node, context, build):
        items = self._getattr(node) or ()
        if not items:
            return document.empty
        separator = run(self.value or (), node, context, build)
        return document.join(separator, [
            resolve(item, node, context, build) for item in items])


class Optional(Token):
    """
    Apply value, a tuple of rules, only if the attribute is not empty.
    """

    def __call__(self, node, context, build):
        if is_empty(self._getattr(node)):
            return document.empty
        return run(self.value, node, context, build)


class Absent(Token):
    """
    Apply value, a tuple of rules, only if the attribute is empty; the
    reverse of Optional.
    """

    def __call__(self, node, context, build):
        if not is_empty(self._getattr(node)):
            return document.empty
        return run(self.value, node, context, build)


class Flag(Token):
    """
    Apply value, a tuple of rules, only if the attribute is true.
    """

    def __call__(self, node, context, build):
        if not self._getattr(node):
            return document.empty
        return run(self.value, node, context, build)


class Literal(Attr):
    """
    Render a scalar attribute the way script source writes it.
    """

    def __init__(self, attr='value', value=None):
        super(Literal, self).__init__(attr=attr, value=value)

    def __call__(self, node, context, build):
        value = self._getattr(node)
        if isinstance(value, bool):
            return document.text('true' if value else 'false')
        if value is None:
            return document.text('null')
        if isinstance(value, (int, float)):
            return document.text(repr(value))
        return document.text(value)


class Quoted(Attr):
    """
    Render a string attribute as a quoted string, using the quote
    character from the options in the context.  Backslashes, the quote
    and the line terminators are escaped.  For markup attribute values
    (jsx=True) no escaping is done beyond the quote itself.
    """

    def __init__(self, attr='value', value=None, jsx=False):
        super(Quoted, self).__init__(attr=attr, value=value)
        self.jsx = jsx

    def __call__(self, node, context, build):
        value = self._getattr(node) or ''
        if self.jsx:
            quote = context.options.jsx_quote
            value = value.replace(
                quote, '&quot;' if quote == '"' else '&apos;')
        else:
            quote = context.options.quote
            value = value.replace('\\', '\\\\').replace(quote, '\\' + quote)
            for char, escaped in line_terminator_escapes:
                value = value.replace(char, escaped)
        return document.text(quote + value + quote)


class Group(Token):
    """
    Group the fragment produced by value, a tuple of rules.
    """

    def __init__(self, attr=None, value=(), should_break=False):
        super(Group, self).__init__(attr=attr, value=value)
        self.should_break = should_break

    def __call__(self, node, context, build):
        return document.Group(
            run(self.value, node, context, build), bool(self.should_break))


class Indent(Token):
    """
    Indent the fragment produced by value, a tuple of rules.
    """

    def __init__(self, attr=None, value=()):
        super(Indent, self).__init__(attr=attr, value=value)

    def __call__(self, node, context, build):
        return document.Indent(run(self.value, node, context, build))


class Comments(Token):
    """
    Build the comments attached to the node (as carried by the context),
    each followed by a hard line break.
    """

    def __call__(self, node, context, build):
        return document.concat(*(
            document.concat(
                build(comment, context.descend(node, comment)),
                document.hardline,
            )
            for comment in context.comments
        ))


def compile_rules(name, rules):
    """
    Validate the rules of a definition, returning them as a tuple with
    nested rule tuples validated also.
    """

    compiled = []
    for rule in rules:
        if isinstance(rule, type) and issubclass(rule, Layout):
            compiled.append(rule)
            continue
        if isinstance(rule, Token):
            if isinstance(rule.value, tuple):
                rule = rule.evolve(compile_rules(name, rule.value))
            compiled.append(rule)
            continue
        raise TypeError(
            "definition for '%s' contain unsupported rule (got: %r)" % (
                name, rule))
    return tuple(compiled)


class Definition(object):
    """
    A builder produced from a tuple of rules.

    name
        The kind tag the definition is written for.
    rules
        The tuple of rules.
    leading_comments
        If True (the default), the comments attached to the node are
        built ahead of the rules.
    """

    def __init__(self, name, rules, leading_comments=True):
        self.name = name
        self.rules = tuple(rules)
        prefix = (Comments(),) if leading_comments else ()
        self.__compiled = compile_rules(name, prefix + self.rules)

    def __call__(self, node, context, build):
        return run(self.__compiled, node, context, build)

    def __repr__(self):
        return '<%s for %r>' % (type(self).__name__, self.name)


def comma_separated(attr):
    return JoinAttr(attr, value=(Text(value=','), Line))


def hardline_separated(attr):
    return JoinAttr(attr, value=(HardLine,))


def space_separated(attr):
    return JoinAttr(attr, value=(Space,))
