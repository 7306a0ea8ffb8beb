# -*- coding: utf-8 -*-
"""
Builders for the node kinds shared by every grammar, along with the
element builder used by both markup grammars.
"""

from calmjs.formatter import document
from calmjs.formatter.ruletypes import Comments

leading_comments = Comments()


def comment_block(node, context, build):
    return document.Comment('/*%s*/' % node.value)


def comment_line(node, context, build):
    return document.Comment('//%s' % node.value)


def markup_element(node, context, build):
    """
    Build a markup element, which is expected to provide the fields

    name
        the node for the tag name.
    type_arguments
        optional type arguments (script markup only).
    attributes
        a sequence of attribute nodes.
    children
        a sequence of child nodes.
    self_closing
        whether the element is written as a self closing tag.
    """

    def child(value):
        return build(value, context.descend(node, value))

    name = child(node.name)
    type_arguments = node.get('type_arguments')
    attributes = [child(attr) for attr in node.get('attributes') or ()]
    head = document.concat(
        document.text('<'),
        name,
        child(type_arguments) if type_arguments is not None else None,
        document.indent(*(
            document.concat(document.line, attr) for attr in attributes)),
    )

    if node.get('self_closing'):
        return document.concat(
            leading_comments(node, context, build),
            document.group(
                head,
                document.line if attributes else document.space,
                document.text('/>'),
            ),
        )

    return document.concat(
        leading_comments(node, context, build),
        document.group(
            head,
            document.softline if attributes else None,
            document.text('>'),
        ),
        document.concat(*(
            child(value) for value in node.get('children') or ())),
        document.text('</'),
        name,
        document.text('>'),
    )


definitions = (
    ('CommentBlock', comment_block),
    ('CommentLine', comment_line),
    # only ever stands in as the parent of a detached node.
    ('MockParent', ()),
)
