# -*- coding: utf-8 -*-
"""
The print context handed to every builder.
"""

from calmjs.formatter.asttypes import Node
from calmjs.formatter.options import default_options


def attached_comments(node):
    """
    Return the comment nodes attached to the node as a tuple.
    """

    if not isinstance(node, Node):
        return ()
    return tuple(node.get('comments') or ())


class PrintContext(object):
    """
    The ancestor chain, the comments attached to the node being built
    and the formatting options.

    The dispatcher never looks inside; builders read it and derive the
    context for a child through descend.
    """

    __slots__ = ('__options', '__ancestry', '__comments')

    def __init__(self, options=None, ancestry=(), comments=()):
        self.__options = default_options if options is None else options
        self.__ancestry = tuple(ancestry)
        self.__comments = tuple(comments)

    @classmethod
    def root(cls, node, options=None):
        return cls(options, (), attached_comments(node))

    @property
    def options(self):
        return self.__options

    @property
    def ancestry(self):
        return self.__ancestry

    @property
    def comments(self):
        return self.__comments

    @property
    def parent(self):
        return self.__ancestry[-1] if self.__ancestry else None

    def descend(self, parent, child):
        """
        Return the context for building child, a direct descendant of
        parent.
        """

        return type(self)(
            self.__options,
            self.__ancestry + (parent,),
            attached_comments(child),
        )

    def __repr__(self):
        return '<%s depth=%d comments=%d>' % (
            type(self).__name__, len(self.__ancestry), len(self.__comments))
