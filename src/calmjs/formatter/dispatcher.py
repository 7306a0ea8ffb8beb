# -*- coding: utf-8 -*-
"""
Routing of a node to the builder registered for its kind.
"""

from calmjs.formatter.asttypes import kindof
from calmjs.formatter.exceptions import UnknownNodeKind


class Dispatcher(object):
    """
    Turn a node into a document fragment by invoking the builder that
    the registry has for the kind of the node.

    The dispatcher does nothing beyond the lookup and the call; all the
    formatting decisions are made by the builders.  The registry is
    frozen when the dispatcher is created, so that lookups made while
    formatting always see the same table.

    Builders receive the build method of this dispatcher as their third
    argument and call it for each child they want formatted, so the
    recursion is exactly as deep as the tree, which is bound by the
    interpreter recursion limit.
    """

    def __init__(self, registry):
        registry.freeze()
        self.__registry = registry

    @property
    def registry(self):
        return self.__registry

    def lookup(self, node):
        """
        Return the builder for the node, or raise UnknownNodeKind.
        """

        tag = kindof(node)
        builder = NotImplemented if tag is None else self.__registry.lookup(
            tag)
        if builder is NotImplemented:
            raise UnknownNodeKind(tag, getattr(node, 'loc', None))
        return builder

    def build(self, node, context):
        """
        Build the document fragment for the node with the context.
        """

        return self.lookup(node)(node, context, self.build)

    __call__ = build
