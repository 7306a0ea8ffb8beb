# -*- coding: utf-8 -*-
"""
Base formatter implementation

Brings together the registry, the dispatcher and the print context.
"""

import logging

from calmjs.formatter.builders import create_registry
from calmjs.formatter.context import PrintContext
from calmjs.formatter.dispatcher import Dispatcher
from calmjs.formatter.exceptions import UnknownNodeKind

logger = logging.getLogger(__name__)


class Formatter(object):
    """
    A simple class for gluing together a registry and the Dispatcher to
    turn a tree into a document.
    """

    def __init__(
            self,
            registry=None,
            prewalk_hooks=(),
            dispatcher_cls=Dispatcher):
        """
        Optional arguments

        registry
            The registry of builders; a new one holding every builder is
            created if none is provided.
        prewalk_hooks
            A list of callables that will be called before the build
            starts.  The dispatcher instance and the node that was
            called on will be passed to these callables, and the node
            they return is used in place of the original.
        dispatcher_cls
            The Dispatcher class - defaults to the version from the
            dispatcher module
        """

        if registry is None:
            registry = create_registry()
            logger.debug(
                "'%s' instance created the default registry with %d "
                "builders", self.__class__.__name__, len(registry),
            )
        self.dispatcher = dispatcher_cls(registry)
        self.prewalk_hooks = tuple(prewalk_hooks)

    @property
    def registry(self):
        return self.dispatcher.registry

    def __call__(self, node, options=None):
        """
        Return the document fragment for the node.

        node
            The root node of the tree.
        options
            An optional FormatOptions instance.
        """

        for prewalk_hook in self.prewalk_hooks:
            node = prewalk_hook(self.dispatcher, node)

        context = PrintContext.root(node, options)
        try:
            return self.dispatcher.build(node, context)
        except UnknownNodeKind as e:
            logger.error(
                "internal formatter defect: no builder for node kind %r "
                "(at %s)", e.tag, e.loc if e.loc is not None else 'unknown',
            )
            raise
