# -*- coding: utf-8 -*-
"""
The mapping from node kind tags to the builders responsible for them.

A registry is populated once, then frozen, and only read from while
formatting; a frozen registry may be shared between threads without
locking.
"""

import logging

from calmjs.formatter.exceptions import DuplicateRegistration
from calmjs.formatter.exceptions import RegistryFrozenError

logger = logging.getLogger(__name__)


class Registry(object):
    """
    Storage and lookup for the builders.

    A builder is a callable that accepts three arguments

    node
        the node to build; its kind is the tag the builder was
        registered under.
    context
        a PrintContext instance.
    build
        the callable to use for building the child nodes, which accepts
        the child node and its context.

    and returns exactly one document fragment.

    Iterating over a registry yields the (tag, builder) pairs in the
    order they were registered, so dict(registry) produces a copy of
    the table.
    """

    def __init__(self):
        self.__builders = {}
        self.__frozen = False

    def register(self, tag, builder):
        """
        Register the builder for the kind tag.  A tag can only be
        registered once, and only before the registry is frozen.
        """

        if not isinstance(tag, str) or not tag:
            raise TypeError(
                'node kind tag must be a non-empty string (got: %r)' % (tag,))
        if not callable(builder):
            raise TypeError(
                "builder for '%s' is not callable (got: %r)" % (tag, builder))
        if tag in self.__builders:
            raise DuplicateRegistration(tag)
        if self.__frozen:
            raise RegistryFrozenError(tag)
        self.__builders[tag] = builder

    def register_all(self, builders):
        """
        Register every (tag, builder) item in the provided mapping, or
        every pair in the provided sequence of pairs.
        """

        items = builders.items() if hasattr(builders, 'items') else builders
        for tag, builder in items:
            self.register(tag, builder)

    def lookup(self, tag):
        """
        Return the builder registered for the tag, or NotImplemented if
        there is none.
        """

        return self.__builders.get(tag, NotImplemented)

    def freeze(self):
        if not self.__frozen:
            self.__frozen = True
            logger.debug(
                "registry %#x frozen with %d builders",
                id(self), len(self.__builders),
            )

    @property
    def frozen(self):
        return self.__frozen

    def tags(self):
        return frozenset(self.__builders)

    def __contains__(self, tag):
        return tag in self.__builders

    def __len__(self):
        return len(self.__builders)

    def __iter__(self):
        for item in list(self.__builders.items()):
            yield item

    def __repr__(self):
        return '<%s builders=%d%s>' % (
            type(self).__name__, len(self.__builders),
            ' frozen' if self.__frozen else '',
        )
