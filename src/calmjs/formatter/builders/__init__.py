# -*- coding: utf-8 -*-
"""
The builder tables for every grammar, and the functions that place them
into a registry.

Each module listed here provides ``definitions``, a sequence of (tag,
definition) pairs, where the definition is either a tuple of rules
(compiled into a Definition) or a builder function.  A tag listed
twice is rejected by the registry as a DuplicateRegistration.
"""

import logging

from calmjs.formatter.audit import verify
from calmjs.formatter.registry import Registry
from calmjs.formatter.ruletypes import Definition
from calmjs.formatter.builders import common
from calmjs.formatter.builders import css
from calmjs.formatter.builders import html
from calmjs.formatter.builders import js
from calmjs.formatter.builders import jsx
from calmjs.formatter.builders import typescript

logger = logging.getLogger(__name__)

modules = (common, css, html, js, jsx, typescript)


def as_builder(tag, definition):
    if callable(definition):
        return definition
    return Definition(tag, definition)


def populate(registry, modules=modules):
    """
    Register the definitions from each of the modules into the registry,
    in the order given.
    """

    for module in modules:
        for tag, definition in module.definitions:
            registry.register(tag, as_builder(tag, definition))
        logger.debug(
            "registered %d builders from '%s'",
            len(module.definitions), module.__name__,
        )
    return registry


def create_registry(audit=True):
    """
    Create a new, frozen registry holding every builder.

    audit
        If True (the default), verify that the registered kinds are
        exactly the known kinds before freezing; a RegistryMismatch is
        raised otherwise.
    """

    registry = populate(Registry())
    if audit:
        verify(registry)
    registry.freeze()
    return registry
