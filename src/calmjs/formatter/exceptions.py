# -*- coding: utf-8 -*-
"""
Exceptions raised by the registry and the dispatcher.

None of these are meant to be recovered from; they signal a mismatch
between the node kinds a parser may produce and the builders that were
registered for them.
"""


class FormatterError(Exception):
    """
    Base class for all errors raised by this package.
    """


class RegistrationError(FormatterError):
    """
    An authoring defect detected while populating a registry.
    """


class DuplicateRegistration(RegistrationError):
    """
    A second builder was registered for a node kind that already has
    one.
    """

    def __init__(self, tag):
        self.tag = tag
        super(DuplicateRegistration, self).__init__(
            "a builder is already registered for node kind %r" % (tag,))


class RegistryFrozenError(RegistrationError):
    """
    Registration was attempted on a registry that has been frozen.
    """

    def __init__(self, tag):
        self.tag = tag
        super(RegistryFrozenError, self).__init__(
            "cannot register node kind %r; registry is frozen" % (tag,))


class RegistryMismatch(RegistrationError):
    """
    The registered node kinds do not match the known node kinds.
    """

    def __init__(self, missing=(), orphaned=()):
        self.missing = tuple(missing)
        self.orphaned = tuple(orphaned)
        details = []
        if self.missing:
            details.append('missing builders for %s' % ', '.join(
                self.missing))
        if self.orphaned:
            details.append('builders registered for unknown kinds %s' % (
                ', '.join(self.orphaned)))
        super(RegistryMismatch, self).__init__('; '.join(details))


class UnknownNodeKind(FormatterError, LookupError):
    """
    No builder is registered for the kind of the node being built.

    This always points to a defect in either the parser or the registry,
    never to an error in the source being formatted.
    """

    def __init__(self, tag, loc=None):
        self.tag = tag
        self.loc = loc
        msg = "no builder registered for node kind %r" % (tag,)
        if loc is not None:
            msg += ' (at %s)' % (loc,)
        super(UnknownNodeKind, self).__init__(msg)
