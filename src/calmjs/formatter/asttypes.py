# -*- coding: utf-8 -*-
"""
The node type shared by every grammar.

Unlike a class per node kind, a single Node type carries its kind as a
plain string tag, so that the script, typed script, markup and
stylesheet grammars can all live in the same tree.
"""

from collections import namedtuple

Position = namedtuple('Position', ['line', 'column'])


class SourceLocation(namedtuple('SourceLocation', [
        'filename', 'start', 'end'])):
    """
    The span of source text that produced a node.  The start and end
    are Position instances; end may be None.
    """

    def __new__(cls, filename=None, start=None, end=None):
        return super(SourceLocation, cls).__new__(cls, filename, start, end)

    def __str__(self):
        if self.start is None:
            return self.filename or '?'
        return '%s:%d:%d' % (
            self.filename or '?', self.start.line, self.start.column)


def kindof(obj):
    """
    Return the kind tag of the object, or None if it does not carry a
    string tag under its ``type`` attribute.
    """

    tag = getattr(obj, 'type', None)
    return tag if isinstance(tag, str) else None


def _freeze(value):
    if isinstance(value, list):
        return tuple(value)
    return value


class Node(object):
    """
    A node of the tree.

    type
        The kind tag, e.g. 'JSBinaryExpression'.
    loc
        An optional SourceLocation.
    fields
        The kind specific fields, given as keyword arguments.  Lists
        are stored as tuples.

    Nodes cannot be modified after construction.
    """

    __slots__ = ('_type', '_loc', '_fields')

    def __init__(self, type, loc=None, **fields):
        if not isinstance(type, str) or not type:
            raise TypeError('node type must be a non-empty string')
        object.__setattr__(self, '_type', type)
        object.__setattr__(self, '_loc', loc)
        object.__setattr__(self, '_fields', {
            key: _freeze(value) for key, value in fields.items()})

    @property
    def type(self):
        return self._type

    @property
    def loc(self):
        return self._loc

    @property
    def fields(self):
        return tuple(self._fields)

    def get(self, name, default=None):
        return self._fields.get(name, default)

    def __getattr__(self, name):
        # only invoked for names that are not slots or properties.
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            return self._fields[name]
        except KeyError:
            raise AttributeError(
                "'%s' node has no field '%s'" % (self._type, name))

    def __setattr__(self, name, value):
        raise AttributeError("'%s' node is immutable" % self._type)

    def __delattr__(self, name):
        raise AttributeError("'%s' node is immutable" % self._type)

    def __iter__(self):
        for value in self._fields.values():
            if isinstance(value, Node):
                yield value
            elif isinstance(value, tuple):
                for item in value:
                    if isinstance(item, Node):
                        yield item

    def __repr__(self):
        pos = ''
        if self._loc is not None and self._loc.start is not None:
            pos = ' @%d:%d' % (self._loc.start.line, self._loc.start.column)
        fields = ''.join(
            ' %s=%r' % (key, value) for key, value in self._fields.items())
        return '<%s%s%s>' % (self._type, pos, fields)
