# -*- coding: utf-8 -*-
"""
Document fragments produced by builders.

These only describe the intended layout; the actual line fitting is
left to whatever printer consumes them.  Fragments are immutable and
compare by their type and contents.

>>> concat(text('a'), space, text('b'))
Concat(parts=(Text(value='a'), Text(value=' '), Text(value='b')))
>>> join(text(','), [text('a'), text('b')]) == concat(
...     text('a'), text(','), text('b'))
True
"""


class Fragment(object):
    """
    The base type.
    """

    __slots__ = ()
    _fields = ()

    def __init__(self, *values):
        if len(values) != len(self._fields):
            raise TypeError('%s takes %d argument(s) (%d given)' % (
                type(self).__name__, len(self._fields), len(values)))
        for name, value in zip(self._fields, values):
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError('fragments are immutable')

    def _values(self):
        return tuple(getattr(self, name) for name in self._fields)

    def __eq__(self, other):
        return type(self) is type(other) and self._values() == other._values()

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__,) + self._values())

    def __repr__(self):
        return '%s(%s)' % (type(self).__name__, ', '.join(
            '%s=%r' % (name, getattr(self, name)) for name in self._fields))


class Text(Fragment):
    """
    Literal text; must not contain line breaks.
    """

    __slots__ = _fields = ('value',)


class Comment(Fragment):
    """
    The verbatim text of a comment.
    """

    __slots__ = _fields = ('value',)


class Concat(Fragment):
    """
    A sequence of fragments.
    """

    __slots__ = _fields = ('parts',)


class Group(Fragment):
    """
    Contents that the printer should try to fit on a single line.
    """

    __slots__ = _fields = ('contents', 'should_break')


class Indent(Fragment):
    """
    Contents whose line breaks are followed by one more indentation
    level.
    """

    __slots__ = _fields = ('contents',)


class Line(Fragment):
    """
    A potential line break.  The mode is one of:

    line
        break if the enclosing group does not fit, otherwise a space.
    soft
        break if the enclosing group does not fit, otherwise nothing.
    hard
        always break.
    """

    __slots__ = _fields = ('mode',)

    modes = ('line', 'soft', 'hard')

    def __init__(self, mode):
        if mode not in self.modes:
            raise ValueError('unsupported line mode %r' % (mode,))
        super(Line, self).__init__(mode)


empty = Concat(())
space = Text(' ')
line = Line('line')
softline = Line('soft')
hardline = Line('hard')


def is_fragment(value):
    return isinstance(value, Fragment)


def text(value):
    return Text(value)


def concat(*parts):
    """
    Concatenate the fragments, dropping None and empty ones.
    """

    return Concat(tuple(
        part for part in parts if part is not None and part != empty))


def group(*parts, **kw):
    should_break = kw.pop('should_break', False)
    if kw:
        raise TypeError('unexpected keyword argument(s): %s' % ', '.join(
            sorted(kw)))
    return Group(concat(*parts), bool(should_break))


def indent(*parts):
    return Indent(concat(*parts))


def join(separator, parts):
    """
    Place the separator between each of the fragments.
    """

    result = []
    for idx, part in enumerate(parts):
        if idx:
            result.append(separator)
        result.append(part)
    return concat(*result)
