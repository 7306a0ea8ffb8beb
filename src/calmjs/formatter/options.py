# -*- coding: utf-8 -*-
"""
Formatting options that are threaded through every build call by way of
the print context.
"""

_defaults = (
    ('indent_str', '  '),
    ('newline_str', '\n'),
    ('line_width', 80),
    ('quote', '"'),
    ('jsx_quote', '"'),
)

_quotes = ('"', "'")


class FormatOptions(object):
    """
    A read-only bundle of formatting options.  Accepted keywords:

    indent_str
        The string used to indent a line with.  Default is '  '.
    newline_str
        The string used for rendering a new line with.  Default is
        <LF> (line-feed, or '\\n').
    line_width
        The preferred maximum width of a line.  Default is 80.
    quote
        The quote character for string literals.  Default is '"'.
    jsx_quote
        The quote character for markup attribute values.  Default is
        '"'.
    """

    __slots__ = ('__values',)

    def __init__(self, **kw):
        unknown = set(kw) - set(key for key, _ in _defaults)
        if unknown:
            raise TypeError('unknown format option(s): %s' % ', '.join(
                sorted(unknown)))

        values = dict(_defaults)
        values.update(kw)

        width = values['line_width']
        if isinstance(width, bool) or not isinstance(width, int) or width < 1:
            raise ValueError(
                'line_width must be a positive integer (got: %r)' % (
                    values['line_width'],))
        for key in ('quote', 'jsx_quote'):
            if values[key] not in _quotes:
                raise ValueError('%s must be one of %s (got: %r)' % (
                    key, ' or '.join(repr(q) for q in _quotes), values[key]))
        for key in ('indent_str', 'newline_str'):
            if not isinstance(values[key], str):
                raise ValueError('%s must be a string (got: %r)' % (
                    key, values[key]))

        self.__values = values

    @classmethod
    def from_mapping(cls, mapping):
        return cls(**dict(mapping))

    def replace(self, **kw):
        values = self.as_dict()
        values.update(kw)
        return type(self)(**values)

    def as_dict(self):
        return dict(self.__values)

    @property
    def indent_str(self):
        return self.__values['indent_str']

    @property
    def newline_str(self):
        return self.__values['newline_str']

    @property
    def line_width(self):
        return self.__values['line_width']

    @property
    def quote(self):
        return self.__values['quote']

    @property
    def jsx_quote(self):
        return self.__values['jsx_quote']

    def __eq__(self, other):
        if not isinstance(other, FormatOptions):
            return NotImplemented
        return self.__values == other.__values

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None

    def __repr__(self):
        return '%s(%s)' % (type(self).__name__, ', '.join(
            '%s=%r' % (key, self.__values[key]) for key, _ in _defaults))


default_options = FormatOptions()
