# encoding: utf-8
"""
The plist value types. Leaves hold a single python value in .value, the two
containers are list and dict subclasses. Every type knows how to write
itself as plist xml.
"""

from base64 import b64decode, b64encode
from binascii import Error as Base64Error
from datetime import datetime
import re
from xml.sax.saxutils import escape

from .errors import InvalidValueError


XML_HEAD = ('<?xml version="1.0" encoding="UTF-8"?>\n'
            '<!DOCTYPE plist PUBLIC "-//Apple Computer//DTD PLIST 1.0//EN" '
            '"http://www.apple.com/DTDs/PropertyList-1.0.dtd">\n'
            '<plist version="1.0">\n')

XML_FOOT = '</plist>\n'

INDENT = '\t'

DATE_FORMAT = '%Y-%m-%dT%H:%M:%SZ'

# plist integers are signed 64 bit
INTEGER_LIMITS = (-2 ** 63, 2 ** 63 - 1)

# the plain decimal forms plist xml allows, no underscores, nan or inf
INTEGER_RE = re.compile(r'^[+-]?[0-9]+$')
REAL_RE = re.compile(r'^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$')


class Scalar(object):
    """Base class for the leaf types."""
    tag = None

    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        return type(self) == type(other) and self.value == other.value

    def __hash__(self):
        return hash((self.tag, self.value))

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self.value)

    def write_open(self):
        return '<%s>' % self.tag

    def write_body(self):
        return escape(str(self.value))

    def write_close(self):
        return '</%s>' % self.tag

    def write(self):
        '''Return the value as a single plist xml element.'''
        return ''.join((self.write_open(), self.write_body(),
                        self.write_close()))


class String(Scalar):
    tag = 'string'

    def __init__(self, value):
        Scalar.__init__(self, str(value))


class Integer(Scalar):
    tag = 'integer'

    def __init__(self, value):
        if isinstance(value, str) and not INTEGER_RE.match(value):
            raise InvalidValueError('Not an integer: %r' % value)
        try:
            value = int(value)
        except (TypeError, ValueError):
            raise InvalidValueError('Not an integer: %r' % (value,))
        low, high = INTEGER_LIMITS
        if not low <= value <= high:
            raise InvalidValueError('Integer out of range: %d' % value)
        Scalar.__init__(self, value)


class Real(Scalar):
    tag = 'real'

    def __init__(self, value):
        if isinstance(value, str) and not REAL_RE.match(value):
            raise InvalidValueError('Not a real: %r' % value)
        try:
            value = float(value)
        except (TypeError, ValueError):
            raise InvalidValueError('Not a real: %r' % (value,))
        Scalar.__init__(self, value)

    def write_body(self):
        return repr(self.value)


class Boolean(Scalar):
    def __init__(self, value):
        Scalar.__init__(self, bool(value))

    @property
    def tag(self):
        return 'true' if self.value else 'false'

    def write(self):
        return '<%s/>' % self.tag


class Date(Scalar):
    """An ISO 8601 date, kept as the text it was read from."""
    tag = 'date'

    def __init__(self, value):
        Scalar.__init__(self, str(value))

    @classmethod
    def from_datetime(cls, date):
        return cls(date.strftime(DATE_FORMAT))

    def as_datetime(self):
        '''
        Parse the text as a naive UTC datetime. Only the full
        YYYY-MM-DDTHH:MM:SSZ form is accepted.
        '''
        try:
            return datetime.strptime(self.value, DATE_FORMAT)
        except ValueError:
            raise InvalidValueError('Not a plist date: %r' % self.value)


class Data(Scalar):
    """Raw bytes, written out base64 encoded."""
    tag = 'data'

    def __init__(self, value):
        try:
            value = bytes(value)
        except TypeError:
            raise InvalidValueError('Data needs bytes, got %r' % (value,))
        Scalar.__init__(self, value)

    @classmethod
    def from_base64(cls, text):
        # characters outside the base64 alphabet, like line breaks, are
        # discarded
        try:
            return cls(b64decode(text))
        except Base64Error as error:
            raise InvalidValueError('Bad base64 data: %s' % error)

    def write_body(self):
        return b64encode(self.value).decode('ascii')


class Array(list):
    """A plist array. Keeps document order and duplicates."""
    tag = 'array'

    def __repr__(self):
        return 'Array(%s)' % list.__repr__(self)

    @classmethod
    def write_open(cls):
        return '<%s>' % cls.tag

    @classmethod
    def write_close(cls):
        return '</%s>' % cls.tag


class Dict(dict):
    """
    A plist dict. Keys are plain strings and keep their insertion order;
    setting a key twice keeps the last value.
    """
    tag = 'dict'

    def __repr__(self):
        return 'Dict(%s)' % dict.__repr__(self)

    @classmethod
    def write_open(cls):
        return '<%s>' % cls.tag

    @classmethod
    def write_key(cls, key):
        return '<key>%s</key>' % escape(str(key))

    @classmethod
    def write_close(cls):
        return '</%s>' % cls.tag


# element name -> builder taking the accumulated text of the element
TYPES = {
    'string': String,
    'integer': Integer,
    'real': Real,
    'date': Date,
    'data': Data.from_base64,
    'true': lambda text: Boolean(True),
    'false': lambda text: Boolean(False),
}

COMPLEX_TYPES = {
    'array': Array,
    'dict': Dict,
}


def as_native(value):
    '''
    Return value with every plist type replaced by the matching builtin:
    str, int, float, bool, bytes, list and dict. Dates stay as text.
    '''
    if isinstance(value, Scalar):
        return value.value
    if isinstance(value, dict):
        return dict((key, as_native(item)) for key, item in value.items())
    if isinstance(value, list):
        return [as_native(item) for item in value]
    return value
