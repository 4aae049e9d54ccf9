# encoding: utf-8
from collections import namedtuple
from collections.abc import Mapping, Sequence
from logging import getLogger
from xml.sax.handler import ContentHandler

from .errors import InvalidElementError, UnrecognizedTopLevelTypeError
from .functions import EMPTY, TOP, FREE, DICT, ARRAY
from .functions import indent_lines, update_struct
from .types import COMPLEX_TYPES, INDENT, TYPES, Dict, Array, Scalar, String

log = getLogger(__name__)

KEY = 'key'
DATA = 'data'

# a suspended parent container, waiting for its child to close
Frame = namedtuple('Frame', ('context', 'struct', 'key'))


class PlistHandler(ContentHandler):
    '''
    A sax content handler that rebuilds the value tree of a plist from the
    parser's element and character events. Nested containers are tracked on
    an explicit stack of frames. After the parse the root value is in
    .struct.

    One handler serves one parse at a time.
    '''
    def __init__(self, root='plist'):
        ContentHandler.__init__(self)
        self.root = root
        self.complex_types = COMPLEX_TYPES
        self.simple_types = TYPES
        self.reset()

    def reset(self):
        self.accum = []
        self.context = EMPTY
        self.key = None
        self.stack = []
        self.struct = None

    def startDocument(self):
        log.debug('Decoding plist with root element <%s>', self.root)
        self.reset()

    def endDocument(self):
        log.debug('Decoded plist, root value is %s',
                  type(self.struct).__name__)

    def startElement(self, name, attrs):
        if self.context == EMPTY:
            if name != self.root:
                raise InvalidElementError(
                    'Expected root element %s, got %s' % (self.root, name))
            self.context = TOP
        elif self.context == TOP:
            self.stack.append(Frame(TOP, None, None))
            if name in self.complex_types:
                self.start_struct(name)
            elif name in self.simple_types:
                self.context = FREE
            else:
                raise UnrecognizedTopLevelTypeError(
                    'Top-level element in plist is not a recognized type: '
                    '%s' % name)
        elif name in self.complex_types:
            self.stack.append(Frame(self.context, self.struct, self.key))
            self.start_struct(name)
        elif name != KEY and name not in self.simple_types:
            raise InvalidElementError(
                'Received invalid start element %s' % name)

    def start_struct(self, name):
        log.debug('Opening %s at depth %d', name, len(self.stack))
        self.struct = self.complex_types[name]()
        if name == Dict.tag:
            self.context = DICT
            self.key = None
        else:
            self.context = ARRAY

    def characters(self, content):
        self.accum.append(content)

    def endElement(self, name):
        if name == self.root:
            return
        text = ''.join(self.accum)
        self.accum = []
        if name == KEY:
            self.key = text.strip()
        elif name in self.complex_types:
            self.end_struct()
        else:
            # base64 decoding skips the surrounding whitespace by itself
            if name != DATA:
                text = text.strip()
            value = self.simple_types[name](text)
            self.struct = update_struct(self.context, self.struct,
                                        self.key, value)

    def end_struct(self):
        frame = self.stack.pop()
        log.debug('Closing %s at depth %d',
                  type(self.struct).__name__, len(self.stack))
        if frame.context == TOP:
            return
        finished = self.struct
        self.context, self.struct, self.key = frame
        self.struct = update_struct(self.context, self.struct, self.key,
                                    finished)
        self.key = None


class PlistWriter(object):
    '''
    Serialize a value to a list of plist xml lines. Typed values write
    themselves, mappings become dicts, other sequences become arrays and
    every other object is written as a string.

    There is no cycle detection; a structure that contains itself recurses
    until RecursionError.
    '''
    def __init__(self, indent=INDENT):
        self.indent = indent

    def encode(self, object_):
        if isinstance(object_, Scalar):
            return [object_.write()]
        if isinstance(object_, Mapping):
            return self.encode_dictionary(object_)
        if (isinstance(object_, Sequence) and
            not isinstance(object_, (str, bytes, bytearray))):
            return self.encode_array(object_)
        return [String(object_).write()]

    def encode_dictionary(self, dictionary):
        lines = []
        for key, value in dictionary.items():
            lines.append(Dict.write_key(key))
            lines.extend(self.encode(value))
        return self.wrap(Dict, lines)

    def encode_array(self, array):
        lines = []
        for item in array:
            lines.extend(self.encode(item))
        return self.wrap(Array, lines)

    def wrap(self, container, lines):
        '''Indent lines one level and put them inside container's tags.'''
        wrapped = [container.write_open()]
        wrapped.extend(indent_lines(lines, self.indent))
        wrapped.append(container.write_close())
        return wrapped
