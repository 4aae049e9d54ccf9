# encoding: utf-8
'''This file contains private read/write functions for the saxplist module.'''

from io import BytesIO, StringIO
from logging import getLogger
from xml.sax import make_parser
from xml.sax.xmlreader import InputSource

from .classes import PlistHandler, PlistWriter
from .types import XML_FOOT, XML_HEAD

log = getLogger(__name__)


def read(text, root='plist', parser=None):
    '''
    Parse plist xml text (str or bytes) and return the root value. parser
    can be any xml.sax XMLReader; the default comes from make_parser().
    Errors from the parser, like SAXParseException for xml that is not
    well-formed, are not caught.
    '''
    handler = PlistHandler(root)
    if parser is None:
        parser = make_parser()
    parser.setContentHandler(handler)
    parser.parse(get_input_source(text))
    return handler.struct


def get_input_source(text):
    '''Wrap str or bytes in an InputSource the sax parser can read.'''
    input_source = InputSource()
    if isinstance(text, str):
        input_source.setCharacterStream(StringIO(text))
    else:
        input_source.setByteStream(BytesIO(text))
    return input_source


def write(root_object):
    '''Return root_object as a complete plist xml document.'''
    lines = PlistWriter().encode(root_object)
    log.debug('Writing plist document of %d lines', len(lines))
    return ''.join((XML_HEAD, '\n'.join(lines), '\n', XML_FOOT))
