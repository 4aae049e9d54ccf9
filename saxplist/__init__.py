# encoding: utf-8
"""
saxplist: Read and write xml .plist files through a sax parser.

Reading hands the xml to a sax parser and rebuilds the plist from its
element events, keeping every value typed. To read a plist use one of:

    decode_from_path(path)
    decode_from_stream(file_object)
    decode_from_text(text)

These return the root value: a Dict, an Array, or a single leaf such as
String or Integer. Leaves keep their python value in .value, and
as_native(root) turns a whole tree into builtin types.

To write a plist use:

    encode_generic(root_object)

root_object may be a tree of plist types, or plain dicts, lists and
scalars. Anything that is not a plist type, mapping or sequence is written
as a string, so {'a': 1} becomes a dict holding the string "1".

The plistlib style functions load, loads, dump, dumps, readPlist,
readPlistFromString, writePlist and writePlistToString are also provided.


Known issues:
Leading and trailing whitespace is stripped from every string. Entities in
the source text are decoded by the parser and written back escaped, so the
text of a document read and written again may differ from the original.
If a dict repeats a key, the last value wins.
"""


from .public import decode_from_path, decode_from_stream, decode_from_text
from .public import encode_generic
from .public import parse_plist, parse_plist_fh, parse_plist_file
from .public import create_from_ref, create_from_hash, create_from_array
from .public import plist_as_string
from .public import readPlist, readPlistFromString
from .public import writePlist, writePlistToString
from .public import dump, dumps, load, loads
from .types import String, Integer, Real, Boolean, Date, Data, Array, Dict
from .types import XML_HEAD, XML_FOOT, as_native
from .classes import PlistHandler, PlistWriter
from .errors import PlistError, PlistNotFoundError, PlistStructureError
from .errors import UnrecognizedTopLevelTypeError, InvalidElementError
from .errors import InvalidValueError


__all__ = ['decode_from_path', 'decode_from_stream', 'decode_from_text',
           'encode_generic',
           'parse_plist', 'parse_plist_fh', 'parse_plist_file',
           'create_from_ref', 'create_from_hash', 'create_from_array',
           'plist_as_string',
           'readPlist', 'readPlistFromString',
           'writePlist', 'writePlistToString',
           'dump', 'dumps', 'load', 'loads',
           'String', 'Integer', 'Real', 'Boolean', 'Date', 'Data',
           'Array', 'Dict', 'XML_HEAD', 'XML_FOOT', 'as_native',
           'PlistHandler', 'PlistWriter',
           'PlistError', 'PlistNotFoundError', 'PlistStructureError',
           'UnrecognizedTopLevelTypeError', 'InvalidElementError',
           'InvalidValueError']

__packages__ = ['saxplist']
__version__ = '0.1'
__description__ = 'Read and write xml .plist files with a sax parser.'
__license__ = 'BSD'
__platforms__ = 'any'
__classifiers__ = [
  'Development Status :: 4 - Beta',
  'Intended Audience :: Developers',
  'License :: OSI Approved :: BSD License',
  'Operating System :: OS Independent',
  'Programming Language :: Python',
  'Programming Language :: Python :: 3',
  'Topic :: Software Development :: Libraries :: Python Modules',
  'Topic :: Text Processing :: Markup :: XML',
]
