# encoding: utf-8
"""This file contains the public functions for the module saxplist."""

from errno import ENOENT
from io import TextIOBase
from logging import getLogger
from os import PathLike
from os.path import exists

from .errors import PlistNotFoundError
from .readwrite import read, write

log = getLogger(__name__)


#########
## API ##
#########


def decode_from_text(text, root='plist'):
    '''Decode plist xml in a str or bytes object. Return the root value.'''
    return read(text, root)


def decode_from_stream(stream, root='plist'):
    '''
    Read everything from stream, which may be opened in text or binary
    mode, and decode it. Return the root value.
    '''
    return read(stream.read(), root)


def decode_from_path(path, root='plist'):
    '''
    Decode the plist file at path and return the root value. Raise
    PlistNotFoundError if there is no such file.
    '''
    if not exists(path):
        raise PlistNotFoundError(ENOENT, 'No such plist file', path)
    log.debug('Reading plist from %s', path)
    with open(path, 'rb') as file_object:
        return decode_from_stream(file_object, root)


def encode_generic(root_object):
    '''
    Return root_object as a plist xml document. root_object may be a tree of
    plist types or any nesting of mappings, sequences and scalars; scalars
    that are not plist types are written as strings.
    '''
    return write(root_object)


def dump(root_object, fp):
    text = encode_generic(root_object)
    if isinstance(fp, TextIOBase):
        fp.write(text)
    else:
        fp.write(text.encode('utf-8'))


def dumps(root_object):
    return encode_generic(root_object)


def load(fp, root='plist'):
    return decode_from_stream(fp, root)


def loads(s, root='plist'):
    return decode_from_text(s, root)


def parse_plist_file(path_or_file, root='plist'):
    '''Decode from an open file, or from a path if given one.'''
    if hasattr(path_or_file, 'read'):
        return decode_from_stream(path_or_file, root)
    return decode_from_path(path_or_file, root)


parse_plist = decode_from_text
parse_plist_fh = decode_from_stream

create_from_ref = encode_generic
create_from_hash = encode_generic
create_from_array = encode_generic
plist_as_string = encode_generic


################
## Legacy API ##
################


def readPlist(path_or_file, root='plist'):
    """
    Read a plist from path_or_file, which is either a path or an open file.
    Return the root object.
    """
    if isinstance(path_or_file, (str, bytes, PathLike)):
        return decode_from_path(path_or_file, root)
    return load(path_or_file, root)


def writePlist(root_object, path_or_file):
    """
    Write root_object to path_or_file, which is either a path or an open
    file.
    """
    if isinstance(path_or_file, (str, PathLike)):
        log.debug('Writing plist to %s', path_or_file)
        with open(path_or_file, 'w', encoding='utf-8') as file_object:
            dump(root_object, file_object)
    else:
        dump(root_object, path_or_file)


writePlistToString = dumps
readPlistFromString = loads
