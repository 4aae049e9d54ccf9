#!/usr/bin/env python
# encoding: utf-8
"""Tests for the path, stream and text entry points."""

from io import BytesIO, StringIO
from os import remove
from os.path import join
from tempfile import mkdtemp, mkstemp
import os
import unittest
import saxplist as sp


SAMPLE = sp.XML_HEAD + '''<dict>
\t<key>name</key>
\t<string>sample</string>
\t<key>sizes</key>
\t<array>
\t\t<integer>1</integer>
\t\t<integer>2</integer>
\t</array>
</dict>
''' + sp.XML_FOOT

EXPECTED = sp.Dict(name=sp.String('sample'),
                   sizes=sp.Array([sp.Integer(1), sp.Integer(2)]))


class PublicTests(unittest.TestCase):

    def setUp(self):
        handle, self.path = mkstemp(suffix='.plist')
        with os.fdopen(handle, 'w', encoding='utf-8') as file_object:
            file_object.write(SAMPLE)

    def tearDown(self):
        remove(self.path)

    def test_decode_from_path(self):
        self.assertEqual(sp.decode_from_path(self.path), EXPECTED)

    def test_decode_from_missing_path(self):
        missing = join(mkdtemp(), 'missing.plist')
        with self.assertRaises(sp.PlistNotFoundError) as context:
            sp.decode_from_path(missing)
        self.assertIsInstance(context.exception, FileNotFoundError)
        self.assertIsInstance(context.exception, sp.PlistError)
        self.assertEqual(context.exception.filename, missing)

    def test_decode_from_binary_stream(self):
        stream = BytesIO(SAMPLE.encode('utf-8'))
        self.assertEqual(sp.decode_from_stream(stream), EXPECTED)

    def test_decode_from_text_stream(self):
        self.assertEqual(sp.decode_from_stream(StringIO(SAMPLE)), EXPECTED)

    def test_decode_from_text(self):
        self.assertEqual(sp.decode_from_text(SAMPLE), EXPECTED)

    def test_written_sample(self):
        self.assertEqual(sp.encode_generic(EXPECTED), SAMPLE)

    def test_parse_aliases(self):
        self.assertEqual(sp.parse_plist(SAMPLE), EXPECTED)
        self.assertEqual(sp.parse_plist_fh(StringIO(SAMPLE)), EXPECTED)
        self.assertEqual(sp.parse_plist_file(self.path), EXPECTED)
        with open(self.path, 'rb') as file_object:
            self.assertEqual(sp.parse_plist_file(file_object), EXPECTED)

    def test_load_and_loads(self):
        self.assertEqual(sp.loads(SAMPLE), EXPECTED)
        self.assertEqual(sp.readPlistFromString(SAMPLE), EXPECTED)
        with open(self.path) as file_object:
            self.assertEqual(sp.load(file_object), EXPECTED)

    def test_dump_text_and_binary(self):
        text_file = StringIO()
        sp.dump(EXPECTED, text_file)
        self.assertEqual(text_file.getvalue(), SAMPLE)
        binary_file = BytesIO()
        sp.dump(EXPECTED, binary_file)
        self.assertEqual(binary_file.getvalue(), SAMPLE.encode('utf-8'))

    def test_write_and_read_plist(self):
        value = {'1': [sp.Integer(2)], '3': sp.Boolean(False)}
        sp.writePlist(value, self.path)
        result = sp.readPlist(self.path)
        self.assertEqual(result, value)
        with open(self.path, 'rb') as file_object:
            self.assertEqual(sp.readPlist(file_object), value)

    def test_read_plist_bytes_path(self):
        self.assertEqual(sp.readPlist(os.fsencode(self.path)), EXPECTED)

    def test_write_plist_to_file(self):
        buffer_ = BytesIO()
        sp.writePlist(sp.String('ok'), buffer_)
        buffer_.seek(0)
        self.assertEqual(sp.readPlist(buffer_), sp.String('ok'))

    def test_root_keyword(self):
        text = '<root><string>x</string></root>'
        self.assertEqual(sp.decode_from_text(text, root='root'),
                         sp.String('x'))
        self.assertEqual(sp.decode_from_stream(StringIO(text), root='root'),
                         sp.String('x'))


def suite():
    return unittest.TestLoader().loadTestsFromTestCase(PublicTests)


if __name__ == '__main__':
    unittest.main()
