"""
test_writer.py  -  text / binary output and reading it back
"""

import io
import unittest

from hack_assembler import (Assembler, BinaryWriter, ConfigError, Format,
                            TextWriter, get_writer, read_words)
from hack_assembler.errors import AsmError


class TestTextWriter(unittest.TestCase):

    def test_zero(self):
        buf = io.StringIO()
        TextWriter().write(buf, 0)
        self.assertEqual(buf.getvalue(), '0' * 16 + '\n')

    def test_msb_first(self):
        self.assertEqual(TextWriter.render(0x8001), '1000000000000001')

    def test_one_line_per_word(self):
        buf = io.StringIO()
        n = TextWriter().write_all(buf, [1, 2, 3])
        self.assertEqual(n, 3)
        self.assertEqual(buf.getvalue().splitlines(),
                         ['0000000000000001', '0000000000000010', '0000000000000011'])

    def test_out_of_range(self):
        with self.assertRaises(AsmError):
            TextWriter.render(0x10000)


class TestBinaryWriter(unittest.TestCase):

    def test_zero(self):
        buf = io.BytesIO()
        BinaryWriter().write(buf, 0)
        self.assertEqual(buf.getvalue(), b'\x00\x00')

    def test_big_endian(self):
        self.assertEqual(BinaryWriter.pack(0xEC10), b'\xec\x10')

    def test_back_to_back(self):
        buf = io.BytesIO()
        BinaryWriter().write_all(buf, [0x0102, 0xFFFF])
        self.assertEqual(buf.getvalue(), b'\x01\x02\xff\xff')

    def test_negative(self):
        with self.assertRaises(AsmError):
            BinaryWriter.pack(-1)


class FailingStream:
    def write(self, data):
        raise OSError(28, 'No space left on device')


class TestWriteFailure(unittest.TestCase):

    def test_text_propagates(self):
        with self.assertRaises(OSError):
            TextWriter().write_all(FailingStream(), [0, 1])

    def test_binary_propagates(self):
        with self.assertRaises(OSError):
            BinaryWriter().write(FailingStream(), 0)

    def test_stream_propagates(self):
        with self.assertRaises(OSError):
            Assembler('binary').assemble_stream(io.StringIO('@0\n'), FailingStream())


class TestFormatSelection(unittest.TestCase):

    def test_by_name(self):
        self.assertIsInstance(get_writer('text'), TextWriter)
        self.assertIsInstance(get_writer('binary'), BinaryWriter)
        self.assertIsInstance(get_writer(Format.BINARY), BinaryWriter)

    def test_invalid(self):
        with self.assertRaises(ConfigError):
            get_writer('hex')

    def test_default_is_binary(self):
        self.assertIs(Assembler().format, Format.BINARY)

    def test_invalid_before_translation(self):
        with self.assertRaises(ConfigError):
            Assembler('octal')


class TestReadWords(unittest.TestCase):

    def test_text(self):
        self.assertEqual(read_words('0000000000000000\n1110110000010000\n', 'text'),
                         [0, 0xEC10])

    def test_binary(self):
        self.assertEqual(read_words(b'\x00\x05\xec\x10', Format.BINARY), [5, 0xEC10])

    def test_bad_text(self):
        with self.assertRaises(AsmError):
            read_words('0101\n', 'text')

    def test_truncated_binary(self):
        with self.assertRaises(AsmError):
            read_words(b'\x00', 'binary')


class TestAssemblerStream(unittest.TestCase):
    src = '(LOOP)\n@LOOP\n0;JMP\n'

    def test_text_stream(self):
        out = io.StringIO()
        n = Assembler('text').assemble_stream(io.StringIO(self.src), out)
        self.assertEqual(n, 2)
        self.assertEqual(out.getvalue(), '0000000000000000\n1110101010000111\n')

    def test_binary_stream(self):
        out = io.BytesIO()
        Assembler(Format.BINARY).assemble_stream(io.StringIO(self.src), out)
        self.assertEqual(out.getvalue(), b'\x00\x00\xea\x87')

    def test_idempotent(self):
        outputs = []
        for _ in range(2):
            out = io.BytesIO()
            Assembler('binary').assemble_stream(io.StringIO('@x\n@y\n' + self.src), out)
            outputs.append(out.getvalue())
        self.assertEqual(outputs[0], outputs[1])

    def test_error_writes_nothing(self):
        out = io.StringIO()
        with self.assertRaises(AsmError):
            Assembler('text').assemble_stream(io.StringIO('@0\nD=FOO\n'), out)
        self.assertEqual(out.getvalue(), '')


if __name__ == '__main__':
    unittest.main()
