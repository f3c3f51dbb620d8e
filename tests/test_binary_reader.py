import pytest

from amputils.BinaryReader import BinaryReader


def test_reads_little_endian_integers():
  reader = BinaryReader.from_bytes(b'\x01\x02\x03\x04\x05\x06\x07\xff')

  assert reader.read_u8() == 0x01
  assert reader.read_u16() == 0x0302
  assert reader.read_u32() == 0x07060504
  assert reader.read_i8() == -1
  assert reader.tell() == 8


def test_skip_moves_relative_in_both_directions():
  reader = BinaryReader.from_bytes(bytes(range(10)))

  reader.skip(6)
  assert reader.read_u8() == 6
  reader.skip(-5)
  assert reader.tell() == 2
  assert reader.read_u8() == 2


def test_read_string_is_length_prefixed():
  reader = BinaryReader.from_bytes(b'\x04\x00\x00\x00Kick\x00\x00\x00\x00')

  assert reader.read_string() == 'Kick'
  assert reader.read_string() == ''
  assert reader.tell() == 12


def test_read_string_accepts_utf8():
  data = 'Caisse claire é'.encode('utf-8')
  reader = BinaryReader.from_bytes(len(data).to_bytes(4, 'little') + data)

  assert reader.read_string() == 'Caisse claire é'


def test_read_string_with_invalid_text_raises():
  reader = BinaryReader.from_bytes(b'\x02\x00\x00\x00\xff\xfe')

  with pytest.raises(UnicodeDecodeError):
    reader.read_string()


@pytest.mark.parametrize('method', ['read_u8', 'read_i8', 'read_u16', 'read_u32'])
def test_reading_past_the_end_raises_eof(method):
  reader = BinaryReader.from_bytes(b'')

  with pytest.raises(EOFError):
    getattr(reader, method)()


def test_short_read_raises_eof():
  reader = BinaryReader.from_bytes(b'SA')

  with pytest.raises(EOFError):
    reader.read_bytes(4)


def test_string_longer_than_stream_raises_eof():
  reader = BinaryReader.from_bytes(b'\x10\x00\x00\x00abc')

  with pytest.raises(EOFError):
    reader.read_string()
