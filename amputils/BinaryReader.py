'''
### BinaryReader Module

This module defines the `BinaryReader` class, a small sequential reader over a seekable
binary stream used to walk the chunks of a sample bank.

Classes:
    `BinaryReader`:
        Reads little-endian integers, raw bytes and length-prefixed strings from a stream.

Functionality:
    - Read fixed-size byte arrays, failing with `EOFError` when the stream runs out.
    - Read unsigned 8/16/32-bit and signed 8-bit little-endian integers.
    - Skip forward or backward relative to the current position.
    - Read UTF-8 strings prefixed by a 32-bit length.

Dependencies:
    `struct`:
        For byte-level unpacking.

    `io`:
        For the relative seek constant and in-memory streams.

Intended Usage:
    The bank parser wraps an opened `.bnk` file (or a `BytesIO`) in a `BinaryReader`.
    An `EOFError` raised while reading a chunk tag marks the end of the bank.
'''

import io

# Import helper functions
from .Helpers import *

class BinaryReader:
  ''' Little-endian reader over a seekable binary stream '''
  def __init__(self, stream):
    self.stream = stream

  @classmethod
  def from_bytes(cls, data: bytes):
    return cls(io.BytesIO(data))

  def read_bytes(self, size: int) -> bytes:
    data = self.stream.read(size)
    if len(data) != size:
      raise EOFError(f"Expected {size} bytes at offset {self.tell() - len(data)}, got {len(data)}")
    return data

  def read_u8(self) -> int:
    return struct.unpack('<B', self.read_bytes(1))[0]

  def read_i8(self) -> int:
    return struct.unpack('<b', self.read_bytes(1))[0]

  def read_u16(self) -> int:
    return struct.unpack('<H', self.read_bytes(2))[0]

  def read_u32(self) -> int:
    return struct.unpack('<I', self.read_bytes(4))[0]

  def read_string(self) -> str:
    size = self.read_u32()
    # Invalid text raises UnicodeDecodeError, which is left to the caller
    return self.read_bytes(size).decode('utf-8')

  def tell(self) -> int:
    return self.stream.tell()

  def seek(self, position: int) -> int:
    return self.stream.seek(position)

  def skip(self, offset: int) -> int:
    return self.stream.seek(offset, io.SEEK_CUR)

if __name__ == '__main__':
  pass
