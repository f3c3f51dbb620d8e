'''
### Enums Module

This module defines enumerations used throughout the project to classify and interpret
constants found in Amplitude sample banks.

Classes:
    `ChunkTag`:
        An enumeration of the four-character chunk tags recognized in a sample bank.
        Definition chunks introduce a collection of entries, name chunks decorate them.

    `SdesPan`:
        Enumerates the stereo pan positions a sound descriptor can hold.

Functionality:
    - Provides strongly typed constants for use in parsing and serialization logic.
    - Improves readbility and reduces the likelihood of errors from magic numbers or strings.

Dependencies:
    `enum`:
        Used for defining enumeration types.

Intended Usage:
    This module should be imported wherever chunk identification or pan decoding
    is needed during binary parsing or summary serialization.
'''

from enum import Enum, IntEnum


class ChunkTag(Enum):
  SAMPLES           = b'SAMP'
  SAMPLE_NAMES      = b'SANM'
  SAMPLE_FILE_NAMES = b'SAFN'
  BANKS             = b'BANK'
  BANK_NAMES        = b'BKNM'
  INSTRUMENTS       = b'INST'
  INSTRUMENT_NAMES  = b'INNM'
  DESCRIPTORS       = b'SDES'
  DESCRIPTOR_NAMES  = b'SDNM'

  @classmethod
  def from_bytes(cls, tag: bytes):
    ''' Returns the matching tag, or None if the tag is not part of the vocabulary '''
    try:
      return cls(bytes(tag))
    except ValueError:
      return None


class SdesPan(IntEnum):
  LEFT   = 0x00
  CENTER = 0x40
  RIGHT  = 0x7F

  @classmethod
  def from_byte(cls, value: int):
    # Unmapped bytes fall back to center
    try:
      return cls(value)
    except ValueError:
      return cls.CENTER


if __name__ == '__main__':
  pass
