'''
### Descriptor Module

This module defines the `DescriptorEntry` class, which represents a single sound
descriptor declared by the SDES chunk of an Amplitude sample bank.

Classes:
    `DescriptorEntry`:
        Represents a single sound descriptor record (pitch range, volume, pan, sample).

Functionality:
    - Parse a descriptor record from a binary reader ('from_reader').
    - Convert the descriptor into a dictionary ('to_yaml') for the bank summary.

Dependencies:
    `BinaryReader`:
        For little-endian reads from the bank stream.

    `Enums`:
        `SdesPan`:
            Enum defining the stereo pan positions.

Intended Usage:
    Descriptor records are variable length. Each one carries the number of trailing
    bytes that follow its fixed fields, so 'BankFile' keeps reading records until the
    declared length of the SDES chunk is used up.
'''

from dataclasses import dataclass

# Import the pan enum
from ...Enums import SdesPan

@dataclass
class DescriptorEntry: # struct size = 0x1E + trailing bytes
  ''' Represents a sound descriptor record in a sample bank '''
  name: str = ""

  min_pitch: int = 0
  max_pitch: int = 0
  base_pitch: int = 0
  transpose: int = 0

  volume: int = 0
  pan: SdesPan = SdesPan.CENTER
  sample_index: int = 0

  @classmethod
  def from_reader(cls, reader):
    self = cls()

    reader.skip(4) # Entry size
    trailing_count = reader.read_u32()

    self.min_pitch  = reader.read_u8()
    self.max_pitch  = reader.read_u8()
    self.base_pitch = reader.read_u8()
    self.transpose  = reader.read_u8()

    reader.skip(12) # Unknown

    self.volume       = reader.read_u8()
    self.pan          = SdesPan.from_byte(reader.read_u8())
    self.sample_index = reader.read_u8()

    reader.skip(3 + trailing_count)

    return self

  def to_yaml(self) -> dict:
    return {
      "name": self.name,
      "min_pitch": self.min_pitch,
      "max_pitch": self.max_pitch,
      "base_pitch": self.base_pitch,
      "transpose": self.transpose,
      "volume": self.volume,
      "pan": self.pan.name,
      "sample_index": self.sample_index
    }

if __name__ == '__main__':
  pass
