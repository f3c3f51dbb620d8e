'''
### Sample Module

This module defines the `SampleEntry` class, which represents a single sample declared
by the SAMP chunk of an Amplitude sample bank.

Classes:
    `SampleEntry`:
        Represents a single sample record.

Functionality:
    - Parse a sample record from a binary reader ('from_reader').
    - Convert the sample into a dictionary ('to_yaml') for the bank summary.

Dependencies:
    `BinaryReader`:
        For little-endian reads from the bank stream.

Intended Usage:
    Samples are created in file order by the SAMP chunk. Their names and file names are
    filled in afterwards, by position, from the SANM and SAFN chunks. The channel count,
    sample rate and byte offset only matter for extraction and are left out of the summary.
'''

from dataclasses import dataclass

SAMPLE_RECORD_SIZE = 22

@dataclass
class SampleEntry: # struct size = 0x16
  ''' Represents a sample record in a sample bank '''
  name: str = ""
  file_name: str = ""

  # Transient, not written to the summary
  channel_count: int = 0
  sample_rate: int = 0
  byte_offset: int = 0

  @classmethod
  def from_reader(cls, reader):
    self = cls()

    reader.skip(4) # Entry size, always 18
    self.channel_count = reader.read_u32()
    self.sample_rate   = reader.read_u32()
    reader.skip(6)
    self.byte_offset   = reader.read_u32()

    return self

  def to_yaml(self) -> dict:
    return {
      "name": self.name,
      "file_name": self.file_name
    }

if __name__ == '__main__':
  pass
