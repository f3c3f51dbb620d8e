'''
### Instrument Module

This module defines the `InstrumentEntry` class, which represents a single instrument
declared by the INST chunk of an Amplitude sample bank.

Classes:
    `InstrumentEntry`:
        Represents a single instrument record.

Functionality:
    - Parse an instrument record from a binary reader ('from_reader').
    - Convert the instrument into a dictionary ('to_yaml') for the bank summary.

Dependencies:
    `BinaryReader`:
        For little-endian reads from the bank stream.

Intended Usage:
    Used by 'BankFile' while walking the INST chunk. The descriptor index points into
    the bank's descriptor list and is not checked while parsing.
'''

from dataclasses import dataclass

INSTRUMENT_RECORD_SIZE = 16

@dataclass
class InstrumentEntry: # struct size = 0x10
  ''' Represents an instrument record in a sample bank '''
  name: str = ""
  program_number: int = 0
  descriptor_index: int = 0

  @classmethod
  def from_reader(cls, reader):
    self = cls()

    reader.skip(4) # Entry size, always 12
    reader.skip(4) # Unknown, always 1?
    self.program_number = reader.read_u16()
    reader.skip(4) # Unknown
    self.descriptor_index = reader.read_u16()

    return self

  def to_yaml(self) -> dict:
    return {
      "name": self.name,
      "program_number": self.program_number,
      "descriptor_index": self.descriptor_index
    }

if __name__ == '__main__':
  pass
