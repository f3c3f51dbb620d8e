'''
### Bank Module

This module defines the `BankEntry` class, which represents a single program bank
declared by the BANK chunk of an Amplitude sample bank.

Classes:
    `BankEntry`:
        Represents a single bank record.

Functionality:
    - Parse a bank record from a binary reader ('from_reader').
    - Convert the bank into a dictionary ('to_yaml') for the bank summary.

Dependencies:
    `BinaryReader`:
        For little-endian reads from the bank stream.

Intended Usage:
    Used by 'BankFile' while walking the BANK chunk. Names come later from BKNM.
'''

from dataclasses import dataclass

BANK_RECORD_SIZE = 13

@dataclass
class BankEntry: # struct size = 0x0D
  ''' Represents a bank record in a sample bank '''
  name: str = ""
  bank_number: int = 0
  instrument_count: int = 0

  @classmethod
  def from_reader(cls, reader):
    self = cls()

    reader.skip(4) # Entry size, always 9
    reader.skip(4) # Unknown
    self.bank_number = reader.read_u8()
    reader.skip(2) # Unknown
    self.instrument_count = reader.read_u8()
    reader.skip(1) # Unknown

    return self

  def to_yaml(self) -> dict:
    return {
      "name": self.name,
      "bank_number": self.bank_number,
      "instrument_count": self.instrument_count
    }

if __name__ == '__main__':
  pass
