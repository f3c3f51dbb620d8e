'''
### BankFile Module

This module defines the `BankFile` class, the in-memory form of one Amplitude sample
bank (.bnk), along with the chunk loop that reads it.

Classes:
    `BankFile`:
        Owns the samples, banks, instruments and sound descriptors of a sample bank.

Functionality:
    - Load a sample bank from a path (`from_file`), a byte string (`from_bytes`) or an
      opened binary stream (`from_stream`).
    - Read chunk tags one after another and hand each recognized chunk to its reader.
    - Apply the names of the name chunks to the entries read earlier, by position.
    - Export the bank to a dictionary (`to_yaml`) for the summary file.

Dependencies:
    `BinaryReader`:
        For little-endian reads from the bank stream.

    `Enums`:
        `ChunkTag`:
            Enum defining the recognized chunk tags.

    `bank.structs`:
        Includes the individual record representations.

Intended Usage:
    Parsing stops, without an error, at the end of the stream or at the first tag that is
    not part of the vocabulary. Anything after an unknown tag is never looked at.
'''

# Import BankFile child structures
from .structs import (
  SampleEntry, SAMPLE_RECORD_SIZE,
  BankEntry, BANK_RECORD_SIZE,
  InstrumentEntry, INSTRUMENT_RECORD_SIZE,
  DescriptorEntry,
)

# Import the binary reader and the chunk tags
from ..BinaryReader import BinaryReader
from ..Enums import ChunkTag

# Maps each name chunk to the collection and attribute it fills in
NAME_CHUNKS: dict[ChunkTag, tuple[str, str]] = {
  ChunkTag.SAMPLE_NAMES:      ('samples', 'name'),
  ChunkTag.SAMPLE_FILE_NAMES: ('samples', 'file_name'),
  ChunkTag.BANK_NAMES:        ('banks', 'name'),
  ChunkTag.INSTRUMENT_NAMES:  ('instruments', 'name'),
  ChunkTag.DESCRIPTOR_NAMES:  ('descriptors', 'name'),
}

class BankFile:
  ''' Represents an Amplitude sample bank '''
  def __init__(self):
    self.samples: list[SampleEntry] = []
    self.banks: list[BankEntry] = []
    self.instruments: list[InstrumentEntry] = []
    self.descriptors: list[DescriptorEntry] = []

  def __eq__(self, other):
    if not isinstance(other, BankFile):
      return NotImplemented
    return (
      self.samples == other.samples and
      self.banks == other.banks and
      self.instruments == other.instruments and
      self.descriptors == other.descriptors
    )

  def __repr__(self):
    return (f"BankFile(samples={len(self.samples)}, banks={len(self.banks)}, "
            f"instruments={len(self.instruments)}, descriptors={len(self.descriptors)})")

  @classmethod
  def from_file(cls, path: str):
    with open(path, 'rb') as f:
      return cls.from_stream(f)

  @classmethod
  def from_bytes(cls, data: bytes):
    return cls.from_reader(BinaryReader.from_bytes(data))

  @classmethod
  def from_stream(cls, stream):
    return cls.from_reader(BinaryReader(stream))

  @classmethod
  def from_reader(cls, reader: BinaryReader):
    self = cls()

    while True:
      try:
        magic = reader.read_bytes(4)
      except EOFError:
        break

      tag = ChunkTag.from_bytes(magic)
      if tag is None:
        break

      if tag == ChunkTag.SAMPLES:
        self.samples.extend(self._read_records(reader, SampleEntry, SAMPLE_RECORD_SIZE))
      elif tag == ChunkTag.BANKS:
        self.banks.extend(self._read_records(reader, BankEntry, BANK_RECORD_SIZE))
      elif tag == ChunkTag.INSTRUMENTS:
        self.instruments.extend(self._read_records(reader, InstrumentEntry, INSTRUMENT_RECORD_SIZE))
      elif tag == ChunkTag.DESCRIPTORS:
        self.descriptors.extend(self._read_descriptors(reader))
      else:
        collection, attribute = NAME_CHUNKS[tag]
        self.apply_names(getattr(self, collection), attribute, self._read_strings(reader))

    return self

  @staticmethod
  def apply_names(entries: list, attribute: str, strings: list[str]) -> None:
    ''' Assigns each string to the entry at the same index, ignoring strings without an entry '''
    for entry, string in zip(entries, strings):
      setattr(entry, attribute, string)

  @staticmethod
  def _read_records(reader: BinaryReader, record_cls, record_size: int) -> list:
    size = reader.read_u32()
    end_pos = reader.tell() + size
    entry_count = size // record_size

    entries = [record_cls.from_reader(reader) for _ in range(entry_count)]

    # A length that is not a multiple of the record size leaves a partial record, skip it
    if size % record_size:
      reader.seek(end_pos)

    return entries

  @staticmethod
  def _read_descriptors(reader: BinaryReader) -> list[DescriptorEntry]:
    size = reader.read_u32()
    end_pos = reader.tell() + size

    descriptors = []
    while reader.tell() < end_pos:
      descriptors.append(DescriptorEntry.from_reader(reader))

    return descriptors

  @staticmethod
  def _read_strings(reader: BinaryReader) -> list[str]:
    size = reader.read_u32()
    end_pos = reader.tell() + size

    reader.skip(4) # Always 1?

    strings = []
    while reader.tell() < end_pos:
      strings.append(reader.read_string())

    return strings

  def to_yaml(self) -> dict:
    return {
      "samples": [sample.to_yaml() for sample in self.samples],
      "banks": [bank.to_yaml() for bank in self.banks],
      "instruments": [instrument.to_yaml() for instrument in self.instruments],
      "descriptors": [descriptor.to_yaml() for descriptor in self.descriptors]
    }

if __name__ == '__main__':
  pass
