'''
### Structs Package

This package provides class definitions and associated parsing and summary methods
for the records stored in an Amplitude sample bank.

Modules:
    `Sample`:
        Defines the `SampleEntry` class, a record of the SAMP chunk.

    `Bank`:
        Defines the `BankEntry` class, a record of the BANK chunk.

    `Instrument`:
        Defines the `InstrumentEntry` class, a record of the INST chunk.

    `Descriptor`:
        Defines the `DescriptorEntry` class, a variable-length record of the SDES chunk.

Functionality:
    - Parse records from a little-endian binary reader (`from_reader`).
    - Convert records to plain dictionaries for the YAML summary (`to_yaml`).

Dependencies:
    `dataclasses`:
        For record fields, defaults and equality.

    `Enums`:
        For the descriptor pan enum.

Intended Usage:
    Used by 'BankFile', which owns every record and decides how many of each to read.
'''

from .Sample import SampleEntry, SAMPLE_RECORD_SIZE
from .Bank import BankEntry, BANK_RECORD_SIZE
from .Instrument import InstrumentEntry, INSTRUMENT_RECORD_SIZE
from .Descriptor import DescriptorEntry
