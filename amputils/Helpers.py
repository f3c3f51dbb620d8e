'''
### Helpers Module

This module provides low-level utility functions shared by the bank parser, the extractor,
and the command line script.

Functions:
    `find_files`:
        Lists the immediate child files of a directory that end with a given extension.

    `get_sample_file_path`:
        Derives the path of the raw audio file (.nse) that accompanies a sample bank (.bnk).

    `get_output_filename`:
        Turns a sample name into a file name that can be written on any platform.

Dependencies:
    `struct`:
        Imported and exposed for byte-level unpacking needed by other modules.

    `os`:
        For path manipulation and directory listing.

Intended Usage:
    This module is intended to be imported whenever files need to be located next to a
    sample bank, or when a value read from the bank is used as part of a file path.
'''

import os

# Import struct as it is used by /bank
import struct as _struct

BANK_EXTENSION: str   = '.bnk'
SAMPLE_EXTENSION: str = '.nse'
MIDI_EXTENSION: str   = '.mid'

# Characters that cannot appear in a file name on Windows
_INVALID_FILENAME_CHARS = '<>:"/\\|?*'

''' Helper Functions '''
def find_files(directory: str, extension: str) -> list[str]:
  ''' Returns the immediate child files of a directory whose names end with the extension '''
  paths = []
  for entry in sorted(os.listdir(directory)):
    path = os.path.join(directory, entry)
    if os.path.isfile(path) and entry.endswith(extension):
      paths.append(path)

  return paths

def get_sample_file_path(bank_path: str) -> str:
  # Resolved against the canonical location of the bank, not the working directory
  bank_dir = os.path.dirname(os.path.realpath(bank_path))
  bank_stem = os.path.splitext(os.path.basename(bank_path))[0]
  return os.path.join(bank_dir, bank_stem + SAMPLE_EXTENSION)

def get_output_filename(name: str, extension: str) -> str:
  safe_name = ''.join('_' if c in _INVALID_FILENAME_CHARS or ord(c) < 0x20 else c for c in name)
  return safe_name + extension

# Expose struct
struct = _struct

if __name__ == '__main__':
  pass
