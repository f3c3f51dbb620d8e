'''
### MidiReader Module

This module finds the sample banks that Amplitude songs (.mid) refer to. Each song has
a track named "BANK" whose text events hold the file names of the banks it loads.

Functions:
    `find_bank_events`:
        Returns the (tick, text) pairs of the BANK track of a MIDI file.

    `find_bank_names`:
        Returns only the bank file names of the BANK track, in order.

    `find_song_banks`:
        Maps each MIDI file in a directory to the bank names it refers to.

Dependencies:
    `mido`:
        For reading standard MIDI files.

Intended Usage:
    Used by the `songs` command to pair songs with their banks before opening them.
'''

import mido

# Import helper functions
from .Helpers import *

BANK_TRACK_NAME: str = 'BANK'

def find_bank_events(midi_path: str) -> list[tuple[int, str]]:
  midi_file = mido.MidiFile(midi_path)

  bank_track = next((t for t in midi_file.tracks if t.name == BANK_TRACK_NAME), None)
  if bank_track is None:
    raise ValueError(f"{midi_path} has no {BANK_TRACK_NAME} track")

  events = []
  tick = 0
  for msg in bank_track:
    tick += msg.time
    if msg.is_meta and msg.type == 'text':
      events.append((tick, msg.text))

  return events

def find_bank_names(midi_path: str) -> list[str]:
  return [text for _, text in find_bank_events(midi_path)]

def find_song_banks(directory: str) -> dict[str, list[str]]:
  return {path: find_bank_names(path) for path in find_files(directory, MIDI_EXTENSION)}

if __name__ == '__main__':
  pass
