''' Builders for synthetic sample bank and raw sample data used by the tests '''

import struct

import mido
import yaml


def chunk(tag: bytes, body: bytes) -> bytes:
  return tag + struct.pack('<I', len(body)) + body

def sample_record(channels: int = 1, sample_rate: int = 22050, offset: int = 0) -> bytes:
  return (struct.pack('<I', 18) + struct.pack('<2I', channels, sample_rate)
          + b'\x00' * 6 + struct.pack('<I', offset))

def bank_record(bank_number: int, instrument_count: int) -> bytes:
  return (struct.pack('<I', 9) + b'\x00' * 4 + struct.pack('<B', bank_number)
          + b'\x00' * 2 + struct.pack('<B', instrument_count) + b'\x00')

def instrument_record(program: int, descriptor: int) -> bytes:
  return (struct.pack('<I', 12) + struct.pack('<I', 1) + struct.pack('<H', program)
          + b'\x00' * 4 + struct.pack('<H', descriptor))

def descriptor_record(min_pitch=0, max_pitch=127, base_pitch=60, transpose=0,
                      volume=100, pan=0x40, sample=0, trailing: bytes = b'') -> bytes:
  body = (bytes([min_pitch, max_pitch, base_pitch, transpose]) + b'\x00' * 12
          + bytes([volume, pan, sample]) + b'\x00' * 3 + trailing)
  return struct.pack('<I', len(body) + 4) + struct.pack('<I', len(trailing)) + body

def string(value) -> bytes:
  data = value.encode('utf-8') if isinstance(value, str) else value
  return struct.pack('<I', len(data)) + data

def names_chunk(tag: bytes, values) -> bytes:
  return chunk(tag, struct.pack('<I', 1) + b''.join(string(v) for v in values))

def samples_chunk(*records: bytes) -> bytes:
  return chunk(b'SAMP', b''.join(records))

def vag_block(shift: int = 0, predictor: int = 0, flag: int = 0, data: bytes = b'\x00' * 14) -> bytes:
  assert len(data) == 14
  return bytes([(predictor << 4) | shift, flag]) + data

def write_song(path, bank_names, track_name='BANK'):
  ''' Writes a minimal song whose named track holds one text event per bank '''
  midi_file = mido.MidiFile()

  tempo_track = mido.MidiTrack()
  tempo_track.append(mido.MetaMessage('set_tempo', tempo=500000, time=0))
  midi_file.tracks.append(tempo_track)

  bank_track = mido.MidiTrack()
  bank_track.append(mido.MetaMessage('track_name', name=track_name, time=0))
  for i, name in enumerate(bank_names):
    bank_track.append(mido.MetaMessage('text', text=name, time=0 if i == 0 else 480))
  midi_file.tracks.append(bank_track)

  midi_file.save(str(path))

def load_summary(path) -> dict:
  with open(path, 'r', encoding='utf-8') as f:
    return yaml.safe_load(f)
