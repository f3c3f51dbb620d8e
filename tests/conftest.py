import pytest

from bankdata import chunk, samples_chunk, sample_record, names_chunk, bank_record, \
  instrument_record, descriptor_record, vag_block


@pytest.fixture
def full_bank_bytes():
  ''' A bank with every chunk kind: two samples, one bank, two instruments, two descriptors '''
  return b''.join([
    samples_chunk(sample_record(1, 22050, 0), sample_record(2, 44100, 32)),
    names_chunk(b'SANM', ['Kick', 'Snare']),
    names_chunk(b'SAFN', ['kick.vag', 'snare.vag']),
    chunk(b'BANK', bank_record(3, 2)),
    names_chunk(b'BKNM', ['Drums']),
    chunk(b'INST', instrument_record(0, 0) + instrument_record(35, 1)),
    names_chunk(b'INNM', ['Kit', 'Bass']),
    chunk(b'SDES', descriptor_record(36, 36, 36, 0, 127, 0x00, 0)
                   + descriptor_record(38, 40, 38, 2, 90, 0x7F, 1, trailing=b'\xAA' * 4)),
    names_chunk(b'SDNM', ['KickSound', 'SnareSound']),
  ])


@pytest.fixture
def raw_sample_bytes():
  ''' Raw audio for the full bank: a mono sample at 0 and a stereo sample at 32 '''
  return b''.join([
    vag_block(shift=6, data=b'\x11' * 14),
    vag_block(flag=0x07),
    vag_block(shift=6, data=b'\x11' * 14),
    vag_block(shift=6, data=b'\x22' * 14, flag=0x07),
  ])


@pytest.fixture
def bank_dir(tmp_path, full_bank_bytes, raw_sample_bytes):
  ''' A directory holding song.bnk and its raw sample file song.nse '''
  (tmp_path / 'song.bnk').write_bytes(full_bank_bytes)
  (tmp_path / 'song.nse').write_bytes(raw_sample_bytes)
  return tmp_path
