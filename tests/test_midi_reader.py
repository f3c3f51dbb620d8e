import pytest

from amputils.MidiReader import find_bank_events, find_bank_names, find_song_banks

from bankdata import write_song


def test_bank_events_carry_absolute_ticks(tmp_path):
  write_song(tmp_path / 'song.mid', ['song.bnk', 'song_b.bnk'])

  assert find_bank_events(str(tmp_path / 'song.mid')) == [(0, 'song.bnk'), (480, 'song_b.bnk')]


def test_bank_names(tmp_path):
  write_song(tmp_path / 'song.mid', ['song.bnk'])

  assert find_bank_names(str(tmp_path / 'song.mid')) == ['song.bnk']


def test_missing_bank_track_raises(tmp_path):
  write_song(tmp_path / 'song.mid', ['song.bnk'], track_name='DRUMS')

  with pytest.raises(ValueError):
    find_bank_names(str(tmp_path / 'song.mid'))


def test_song_banks_only_reads_midi_files(tmp_path):
  write_song(tmp_path / 'a.mid', ['a.bnk'])
  write_song(tmp_path / 'b.mid', [])
  (tmp_path / 'a.bnk').write_bytes(b'')
  (tmp_path / 'sub.mid').mkdir()

  song_banks = find_song_banks(str(tmp_path))

  assert song_banks == {
    str(tmp_path / 'a.mid'): ['a.bnk'],
    str(tmp_path / 'b.mid'): [],
  }
