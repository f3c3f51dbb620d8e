import pytest

from amputils.audio.VagDecoder import VagDecoder, VAG_SAMPLES_PER_BLOCK

from bankdata import vag_block


def test_silent_block_decodes_to_zeros():
  decoder = VagDecoder()

  assert decoder.decode_block(vag_block()) == [0] * VAG_SAMPLES_PER_BLOCK


def test_nibbles_are_read_low_first_and_sign_extended():
  decoder = VagDecoder()
  data = b'\x21\xf8' + b'\x00' * 12

  samples = decoder.decode_block(vag_block(shift=0, data=data))

  assert samples[:4] == [4096, 8192, -32768, -4096]


def test_shift_scales_residuals():
  decoder = VagDecoder()

  samples = decoder.decode_block(vag_block(shift=12, data=b'\xf1' * 14))

  assert samples[:2] == [1, -1]


def test_prediction_uses_history_from_previous_block():
  decoder = VagDecoder()
  decoder.decode_block(vag_block(shift=6, data=b'\x11' * 14))

  samples = decoder.decode_block(vag_block(shift=6, predictor=1))

  assert samples[:3] == [60, 56, 52]


def test_second_order_filter():
  decoder = VagDecoder()
  decoder.decode_block(vag_block(shift=6, data=b'\x11' * 14))

  samples = decoder.decode_block(vag_block(shift=6, predictor=2))

  # (64 * 115 - 64 * 52) >> 6
  assert samples[0] == 63


def test_output_is_clamped_to_16_bits():
  decoder = VagDecoder()
  decoder.decode_block(vag_block(shift=0, data=b'\x77' * 14))

  samples = decoder.decode_block(vag_block(shift=0, predictor=1, data=b'\x77' * 14))

  assert samples[0] == 32767


def test_channels_keep_separate_history():
  decoder = VagDecoder(2)
  decoder.decode_block(vag_block(shift=6, data=b'\x11' * 14))
  right = decoder.decode_block(vag_block(shift=6, predictor=1))
  left = decoder.decode_block(vag_block(shift=6, predictor=1))

  assert right == [0] * VAG_SAMPLES_PER_BLOCK
  assert left[:2] == [60, 56]


def test_end_flag_detection():
  assert VagDecoder.is_end_block(vag_block(flag=0x07))
  assert not VagDecoder.is_end_block(vag_block(flag=0x03))


def test_wrong_block_size_raises():
  with pytest.raises(ValueError):
    VagDecoder().decode_block(b'\x00' * 15)
