'''
### VagDecoder Module

This module defines the `VagDecoder` class, a decoder for the PlayStation ADPCM ("VAG")
blocks that make up the audio of an Amplitude raw sample file (.nse).

Classes:
    `VagDecoder`:
        Decodes 16-byte ADPCM blocks into signed 16-bit PCM samples.

Functionality:
    - Decode one block at a time (`decode_block`), keeping the two previous output
      samples of each channel as predictor history.
    - Route blocks to channels in turn for multi-channel samples, so each channel
      predicts from its own history.

Block layout:
    Byte 0:
        High nibble is the prediction filter, low nibble is the shift.
    Byte 1:
        Flags. 0x07 marks the last block of a sample.
    Bytes 2-15:
        28 four-bit residuals, low nibble first.

Intended Usage:
    Create one decoder per sample and drop it once the sample's last block has been
    decoded, so that predictor history never carries over to the next sample.
'''

VAG_BYTES_PER_BLOCK: int   = 16
VAG_SAMPLES_PER_BLOCK: int = 28
VAG_END_FLAG: int          = 0x07

# Prediction filter coefficients, in 1/64 units
VAG_FILTERS: list[tuple[int, int]] = [
  (0, 0),
  (60, 0),
  (115, -52),
  (98, -55),
  (122, -60),
]

def _clamp_s16(value: int) -> int:
  if value > 32767:
    return 32767
  if value < -32768:
    return -32768
  return value

class VagDecoder:
  ''' Stateful PlayStation ADPCM block decoder '''
  def __init__(self, channels: int = 1):
    self.channels = max(1, channels)

    # Predictor history per channel, most recent sample first
    self.history: list[list[int]] = [[0, 0] for _ in range(self.channels)]

    self.block_count = 0

  @staticmethod
  def is_end_block(block: bytes) -> bool:
    return block[1] == VAG_END_FLAG

  def decode_block(self, block: bytes) -> list[int]:
    if len(block) != VAG_BYTES_PER_BLOCK:
      raise ValueError(f"VAG blocks are {VAG_BYTES_PER_BLOCK} bytes, got {len(block)}")

    channel = self.block_count % self.channels
    self.block_count += 1

    shift  = block[0] & 0x0F
    predictor = (block[0] >> 4) & 0x0F
    if predictor >= len(VAG_FILTERS):
      predictor = 0
    if shift > 12: # Treated as 9 by the hardware
      shift = 9

    coef_1, coef_2 = VAG_FILTERS[predictor]
    s1, s2 = self.history[channel]

    samples = []
    for byte in block[2:]:
      for nibble in (byte & 0x0F, byte >> 4):
        # Sign extend the nibble into the top of a 16-bit value, then apply the shift
        residual = ((nibble << 12) & 0xFFFF)
        if residual & 0x8000:
          residual -= 0x10000
        residual >>= shift

        sample = _clamp_s16(residual + ((s1 * coef_1 + s2 * coef_2) >> 6))
        samples.append(sample)

        s2 = s1
        s1 = sample

    self.history[channel] = [s1, s2]

    return samples

if __name__ == '__main__':
  pass
