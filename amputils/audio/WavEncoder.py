'''
### WavEncoder Module

This module defines the `WavEncoder` class, which writes decoded PCM samples to a
standard 16-bit WAV file.

Classes:
    `WavEncoder`:
        Holds PCM samples plus their channel count and sample rate.

Dependencies:
    `wave`:
        For the RIFF/WAVE container.

    `numpy`:
        For packing the samples into a little-endian 16-bit buffer.
'''

import wave
import numpy as np

class WavEncoder:
  ''' Encodes signed 16-bit PCM samples as a WAV file '''
  def __init__(self, samples, channels: int, sample_rate: int):
    # Checked here so that no partial file is left behind by the wave module
    if channels <= 0:
      raise ValueError(f"Cannot write a WAV file with {channels} channels.")
    if sample_rate <= 0:
      raise ValueError(f"Cannot write a WAV file with a sample rate of {sample_rate} Hz.")

    self.samples     = np.asarray(samples, dtype='<i2')
    self.channels    = channels
    self.sample_rate = sample_rate

  def encode_to_file(self, path: str) -> None:
    with wave.open(path, 'wb') as wav_file:
      wav_file.setnchannels(self.channels)
      wav_file.setsampwidth(2)
      wav_file.setframerate(self.sample_rate)
      wav_file.writeframes(self.samples.tobytes())

if __name__ == '__main__':
  pass
