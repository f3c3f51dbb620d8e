'''
### Extractor Module

This module drives the extraction of every sample of a parsed `BankFile` from its raw
sample file (.nse) into WAV files.

Classes:
    `Extractor`:
        Decodes each sample of a bank and writes it, plus a YAML summary of the bank.

Functions:
    `extract_bank`:
        Parses a bank from disk and extracts it into a directory in one call.

Functionality:
    - Seek the raw sample file to each sample's byte offset and read 16-byte ADPCM blocks
      until the end flag, or until the file runs out.
    - Decode every sample with its own `VagDecoder`.
    - Write one WAV file per sample, named after the sample.
    - Write `bank.yaml` once all samples are done, even when the bank has no samples.

Dependencies:
    `audio`:
        For the ADPCM decoder and the WAV encoder.

    `YAMLSerializer`:
        For the bank summary.

    `Helpers`:
        For locating the raw sample file and building output file names.

Intended Usage:
    Errors are not collected: the first sample that cannot be read or decoded stops the
    whole extraction and the exception reaches the caller.
'''

import os

# Import the audio codecs and the summary writer
from ..audio.VagDecoder import VagDecoder, VAG_BYTES_PER_BLOCK
from ..audio.WavEncoder import WavEncoder
from ..YAMLSerializer import dump_bank, SUMMARY_FILENAME

# Import helper functions
from ..Helpers import *

from .BankFile import BankFile

class Extractor:
  ''' Extracts the samples of a bank to WAV files '''
  def __init__(self, bank: BankFile, sample_file_path: str, output_dir: str):
    self.bank = bank
    self.sample_file_path = sample_file_path
    self.output_dir = output_dir

  @staticmethod
  def decode_sample(stream, sample) -> list[int]:
    ''' Decodes a single sample starting at its byte offset in the raw sample stream '''
    decoder = VagDecoder(sample.channel_count)
    stream.seek(sample.byte_offset)

    sample_stream = []
    while True:
      block = stream.read(VAG_BYTES_PER_BLOCK)
      # Running out of data ends the sample the same way the end flag does
      if len(block) < VAG_BYTES_PER_BLOCK:
        break

      sample_stream.extend(decoder.decode_block(block))
      if VagDecoder.is_end_block(block):
        break

    return sample_stream

  def get_output_path(self, index: int, sample) -> str:
    name = sample.name if sample.name else f"Sample_{index}"
    return os.path.join(self.output_dir, get_output_filename(name, '.wav'))

  def extract(self) -> list[str]:
    ''' Writes every sample and the bank summary, returns the written WAV paths '''
    os.makedirs(self.output_dir, exist_ok=True)

    written = []
    if self.bank.samples:
      with open(self.sample_file_path, 'rb') as sample_file:
        for i, sample in enumerate(self.bank.samples):
          pcm = self.decode_sample(sample_file, sample)

          output_path = self.get_output_path(i, sample)
          WavEncoder(pcm, max(1, sample.channel_count), sample.sample_rate).encode_to_file(output_path)
          written.append(output_path)

    dump_bank(self.bank, os.path.join(self.output_dir, SUMMARY_FILENAME))

    return written

def extract_bank(bank_path: str, output_dir: str, sample_file_path: str = None) -> BankFile:
  if sample_file_path is None:
    sample_file_path = get_sample_file_path(bank_path)

  bank = BankFile.from_file(bank_path)
  Extractor(bank, sample_file_path, output_dir).extract()

  return bank

if __name__ == '__main__':
  pass
