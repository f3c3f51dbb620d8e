''' A script for extracting Amplitude (PS2) sample banks to WAV and inspecting their contents '''

# Define current version
CURRENT_VERSION = '2026.10.19'

# Imports
import os
import sys
import argparse
from typing import Final

from amputils.bank.BankFile import BankFile
from amputils.bank.Extractor import extract_bank
from amputils.MidiReader import find_song_banks
from amputils.Helpers import BANK_EXTENSION, find_files

# Create ANSI formatting for terminal messages
# ANSI COLORS: https://talyian.github.io/ansicolors/
# TERMINAL TEXT COLORS
RED        : Final = '\x1b[31m'
YELLOW     : Final = '\x1b[33m'
BLUE_39    : Final = '\x1b[38;5;39m'
GRAY_245   : Final = '\x1b[38;5;245m'
GRAY_248   : Final = '\x1b[38;5;248m'
GREEN_79   : Final = '\x1b[38;5;79m'

# TERMINAL TEXT STYLES
BOLD      : Final = '\x1b[1m'
RESET     : Final = '\x1b[0m' # Resets all text styles and colors

# Argument Parser
def parse_args(argv=None):
  parser = argparse.ArgumentParser(
    prog=os.path.basename(sys.argv[0]),
    description='''Tool for Amplitude PS2 sample banks.'''
  )
  parser.add_argument('--version', action='version', version=f'%(prog)s {CURRENT_VERSION}')

  subparsers = parser.add_subparsers(dest='command', required=True)

  bnk2wav = subparsers.add_parser('bnk2wav', help="extract audio samples from .bnk")
  bnk2wav.add_argument(
    'input_path',
    help="path to an input sample bank (.bnk), or a directory of sample banks"
  )
  bnk2wav.add_argument(
    'output_path',
    help="path to the output directory"
  )
  bnk2wav.add_argument(
    '-s',
    '--sample-file',
    required=False,
    help="path to the raw sample file (.nse) when it does not sit next to the bank (single bank only)"
  )

  info = subparsers.add_parser('info', help="print the contents of a .bnk")
  info.add_argument(
    'input_path',
    help="path to an input sample bank (.bnk)"
  )

  songs = subparsers.add_parser('songs', help="list the banks used by each song (.mid) in a directory")
  songs.add_argument(
    'input_path',
    help="path to a directory of songs and sample banks"
  )

  return parser.parse_args(argv)

''' Command Functions '''
def extract_samples(bank_path: str, output_path: str, sample_file_path: str = None) -> int:
  bank = extract_bank(bank_path, output_path, sample_file_path)

  print(f"Wrote {GREEN_79}{len(bank.samples)}{RESET} samples to {BLUE_39}\"{output_path}\"{RESET}")

  return len(bank.samples)

def run_bnk2wav(args) -> None:
  input_path = args.input_path
  output_path = args.output_path

  total_samples = 0
  bank_count = 0

  if os.path.isfile(input_path):
    total_samples += extract_samples(input_path, output_path, args.sample_file)
    bank_count += 1

  elif os.path.isdir(input_path):
    if args.sample_file:
      raise ValueError("A raw sample file can only be given for a single bank.")

    for bank_path in find_files(input_path, BANK_EXTENSION):
      bank_stem = os.path.splitext(os.path.basename(bank_path))[0]
      local_output_path = os.path.join(output_path, bank_stem)

      total_samples += extract_samples(bank_path, local_output_path)
      bank_count += 1

  else:
    raise ValueError(f"Input path \"{input_path}\" does not exist.")

  print(f"Extracted {GREEN_79}{total_samples}{RESET} total samples from {GREEN_79}{bank_count}{RESET} banks")

def format_table(headers: list[str], rows: list[list]) -> list[str]:
  widths = [len(h) for h in headers]
  for row in rows:
    for i, value in enumerate(row):
      widths[i] = max(widths[i], len(str(value)))

  lines = ['  '.join(h.ljust(widths[i]) for i, h in enumerate(headers)).rstrip()]
  for row in rows:
    lines.append('  '.join(str(v).ljust(widths[i]) for i, v in enumerate(row)).rstrip())
  return lines

def run_info(args) -> None:
  bank = BankFile.from_file(args.input_path)

  sections = [
    ("Samples", ["#", "Name", "Ch.", "Rate", "Source"],
      [[i, s.name, s.channel_count, s.sample_rate, s.file_name] for i, s in enumerate(bank.samples)]),
    ("Banks", ["#", "Name", "Bank", "Instruments"],
      [[i, b.name, b.bank_number, b.instrument_count] for i, b in enumerate(bank.banks)]),
    ("Instruments", ["#", "Name", "Program", "SDES"],
      [[i, n.name, n.program_number, n.descriptor_index] for i, n in enumerate(bank.instruments)]),
    ("Descriptors", ["#", "Name", "Min", "Max", "Base", "Transpose", "Vol", "Pan", "Sample"],
      [[i, d.name, d.min_pitch, d.max_pitch, d.base_pitch, d.transpose, d.volume, d.pan.name, d.sample_index]
        for i, d in enumerate(bank.descriptors)]),
  ]

  for title, headers, rows in sections:
    print(f"{BOLD}{title}{RESET} {GRAY_245}({len(rows)}){RESET}")
    for line in format_table(headers, rows):
      print(f"  {line}")
    print()

def run_songs(args) -> None:
  directory = args.input_path
  if not os.path.isdir(directory):
    raise ValueError(f"Input path \"{directory}\" is not a directory.")

  song_banks = find_song_banks(directory)
  print(f"Found {GREEN_79}{len(song_banks)}{RESET} midi files!")

  for midi_path, bank_names in song_banks.items():
    print(f"{BLUE_39}{os.path.basename(midi_path)}{RESET}: {', '.join(bank_names) if bank_names else 'no banks'}")

    if bank_names:
      bank_path = os.path.join(directory, bank_names[0])
      if os.path.isfile(bank_path):
        bank = BankFile.from_file(bank_path)
        print(f"  {GRAY_248}{bank_names[0]}: {len(bank.samples)} samples{RESET}")
      else:
        print(f"  {YELLOW}{bank_names[0]} was not found{RESET}")

''' Main Function '''
COMMANDS = {
  'bnk2wav': run_bnk2wav,
  'info': run_info,
  'songs': run_songs,
}

def main(argv=None) -> int:
  args = parse_args(argv)

  try:
    COMMANDS[args.command](args)
  except (OSError, EOFError, UnicodeDecodeError, ValueError) as e:
    print(f"{RED}Error:{RESET} {e}")
    return 1

  return 0

if __name__ == '__main__':
  sys.exit(main())
