'''
### Amputils Package

This package contains the modules that read Amplitude (PS2) sample banks and extract
their samples to WAV.

Modules:
    `Enums`:
        Defines the chunk tags of a sample bank and the pan positions of a sound descriptor.

    `Helpers`:
        Provides directory listing and path helpers for banks, raw sample files and songs.

    `BinaryReader`:
        Little-endian sequential reader used to walk the chunks of a bank.

    `YAMLSerializer`:
        Writes the YAML summary of a bank.

    `MidiReader`:
        Finds the banks referenced by the BANK track of a song.

    `bank.BankFile`:
        Core class representing an entire sample bank, including its samples, banks,
        instruments and sound descriptors.

    `bank.Extractor`:
        Extracts every sample of a bank into a WAV file.

    `audio.VagDecoder`:
        Stateful PlayStation ADPCM block decoder.

    `audio.WavEncoder`:
        16-bit PCM WAV writer.

Functionality:
    - Parse sample banks from binary data.
    - Decode PlayStation ADPCM sample data and write WAV files.
    - Serialize banks to YAML for inspection.

Dependencies:
    `struct`:
        For byte-level unpacking.

    `PyYAML`:
        For the bank summary.

    `numpy`:
        For PCM buffers.

    `mido`:
        For reading songs.

Intended Usage:
    This package is intended to back `amp_tool.py`, but each module can be used on its own.
'''
