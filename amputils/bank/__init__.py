'''
### Bank Package

This package defines the classes used to read an Amplitude sample bank (.bnk) and to
extract the samples it describes from the matching raw sample file (.nse).

Modules:
    `BankFile`:
        Core class representing an entire sample bank: samples, banks, instruments and
        sound descriptors, read chunk by chunk from the binary file.

    `Extractor`:
        Decodes every sample of a `BankFile` into a WAV file and writes a YAML summary.

    `structs`:
        Record classes for each chunk kind (`SampleEntry`, `BankEntry`,
        `InstrumentEntry`, `DescriptorEntry`).

Functionality:
    - Load a sample bank from a path, bytes or a stream.
    - Resolve names from the name chunks onto previously read records, by position.
    - Extract samples to WAV and summarize the bank to YAML.

Dependencies:
    `struct`:
        For low-level binary unpacking.

    `Enums`:
        For chunk tags and pan positions.

    `audio`:
        For ADPCM decoding and WAV encoding.

Intended Usage:
    The `bank` package is the core of the `bnk2wav` command.
'''
