'''
### Audio Package

This package turns the compressed audio of an Amplitude raw sample file into
playable WAV files.

Modules:
    `VagDecoder`:
        Stateful PlayStation ADPCM block decoder with per-channel predictor history.

    `WavEncoder`:
        Writes signed 16-bit PCM samples into a WAV container.

Dependencies:
    `wave`:
        For the WAV container.

    `numpy`:
        For building the PCM sample buffer.
'''
