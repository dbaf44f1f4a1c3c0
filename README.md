# audioprint

Building blocks for chroma-based acoustic fingerprinting of audio. The package
holds the pieces that turn 16-bit samples into power spectra, chroma-style
feature vectors into two-bit classifier outputs, and the helpers used to
describe and time matches between 32-bit sub-fingerprints.

## Installation

```
pip install audioprint
```

To run the test suite:

```
pip install "audioprint[test]"
pytest
```

## What is inside

- `audioprint.utils`: `prepare_hamming_window`, `apply_window`,
  `euclidean_norm`, `normalize_vector` (all zeros when the norm is below the
  threshold), `gray_code`, `index_to_freq` / `freq_to_index`,
  `round_half_away`, `freq_to_bark`, `count_set_bits` and `hamming_distance`.
- `audioprint.moving_average.MovingAverage`: integer average of the last
  `size` values, truncated toward zero.
- `audioprint.simhash.simhash`: a 32-bit similarity hash over a sequence of
  32-bit values.
- `audioprint.quantizer.Quantizer`: three ascending thresholds mapping a
  value to a level from 0 to 3; thresholds out of order raise `ValueError`.
- `audioprint.filters`: the comparators `subtract` and `subtract_log`, the
  six Haar-like filters `filter0` … `filter5`, and the `Filter` dataclass
  that applies one of them with `subtract_log`.
- `audioprint.classifier.Classifier`: a `Filter` paired with a `Quantizer`.
- `audioprint.image`: `Image`, a growable grid of rows with a fixed column
  count, and `ImageBuilder`, which appends each consumed feature vector as a
  row.
- `audioprint.silence_remover.SilenceRemover`: forwards samples to a
  consumer once a 55-sample moving average of their magnitude exceeds the
  threshold; `reset` raises `ValueError` for anything but mono.
- `audioprint.chroma_normalizer.ChromaNormalizer`: scales feature vectors to
  unit Euclidean length (zeroing those with a norm below 0.01) and forwards
  them.
- `audioprint.fft_lib.FFTLib`: applies a Hamming window to a frame of
  samples and returns the power of bins `0 … frame_size // 2`.
- `audioprint.configuration`: the `Algorithm` enum (`TEST1` … `TEST5`), the
  `FingerprinterConfiguration` dataclass with its timing helpers
  (`item_duration`, `delay` and their `_in_seconds` forms), and
  `create_configuration`, which raises `ValueError` for an unknown algorithm.
- `audioprint.segment`: `Segment`, a matched run of two fingerprints with
  `public_score` and `merged`, and `hash_time` / `hash_duration` for placing
  sub-fingerprints in time.

## Example

```python
from audioprint.configuration import Algorithm, create_configuration
from audioprint.segment import hash_time
from audioprint.simhash import simhash
from audioprint.utils import hamming_distance

config = create_configuration(Algorithm.TEST2)
print(config.item_duration_in_seconds())
print(hash_time(config, 10))

print(simhash([0b1011, 0b1001, 0b0011]))
print(hamming_distance(0xFFFF0000, 0x0000FFFF))
```

An `FFTLib` turns frames of 16-bit samples into power spectra:

```python
from audioprint.fft_lib import FFTLib

fft = FFTLib(8)
fft.load([0, 1000, 2000, 3000], [4000, 3000, 2000, 1000])
spectrum = fft.compute()   # frame_size // 2 + 1 values
```

## What it does not do

This is a set of parts, not a complete fingerprinter. There is no command to
run, no audio decoding or resampling, no chroma extraction from spectra, no
chroma smoothing filter, no integral image, no fingerprint compression or
decompression, and no routine that aligns two fingerprints and produces
`Segment`s. The filters and `Classifier.classify` take any object with an
`area(x1, y1, x2, y2)` method; you supply that image yourself.