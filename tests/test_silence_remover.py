import pytest

from audioprint.silence_remover import SilenceRemover


class Collector:
    def __init__(self):
        self.blocks = []

    def consume(self, samples):
        self.blocks.append(list(samples))

    @property
    def samples(self):
        return [s for block in self.blocks for s in block]


def test_reset_rejects_stereo():
    remover = SilenceRemover(Collector())
    with pytest.raises(ValueError):
        remover.reset(11025, 2)


def test_leading_silence_is_dropped():
    sink = Collector()
    remover = SilenceRemover(sink, threshold=100)
    samples = [0] * 40 + [1000] * 20
    remover.consume(samples)
    out = sink.samples
    assert 0 < len(out) < len(samples)
    assert out == samples[len(samples) - len(out):]
    assert all(s == 1000 for s in out)


def test_zero_threshold_passes_everything_when_first_sample_loud():
    sink = Collector()
    remover = SilenceRemover(sink)
    samples = [5, 0, 0, 7, -3]
    remover.consume(samples)
    assert sink.samples == samples


def test_all_silence_sends_nothing():
    sink = Collector()
    remover = SilenceRemover(sink, threshold=10)
    remover.consume([0, 1, 2, 0, 1])
    remover.flush()
    assert sink.blocks == []


def test_after_start_silence_passes_through():
    sink = Collector()
    remover = SilenceRemover(sink, threshold=10)
    remover.consume([2000] * 5)
    remover.consume([0, 0, 0])
    assert sink.blocks[-1] == [0, 0, 0]


def test_negative_samples_count_as_loud():
    sink = Collector()
    remover = SilenceRemover(sink, threshold=100)
    remover.consume([-1000] * 10)
    assert sink.samples
    assert all(s == -1000 for s in sink.samples)


def test_threshold_is_adjustable():
    sink = Collector()
    remover = SilenceRemover(sink, threshold=5000)
    remover.threshold = 0
    remover.consume([3, 3])
    assert sink.samples == [3, 3]