"""Fingerprinting algorithm settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from audioprint.classifier import Classifier
from audioprint.filters import Filter
from audioprint.quantizer import Quantizer

DEFAULT_SAMPLE_RATE = 11025

_DEFAULT_FRAME_SIZE = 4096
_DEFAULT_FRAME_OVERLAP = _DEFAULT_FRAME_SIZE - _DEFAULT_FRAME_SIZE // 3

_CHROMA_FILTER_COEFFICIENTS = (0.25, 0.75, 1.0, 0.75, 0.25)


class Algorithm(IntEnum):
    """The available fingerprinting algorithms."""

    TEST1 = 0
    TEST2 = 1
    TEST3 = 2
    TEST4 = 3
    TEST5 = 4


@dataclass
class FingerprinterConfiguration:
    """Classifiers, filter coefficients and framing used by a fingerprinter."""

    classifiers: tuple[Classifier, ...] = ()
    filter_coefficients: tuple[float, ...] = ()
    interpolate: bool = False
    remove_silence: bool = False
    silence_threshold: int = 0
    frame_size: int = 0
    frame_overlap: int = 0

    @property
    def sample_rate(self) -> int:
        return DEFAULT_SAMPLE_RATE

    def max_filter_width(self) -> int:
        """Return the widest filter among the classifiers, 0 if there are none."""
        return max((c.filter.width for c in self.classifiers), default=0)

    def item_duration(self) -> int:
        """Return the number of samples between consecutive fingerprint items."""
        return self.frame_size - self.frame_overlap

    def item_duration_in_seconds(self) -> float:
        return self.item_duration() * 1.0 / self.sample_rate

    def delay(self) -> int:
        """Return the number of samples before the first fingerprint item."""
        return (
            (len(self.filter_coefficients) - 1) + (self.max_filter_width() - 1)
        ) * self.item_duration() + self.frame_overlap

    def delay_in_seconds(self) -> float:
        return self.delay() * 1.0 / self.sample_rate


def _c(kind: int, y: int, height: int, width: int, t0: float, t1: float, t2: float) -> Classifier:
    return Classifier(Filter(kind, y, height, width), Quantizer(t0, t1, t2))


_CLASSIFIERS_TEST1 = (
    _c(0, 0, 3, 15, 2.10543, 2.45354, 2.69414),
    _c(1, 0, 4, 14, -0.345922, 0.0463746, 0.446251),
    _c(1, 4, 4, 11, -0.392132, 0.0291077, 0.443391),
    _c(3, 0, 4, 14, -0.192851, 0.00583535, 0.204053),
    _c(2, 8, 2, 4, -0.0771619, -0.00991999, 0.0575406),
    _c(5, 6, 2, 15, -0.710437, -0.518954, -0.330402),
    _c(1, 9, 2, 16, -0.353724, -0.0189719, 0.289768),
    _c(3, 4, 2, 10, -0.128418, -0.0285697, 0.0591791),
    _c(3, 9, 2, 16, -0.139052, -0.0228468, 0.0879723),
    _c(2, 1, 3, 6, -0.133562, 0.00669205, 0.155012),
    _c(3, 3, 6, 2, -0.0267, 0.00804829, 0.0459773),
    _c(2, 8, 1, 10, -0.0972417, 0.0152227, 0.129003),
    _c(3, 4, 4, 14, -0.141434, 0.00374515, 0.149935),
    _c(5, 4, 2, 15, -0.64035, -0.466999, -0.285493),
    _c(5, 9, 2, 3, -0.322792, -0.254258, -0.174278),
    _c(2, 1, 8, 4, -0.0741375, -0.00590933, 0.0600357),
)

_CLASSIFIERS_TEST2 = (
    _c(0, 4, 3, 15, 1.98215, 2.35817, 2.63523),
    _c(4, 4, 6, 15, -1.03809, -0.651211, -0.282167),
    _c(1, 0, 4, 16, -0.298702, 0.119262, 0.558497),
    _c(3, 8, 2, 12, -0.105439, 0.0153946, 0.135898),
    _c(3, 4, 4, 8, -0.142891, 0.0258736, 0.200632),
    _c(4, 0, 3, 5, -0.826319, -0.590612, -0.368214),
    _c(1, 2, 2, 9, -0.557409, -0.233035, 0.0534525),
    _c(2, 7, 3, 4, -0.0646826, 0.00620476, 0.0784847),
    _c(2, 6, 2, 16, -0.192387, -0.029699, 0.215855),
    _c(2, 1, 3, 2, -0.0397818, -0.00568076, 0.0292026),
    _c(5, 10, 1, 15, -0.53823, -0.369934, -0.190235),
    _c(3, 6, 2, 10, -0.124877, 0.0296483, 0.139239),
    _c(2, 1, 1, 14, -0.101475, 0.0225617, 0.231971),
    _c(3, 5, 6, 4, -0.0799915, -0.00729616, 0.063262),
    _c(1, 9, 2, 12, -0.272556, 0.019424, 0.302559),
    _c(3, 4, 2, 14, -0.164292, -0.0321188, 0.0846339),
)

_CLASSIFIERS_TEST3 = _CLASSIFIERS_TEST2


def _test1() -> FingerprinterConfiguration:
    return FingerprinterConfiguration(
        classifiers=_CLASSIFIERS_TEST1,
        filter_coefficients=_CHROMA_FILTER_COEFFICIENTS,
        interpolate=False,
        frame_size=_DEFAULT_FRAME_SIZE,
        frame_overlap=_DEFAULT_FRAME_OVERLAP,
    )


def _test2() -> FingerprinterConfiguration:
    return FingerprinterConfiguration(
        classifiers=_CLASSIFIERS_TEST2,
        filter_coefficients=_CHROMA_FILTER_COEFFICIENTS,
        interpolate=False,
        frame_size=_DEFAULT_FRAME_SIZE,
        frame_overlap=_DEFAULT_FRAME_OVERLAP,
    )


def _test3() -> FingerprinterConfiguration:
    # Framing is left unset for this algorithm.
    return FingerprinterConfiguration(
        classifiers=_CLASSIFIERS_TEST3,
        filter_coefficients=_CHROMA_FILTER_COEFFICIENTS,
        interpolate=True,
    )


def _test4() -> FingerprinterConfiguration:
    config = _test2()
    config.remove_silence = True
    config.silence_threshold = 50
    return config


def _test5() -> FingerprinterConfiguration:
    config = _test2()
    config.frame_size = _DEFAULT_FRAME_SIZE // 2
    config.frame_overlap = _DEFAULT_FRAME_SIZE // 2 - _DEFAULT_FRAME_SIZE // 4
    return config


_FACTORIES = {
    Algorithm.TEST1: _test1,
    Algorithm.TEST2: _test2,
    Algorithm.TEST3: _test3,
    Algorithm.TEST4: _test4,
    Algorithm.TEST5: _test5,
}


def create_configuration(algorithm: int) -> FingerprinterConfiguration:
    """Return a fresh configuration for ``algorithm``; ValueError if unknown."""
    try:
        key = Algorithm(algorithm)
    except ValueError:
        raise ValueError(f"unknown fingerprinting algorithm: {algorithm}") from None
    return _FACTORIES[key]()