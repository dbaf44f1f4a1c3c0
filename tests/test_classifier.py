import pytest

from audioprint.classifier import Classifier
from audioprint.filters import Filter
from audioprint.quantizer import Quantizer


class GridImage:
    def __init__(self, rows):
        self.rows = rows

    def area(self, x1, y1, x2, y2):
        return float(sum(sum(r[y1:y2]) for r in self.rows[x1:x2]))


def ones(rows=6, cols=6):
    return GridImage([[1.0] * cols for _ in range(rows)])


def test_low_response_gives_zero():
    c = Classifier(Filter(0, 0, 2, 2), Quantizer(10.0, 20.0, 30.0))
    assert c.classify(ones(), 0) == 0


def test_high_response_gives_three():
    c = Classifier(Filter(0, 0, 2, 2), Quantizer(-3.0, -2.0, -1.0))
    assert c.classify(ones(), 0) == 3


def test_classify_composes_filter_and_quantizer():
    f = Filter(0, 1, 2, 3)
    q = Quantizer(0.5, 1.5, 2.5)
    c = Classifier(f, q)
    image = ones()
    assert c.classify(image, 1) == q.quantize(f.apply(image, 1))


def test_default_classifier_rejects_zero_sized_filter():
    with pytest.raises(ValueError):
        Classifier().classify(ones(), 0)


def test_defaults_are_independent():
    a = Classifier()
    b = Classifier()
    a.filter.width = 5
    assert b.filter.width == 0


def test_str():
    c = Classifier(Filter(0, 0, 3, 15), Quantizer(2.10543, 2.45354, 2.69414))
    assert str(c) == "Classifier(Filter(0, 0, 3, 15), Quantizer(2.10543, 2.45354, 2.69414))"