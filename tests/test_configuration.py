import pytest

from audioprint.configuration import Algorithm, create_configuration
from audioprint.filters import Filter
from audioprint.quantizer import Quantizer


def test_test1_framing_and_coefficients():
    config = create_configuration(Algorithm.TEST1)
    assert config.frame_size == 4096
    assert config.filter_coefficients == (0.25, 0.75, 1.0, 0.75, 0.25)
    assert len(config.classifiers) == 16
    assert config.sample_rate == 11025


def test_test1_first_classifier():
    first = create_configuration(Algorithm.TEST1).classifiers[0]
    assert first.filter == Filter(0, 0, 3, 15)
    assert first.quantizer == Quantizer(2.10543, 2.45354, 2.69414)


def test_max_filter_width_is_widest_filter():
    config = create_configuration(Algorithm.TEST2)
    widths = [c.filter.width for c in config.classifiers]
    assert config.max_filter_width() in widths
    assert all(w <= config.max_filter_width() for w in widths)


def test_interpolation_flags():
    assert create_configuration(Algorithm.TEST1).interpolate is False
    assert create_configuration(Algorithm.TEST3).interpolate is True


def test_test4_trims_silence_on_top_of_test2():
    t2 = create_configuration(Algorithm.TEST2)
    t4 = create_configuration(Algorithm.TEST4)
    assert t4.remove_silence is True
    assert t4.silence_threshold == 50
    assert t4.classifiers == t2.classifiers
    assert t2.remove_silence is False


def test_test5_halves_the_frame():
    t2 = create_configuration(Algorithm.TEST2)
    t5 = create_configuration(Algorithm.TEST5)
    assert t5.frame_size * 2 == t2.frame_size
    assert t5.classifiers == t2.classifiers


def test_durations_in_seconds_match_samples():
    config = create_configuration(Algorithm.TEST1)
    assert config.item_duration_in_seconds() * config.sample_rate == pytest.approx(config.item_duration())
    assert config.delay_in_seconds() * config.sample_rate == pytest.approx(config.delay())
    assert config.item_duration() + config.frame_overlap == config.frame_size
    assert config.delay() > config.frame_overlap


def test_integer_algorithm_accepted():
    assert create_configuration(1) == create_configuration(Algorithm.TEST2)


def test_unknown_algorithm_rejected():
    with pytest.raises(ValueError):
        create_configuration(99)


def test_configurations_are_independent():
    a = create_configuration(Algorithm.TEST2)
    a.silence_threshold = 7
    assert create_configuration(Algorithm.TEST2).silence_threshold == 0