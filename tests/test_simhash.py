from audioprint.simhash import simhash


def test_empty_is_zero():
    assert simhash([]) == 0


def test_single_value_is_itself():
    for value in (0, 1, 0x80000000, 0xDEADBEEF):
        assert simhash([value]) == value


def test_repeated_value_is_itself():
    assert simhash([0x12345678] * 5) == 0x12345678


def test_majority_wins():
    a, b = 0xF0F0F0F0, 0x0F0F0F0F
    assert simhash([a, b, a]) == a
    assert simhash([b, a, b]) == b


def test_tie_keeps_only_common_bits():
    a, b = 0xFF00FF00, 0xF0F0F0F0
    assert simhash([a, b]) == a & b


def test_accepts_generator():
    assert simhash(v for v in [0xAAAAAAAA, 0xAAAAAAAA]) == 0xAAAAAAAA


def test_result_fits_in_32_bits():
    assert simhash([0xFFFFFFFF, 0xFFFFFFFF]) <= 0xFFFFFFFF