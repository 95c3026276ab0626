import pytest

from epaplace.range import Range, get_valid_range


@pytest.mark.parametrize(
    "sequence, begin, span",
    [
        ("---------GGGCCCGTAT-------", 9, 10),
        ("GGGCCCGTAT-------", 0, 10),
        ("-GGGC---CCG-TAT", 1, 14),
        ("---ATAGCT--", 3, 6),
    ],
)
def test_valid_range(sequence, begin, span):
    r = get_valid_range(sequence)
    assert (r.begin, r.span) == (begin, span)
    assert r


def test_all_gaps_is_false():
    r = get_valid_range("-----")
    assert r.span == 0
    assert not r


def test_no_gaps_covers_everything():
    seq = "ACGTACGT"
    assert get_valid_range(seq) == Range(0, len(seq))


def test_empty_sequence_rejected():
    with pytest.raises(ValueError):
        get_valid_range("")


def test_str():
    assert str(Range(3, 6)) == " begin 3 span 6"