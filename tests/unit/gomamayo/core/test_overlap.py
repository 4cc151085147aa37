"""
Tests for boundary overlap between readings.
"""

import pytest

from gomamayo.core.mora import segment_morae
from gomamayo.core.overlap import find_overlap, find_reading_overlap


def test_single_mora_overlap():
    """ゴマ and マヨ share マ."""
    assert find_overlap(["ゴ", "マ"], ["マ", "ヨ"]) == 1


def test_two_mora_overlap():
    """ハクレー and レーム share レー."""
    assert find_reading_overlap("ハクレー", "レーム") == 2


def test_no_overlap():
    """Readings that do not meet at the boundary."""
    assert find_reading_overlap("シンリョー", "ウケツケ") == 0


def test_overlap_compares_whole_morae():
    """ジ does not match ジュ even though the characters start the same."""
    assert find_reading_overlap("オレンジ", "ジュース") == 0


def test_overlap_with_empty_sequence():
    """An empty side never overlaps."""
    assert find_overlap([], ["マ"]) == 0
    assert find_overlap(["マ"], []) == 0
    assert find_overlap([], []) == 0


def test_overlap_prefers_longest_match():
    """The longest suffix/prefix match wins over shorter ones."""
    assert find_overlap(["ア", "カ", "ア", "カ"], ["ア", "カ", "ア", "カ", "イ"]) == 4
    assert find_reading_overlap("ココ", "ココ") == 2


def test_overlap_of_identical_readings():
    """Identical readings overlap completely."""
    assert find_reading_overlap("キツネ", "キツネ") == 3


def test_overlap_accepts_tuples():
    """Any sequence of morae is accepted."""
    assert find_overlap(("コ", "ー"), ("コ", "ー", "ザ")) == 2


@pytest.mark.parametrize(
    "left, right",
    [
        ("ギンコー", "コーザ"),
        ("コーカイ", "カイツケ"),
        ("ヤスダ", "ダイ"),
        ("チョーキ", "キンリ"),
        ("ショーカ", "カツドー"),
        ("セワ", "ヤキ"),
        ("ア", "アアア"),
    ],
)
def test_overlap_is_maximal_and_bounded(left, right):
    """The result is a real match, within bounds, and no longer one exists."""
    left_morae, right_morae = segment_morae(left), segment_morae(right)
    degree = find_overlap(left_morae, right_morae)

    assert 0 <= degree <= min(len(left_morae), len(right_morae))
    if degree:
        assert left_morae[-degree:] == right_morae[:degree]
    for longer in range(degree + 1, min(len(left_morae), len(right_morae)) + 1):
        assert left_morae[-longer:] != right_morae[:longer]
