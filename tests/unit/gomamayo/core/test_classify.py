"""
Tests for gomamayo classification.
"""

import pytest

from gomamayo.core.classify import classify, compute_ary_and_degree, junction_degrees, junctions
from gomamayo.core.models import GomamayoKind, Junction

CASES = [
    (["ゴマ", "マヨ"], 1, 1),
    (["ハクレー", "レーム"], 1, 2),
    (["モバイル", "ルータ", "タンマツ"], 2, 1),
    (["タイコ", "コーボ", "ボシュー", "シューリョー"], 3, 2),
    (["シンリョー", "ウケツケ"], 0, 0),
    (["オレンジ", "ジュース"], 0, 0),
    (["ヤスダ", "ダイ", "サーカス"], 1, 1),
    (["フクヤマ", "マサハル", "サン"], 1, 1),
    (["セワ", "ヤキ", "キツネ", "ノ", "セン", "キツネ", "サン"], 1, 1),
    (["サイレンス", "スズカ"], 1, 1),
    (["チョーキ", "キンリ"], 1, 1),
    (["ハク", "レー", "レーム"], 1, 2),
    (["カブシキ", "コーカイ", "カイツケ"], 1, 2),
    (["ジコ", "コーテー"], 1, 1),
    (["センザイ", "イチグー"], 1, 1),
    (["トーシ", "シンタク"], 1, 1),
    (["ショーカ", "カツドー"], 1, 1),
    (["ギンコー", "コーザ"], 1, 2),
]


@pytest.mark.parametrize("readings, expected_ary, expected_degree", CASES)
def test_compute_ary_and_degree(readings, expected_ary, expected_degree):
    """Ary and degree match the known classification of each phrase."""
    assert compute_ary_and_degree(readings) == (expected_ary, expected_degree)


@pytest.mark.parametrize("readings, expected_ary, expected_degree", CASES)
def test_classify_kind(readings, expected_ary, expected_degree):
    """Kind is present exactly when some junction overlaps."""
    analysis = classify(readings)
    if expected_ary:
        assert analysis.kind == GomamayoKind(ary=expected_ary, degree=expected_degree)
        assert analysis.is_gomamayo
    else:
        assert analysis.kind is None
        assert not analysis.is_gomamayo


def test_classify_preserves_readings_in_order():
    """The analysis carries the readings it was computed from."""
    readings = ["モバイル", "ルータ", "タンマツ"]
    assert classify(readings).readings == readings


@pytest.mark.parametrize("readings", [[], ["ゴママヨ"], ["ココ"]])
def test_classify_fewer_than_two_readings(readings):
    """A phrase with no junctions is never a gomamayo."""
    analysis = classify(readings)
    assert analysis.kind is None
    assert compute_ary_and_degree(readings) == (0, 0)
    assert junction_degrees(readings) == []


def test_junction_degrees_are_in_phrase_order():
    """One degree per consecutive pair."""
    assert junction_degrees(["タイコ", "コーボ", "ボシュー", "シューリョー"]) == [1, 1, 2]


def test_junction_order_matters():
    """Swapping readings changes the junctions."""
    assert compute_ary_and_degree(["マヨ", "ゴマ"]) == (0, 0)


def test_junctions():
    """Junctions pair neighbouring readings with their overlap."""
    assert junctions(["ゴマ", "マヨ", "ネーズ"]) == [
        Junction(left="ゴマ", right="マヨ", degree=1),
        Junction(left="マヨ", right="ネーズ", degree=0),
    ]


def test_ary_counts_all_overlapping_junctions():
    """Ary counts every overlapping junction; degree is the largest."""
    readings = ["ゴマ", "マヨ", "ヨーコー", "コーヒー"]
    degrees = junction_degrees(readings)
    ary, degree = compute_ary_and_degree(readings)

    assert degrees == [1, 1, 2]
    assert ary == sum(1 for d in degrees if d > 0)
    assert degree == max(degrees)
