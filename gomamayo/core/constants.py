"""
Core Constants Module.

This module defines the character sets and message templates used across the package.
"""

# Small kana that attach to the preceding character to form a single mora
SMALL_KATAKANA = "ャュョァィゥェォ"
SMALL_HIRAGANA = "ゃゅょぁぃぅぇぉ"
SMALL_KANA = frozenset(SMALL_KATAKANA + SMALL_HIRAGANA)

# Prolonged sound mark; always a mora of its own
CHOONPU = "ー"

# UniDic feature names, in order of preference, that hold a token's reading
READING_FIELDS = ("pron", "kana")

# Feature values MeCab uses for "no value"
MISSING_FEATURE_VALUES = frozenset({"", "*"})

# Result formats
GOMAMAYO_FORMAT = "{phrase}: {ary}項{degree}次のゴママヨです。"
NOT_GOMAMAYO_FORMAT = "{phrase}: ゴママヨではありません。"

# Diagnostic formats
TOKENIZATION_ERROR_FORMAT = "Error: 入力を分かち書きできませんでした: {detail}。"
UNKNOWN_READING_ERROR_FORMAT = "Error: 単語の読み方を取得できませんでした: {text}"
INPUT_ERROR_FORMAT = "Error: 入力を読み込めませんでした: {detail}"
UNKNOWN_ERROR_FORMAT = "Error: 不明なエラーが発生しました: {detail}"
