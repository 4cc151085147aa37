"""
Processing Package.

Tokenization and phrase-level analysis on top of the core classifier.
"""
