"""Keyword indexing and top-k query package.

This package provides the in-memory search stack:
- analyzers: Keyword normalization (punctuation, case, noise words)
- sources: File-backed document name, noise word and word streams
- loader: Per-document keyword frequency counting
- merger: Frequency-ordered posting list maintenance
- top_k: Two-keyword OR query with frequency-ordered results
"""
