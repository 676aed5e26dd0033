"""Unified command-line interface for pantryline.

Usage:
    pantryline parse <file>
    pantryline parse <file> --format json --show-skipped
    pantryline parse <file> --vocabulary extra_vocabulary.toml
    pantryline vocabulary
"""
