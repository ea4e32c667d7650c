"""
Test suite for quadc

Contains:
- tests/unit/  : Unit tests for individual modules
- tests/data/  : Sample evidence documents
"""
