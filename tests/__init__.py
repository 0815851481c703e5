"""
Test suite for IEEE 754 special value inspection

Contains:
- tests/unit/          : Unit tests for individual modules
"""
