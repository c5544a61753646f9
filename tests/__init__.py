"""
Test suite for the fixed-point numeric type

Contains:
- tests/unit/          : Unit tests for individual modules and documented examples
"""
