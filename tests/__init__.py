"""
Test suite for numconv

Contains:
- tests/unit/          : Unit tests for individual modules and conversion properties
"""
