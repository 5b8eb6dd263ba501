"""
Test suite for fiz_math

Contains:
- tests/unit/          : Unit tests for individual modules
"""
