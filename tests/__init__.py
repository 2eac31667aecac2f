"""
Test suite for physmath

Contains:
- tests/unit/          : Unit tests for individual modules
"""
