"""
Test suite for the complex numbers library

Contains:
- tests/unit/          : Unit tests for individual modules
"""
