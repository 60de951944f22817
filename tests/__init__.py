"""
Test suite for rcgal

Contains:
- tests/unit/          : Unit tests for individual modules
"""
