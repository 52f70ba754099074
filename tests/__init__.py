"""
Test suite for genmath

Contains:
- tests/unit/          : Unit tests for individual modules
"""
