"""
Test suite for NMLibs

Contains:
- tests/unit/          : Unit tests for individual modules
"""
