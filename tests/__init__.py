"""
Test suite for the homogeneous-coordinate math kernel

Contains:
- tests/unit/ : Unit tests for individual modules
"""
