"""
Test suite for jismesh

Contains:
- tests/unit/          : Unit tests for individual modules
"""
