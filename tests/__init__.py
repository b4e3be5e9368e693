"""
Test suite for the bonding curve pricing engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
