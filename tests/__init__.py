"""
Test suite for rwa-ledger

Contains:
- tests/unit/          : Unit tests for individual components and end-to-end call scenarios
"""
