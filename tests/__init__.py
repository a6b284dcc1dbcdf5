"""
Test suite for safe-owner-sync

Contains:
- tests/unit/          : Unit tests for individual modules and the pipeline
"""
