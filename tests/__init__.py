"""
Test suite for the homotopy calculus

Contains:
- tests/unit/          : Unit tests for primitives, combinators and contract checkers
"""
