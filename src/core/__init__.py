"""
Core abstractions of the homotopy calculus.

This module contains the foundational building blocks that every primitive
and combinator depends on: the parameter-space algebra, the Homotopy base
class and the boundary-contract checkers.
"""
