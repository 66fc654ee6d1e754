"""
Core numeric types and floating-point primitives.

This module contains the foundational building blocks that everything else
in the library depends on: the Complex value type and IEEE-754 helpers.
"""
