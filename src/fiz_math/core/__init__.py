"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks: scalar capabilities,
the generic Vec4 and the distance unit types.
"""
