"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks: finite-float
safeguards, the error taxonomy and the geometric value types.
"""
