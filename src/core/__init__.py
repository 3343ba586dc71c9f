"""
Core algebra: domain values, numerical primitives, and canonical form.

This module contains the foundational building blocks for single-variable
polynomial manipulation. It performs no I/O and holds no shared state.
"""
