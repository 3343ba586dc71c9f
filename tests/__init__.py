"""
Test suite for calcucalc

Contains:
- tests/unit/          : Unit tests for monomials, polynomials, canonical form and interval analysis
"""
