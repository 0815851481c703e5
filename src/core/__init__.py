"""
Core domain models, mathematical primitives, and invariants.

This module contains the IEEE 754 classifier, the FloatValue model and the
JSON contracts for inspection reports.
"""
