"""
Core domain models, mathematical primitives and errors.

This module contains the foundational building blocks that every
conversion and spatial operation is built on.
"""
