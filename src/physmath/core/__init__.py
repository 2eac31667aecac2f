"""
Core mathematical primitives, domain models and logging setup.

This module contains the building blocks shared by the formula evaluators
and the self-test harness.
"""
