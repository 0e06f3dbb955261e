"""Core utilities and shared primitives.

Modules in this package are framework-agnostic where possible and focused on
configuration, config-file aggregation, number formatting, predicates and
small reusable helpers.
"""
