"""
Value types and input parsers for the calculation engine.

Provides the immutable records exchanged between planner, validator and
vesting calculator, and the conversions from external representations.
"""
