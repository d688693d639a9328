"""
ICO App - Token Vesting & Allocation Calculation Engine

A pure calculation library for token-sale tooling. Splits a total supply
into allocation buckets, computes cliff + linear vesting at arbitrary
evaluation times, expands vesting into monthly and dated schedules, and
validates allocation tables.
"""

__version__ = "0.1.0"
__author__ = "ICO App Team"
