"""
Utility functions module.

Time Semantics:
- Calculation functions never read the clock; every evaluation time is passed in
- "Now" is resolved only at the boundary (engine, CLI, display helpers)
- Display helpers degrade to placeholders instead of raising
"""
