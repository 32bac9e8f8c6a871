"""
Transformation Layer - Pure, Deterministic Functions

This layer contains the text transforms and their registry.
- Pure functions (text → text)
- No I/O operations
- Unit testable
- Deterministic results
"""
