"""
Integration Tests Package

Engine-level checks across gate, resolver, detector and audit.

TEST AXIOMS:
=============
1. Determinism: same snapshot + catalog = identical evaluation
2. Observation only: auditing never changes an outcome
3. Explicit failure: configuration faults raise, never fall back
"""
