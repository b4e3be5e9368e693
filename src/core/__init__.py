"""
Core numeric primitives, domain models, and contracts of the curve engine.

This package is independent of external systems (RPC nodes, databases,
HTTP routes): every function is pure and operates on explicit arguments.
"""
