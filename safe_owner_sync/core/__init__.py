"""
Core domain models, reconciliation primitives, and invariants.

This module contains the building blocks that are independent of external
systems (RPC nodes, the filesystem, the command line).
"""
