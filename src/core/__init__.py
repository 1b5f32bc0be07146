"""
Core domain models, constrained types, and contracts.

This module contains the foundational building blocks that are independent
of external systems (catalogs, address services, mailers, etc.).
"""
