"""
Test suite for the OrderTaking PlaceOrder workflow

Contains:
- tests/unit/          : Unit tests for constrained types, workflow steps and contracts
"""
