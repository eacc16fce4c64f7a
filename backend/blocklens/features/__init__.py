"""
Feature modules for BlockLens.

Each feature is a self-contained module with:
- schemas.py - Pydantic schemas
- service.py - Business logic
- calculators/ - Calculation logic (optional)
"""
