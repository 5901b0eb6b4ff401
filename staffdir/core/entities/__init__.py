"""
Business entities representing core domain concepts.

Exports:
- Employee: An employee record of the directory (immutable snapshot)
"""

from staffdir.core.entities.employee import Employee

__all__ = [
    "Employee",
]
