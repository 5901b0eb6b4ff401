"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They validate and normalize caller input before delegating to the ports.

This layer contains:
- normalization: Pure normalize-then-validate functions (email rules, pagination bounds)
- directory: DirectoryService (create, delete, paginated listing)

Services depend on ports (interfaces) from core/, never on concrete
implementations from infrastructure/.
"""
