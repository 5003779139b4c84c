"""
Pydantic schema definitions for API payloads.

Each entity kind (accounts, branches, customers, employees) defines
one model used for both request and response bodies.  Field names are
snake_case in Python and PascalCase on the wire, matching the names
the grid clients bind to.
"""
