"""Service layer for business logic.

Services hold the hotel access rules, keeping routes thin and focused
on HTTP handling.

Layer hierarchy:
    Routes (HTTP) -> Services (Business Logic) -> Repositories (Database)

Services should:
- Decide access from enrollment, ticket and ticket type
- Depend on a read store protocol rather than a concrete session
- Raise typed errors; routes map them to status codes

Services should NOT:
- Directly execute SQL queries (use repositories)
- Know about HTTP request/response details
"""
