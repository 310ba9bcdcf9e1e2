"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- Use Cases: Business operations (create marker, list markers)
- Services: Application services that coordinate the use cases
- DTO: Pydantic models for API responses
"""
