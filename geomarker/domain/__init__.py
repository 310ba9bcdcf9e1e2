"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Models: Marker, Position and MarkerDraft
- Validation: Marker payload validator
- Repository Interfaces: Abstract contracts for data access
- Exceptions: Typed validation and storage failures
"""
