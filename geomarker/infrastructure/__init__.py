"""
Infrastructure Layer
====================

Concrete implementations of the domain repository interfaces.

Contains:
- db: MongoDB connection and marker repository
- memory: Process-local marker repository for development and tests
"""
