"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- v1: Marker routes and their dependencies
- request_body: Size-bounded JSON body reader
- exception_handlers: Domain error to HTTP response mapping
"""
