"""
Core
====

Cross-cutting configuration: settings, logging, rate limiting and HTTP middleware.
"""
