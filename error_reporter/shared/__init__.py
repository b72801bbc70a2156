"""
Shared module package.

Contains cross-cutting concerns used across the application:
- Logging configuration
"""
