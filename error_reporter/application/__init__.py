"""
Application layer.

Use cases coordinating domain entities and ports.
"""
