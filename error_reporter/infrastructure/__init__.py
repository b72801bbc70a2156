"""
Infrastructure layer.

Adapters (frameworks, file IO) implementing domain ports.
"""
