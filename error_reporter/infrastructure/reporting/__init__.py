"""
Infrastructure adapters for the reporting bounded context.

Implements the domain ports: framework error adapters, the HTML
diagnostic page renderer and link decorators.
"""
