"""
Application layer for the reporting bounded context.

Use cases that decide how an error is reported. No framework or
infrastructure imports allowed.
"""
