"""
Reporting bounded context — domain layer.

This module contains the framework-free part of error reporting:
- Status-code validation and reason phrases
- Normalization of arbitrary error values
- Production redaction
- Ports for error adapters and page renderers
"""
