"""
Interfaces layer.

FastAPI routers, Pydantic schemas and the error-reporting middleware.
"""
