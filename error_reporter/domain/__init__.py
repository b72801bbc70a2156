"""
Domain layer.

Pure logic, entities, ports (ABCs) and errors. No framework imports.
"""
