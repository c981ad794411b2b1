"""
Domain layer package.

Contains entities and port interfaces.
No framework imports, no IO, no side effects.
"""
