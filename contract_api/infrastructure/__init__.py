"""
Infrastructure layer package.

Adapters implementing domain ports and wrappers around
third-party libraries.
"""
