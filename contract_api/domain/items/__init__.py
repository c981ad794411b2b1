"""
Items bounded context — domain layer.

The catalogue of items served by the paginated list endpoints.
"""
