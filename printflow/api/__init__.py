"""
HTTP surface: shared dependencies, exception handlers and the API router.
"""
