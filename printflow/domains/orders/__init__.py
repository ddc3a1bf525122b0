"""
Orders Domain

Production workflow bookkeeping for orders owned by the order backend.
"""
