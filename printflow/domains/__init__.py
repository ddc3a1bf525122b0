"""
Bounded contexts: pricing and orders.
"""
