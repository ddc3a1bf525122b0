"""
Pricing Domain

Decoration quotes from the remote pricing service with a local fallback.
"""
