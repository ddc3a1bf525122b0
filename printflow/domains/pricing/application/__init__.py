"""
Pricing Application Layer

Ports, application services (calculator, quote session) and use cases.
"""
