"""
Orders Application Layer

Ports, the workflow engine, the order aggregator and use cases.
"""
