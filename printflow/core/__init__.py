"""
Core building blocks shared by the pricing and orders domains
"""
