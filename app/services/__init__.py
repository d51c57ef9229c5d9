"""
Service layer: one module per domain, each public operation one transaction
"""
