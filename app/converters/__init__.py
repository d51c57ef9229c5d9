"""
Converters package

Pure functions mapping entities to immutable transfer objects (frozen
dataclasses) and request values to new, unsaved entities.
"""
