"""
HTTP blueprints, one per resource under /api
"""
