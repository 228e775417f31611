"""
Request and response schemas of the store domain.
"""
