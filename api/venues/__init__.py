"""
Venue lookups.
"""
