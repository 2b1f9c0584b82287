"""
Events, event shows, and per-venue show listings.
"""
