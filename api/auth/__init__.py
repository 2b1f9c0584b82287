"""
Signup and login.
"""
