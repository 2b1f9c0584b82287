"""
Movie catalog CRUD.
"""
