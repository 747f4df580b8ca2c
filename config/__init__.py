"""
Configuration, storage models and database access.
"""
