"""
Product API - CRUD service over a products table
"""
__version__ = "1.0.0"
