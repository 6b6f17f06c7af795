"""
Core module - configuration, logging, errors and the admin PIN check.
"""
