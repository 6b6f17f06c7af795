"""
Services module - profile persistence, AI proxy and text cleanup.
"""
