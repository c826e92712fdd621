"""
Infrastructure Layer
====================

MongoDB connection cache and repository implementations.
"""
