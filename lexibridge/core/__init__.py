"""
Core infrastructure for the translation service.
Provides logging, exceptions, latency metrics, the result cache and database access.
"""
