"""
Shared utilities.

- http.py - async HTTP client factory used by every provider
"""
