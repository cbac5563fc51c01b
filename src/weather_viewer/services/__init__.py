"""
Shared utilities used by the datasources.

- http.py  - pre-configured ``requests.Session`` (default timeout, User-Agent)
"""
