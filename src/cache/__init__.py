"""
Cache Module
----------
Durable memoization of geocoding results.
Keeps two namespaces: coordinates -> address (reverse) and address -> coordinates (forward).
Entries are permanent once written; there is no eviction, expiry or locking.
"""
