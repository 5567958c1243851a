"""
Geo Utilities Module
-----------------
Stateless helpers consumed directly by callers:
- Great-circle distance between two coordinates
- ISO country code to country name lookup
"""
