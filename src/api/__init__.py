"""
API Module
---------
Provides RESTful API endpoints for the geo tools using FastAPI.
Features include:
- Country name lookup by ISO code
- Forward and reverse geocoding
- Batch geocoding of addresses
- Distance between two coordinates
"""
