"""
Data Models Module
----------------
Contains Pydantic models for data validation and serialization.
Defines geographic coordinates and the request/response shapes of the geocoding API.
"""
