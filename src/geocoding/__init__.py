"""
Geocoding Module
--------------
Handles forward and reverse geocoding between addresses and geographic coordinates.
Uses the Google Geocoding API with a durable cache so each location is only fetched once.
"""
