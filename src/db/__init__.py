"""
Database Module
-------------
Handles database connections and ORM models for the SQL-backed geocoding cache.
Uses SQLAlchemy and stores reverse and forward cache entries in a single keyed table.
"""
