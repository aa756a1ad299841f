"""
Medical Appointments API

A FastAPI-based service for booking appointments between users and doctors,
scoped through either party, with doctors limited to read-only access.
"""

__version__ = "1.0.0"
