"""
Test suite for the Medical Appointments API.

Contains integration tests for the appointment, user, doctor and login routes.
"""
import os

# Set environment for testing
os.environ["TESTING"] = "1"
