"""
Habity API service.

Backend for the Habity habit tracker, including Habitify data import.
"""

__version__ = "0.1.0"
