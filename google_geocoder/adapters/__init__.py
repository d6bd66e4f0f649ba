"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- HTTP transport (requests)
- Geocoding facade, response decoding and request signing (Google Maps)
"""
