"""
Site Analytics App

Tracks a site-wide visit counter for the college website.

Features:
- Lazily created named counters
- Atomic increments safe under concurrent requests
"""
