"""
Cross-app integration tests for the college website backend.
"""
