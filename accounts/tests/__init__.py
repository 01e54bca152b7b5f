"""
Tests for accounts app.
"""
