"""
Tests for venues app.
"""
