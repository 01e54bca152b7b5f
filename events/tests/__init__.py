"""
Tests for events app.
"""
