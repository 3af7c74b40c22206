"""
HTTP API for Autocrop
"""
