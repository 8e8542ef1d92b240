"""
HTTP API for tiresize.
"""
