"""
Command-line interface for tiresize.
"""
