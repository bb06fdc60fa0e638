"""
Output modules for the number labeler.

This package contains output handling:
- writer: Line-per-element stream writer
"""
