"""
Command line tools for ringsnake.
"""
