"""
Application services package.
"""
