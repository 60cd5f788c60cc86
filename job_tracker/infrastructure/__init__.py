"""
Infrastructure layer package.
"""
