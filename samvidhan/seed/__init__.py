"""
Sample constitution content for development and tests.
"""
