"""
Core building blocks: configuration, API clients and error types
"""
