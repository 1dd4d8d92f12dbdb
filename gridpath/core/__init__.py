"""
Configuration and errors shared across gridpath
"""
