"""
Configuration management.

Loads locale, logging and fetch defaults from environment variables and .env files.
"""
