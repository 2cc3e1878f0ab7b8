"""
Generic utility functions shared across modules.

Includes arithmetic, text and sequence helpers, input validation, localized
messages, clock abstractions, call recording, logging setup, and error classes.
"""
