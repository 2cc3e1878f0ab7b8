"""
Data fetch abstractions and the simulated (timer-based) fetcher.
"""
