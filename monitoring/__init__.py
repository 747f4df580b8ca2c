"""
Monitoring Module

Scraping of the pool home page for the current occupancy percentage.
"""
