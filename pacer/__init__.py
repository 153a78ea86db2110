"""Triathlon pacing toolkit.

Parses swim/bike/run entries, derives missing pace, time or distance per
discipline, sums the race total and keeps named pace sets in a key-value store.
"""
