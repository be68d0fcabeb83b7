"""
Desk pricing - deterministic calculation engine.

Pure Python math. No database, no network.
Given canonical (already snapped and validated) dimensions plus material,
finish, tier and quantity, produce an exact price breakdown in KRW.
"""
