"""
Skin Health Decision Engine

Turns skin quiz answers and capture flags into scores, a health index,
a risk tier and prioritized care recommendations.
"""
