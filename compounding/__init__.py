"""
Compound interest calculator - projections, cost of waiting and retirement views.
"""
