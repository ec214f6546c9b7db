"""
Fabrication and installation cost calculators.

Pure Python math. No I/O.
Each calculator reads its slice of the PricingRuleTable and returns the
cost together with the ordered line items that produced it.
"""
