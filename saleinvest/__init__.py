"""
Sale & Investment Calculator.

Net proceeds of a home sale and the rental portfolio metrics of
reinvesting them.
"""
