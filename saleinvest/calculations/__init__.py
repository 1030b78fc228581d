"""
Financial Calculation Engine

Pure calculation modules for the sale of a home and the rental portfolio
bought with the proceeds. Nothing here holds state between calls.
"""

from saleinvest.calculations import tax, sale, amortization, investment

__all__ = ["tax", "sale", "amortization", "investment"]
