"""
pocket: personal-finance bookkeeping core.

Currencies, categories, transactions and budgets with ownership rules,
plus on-demand budget reports and period analytics.
"""

__version__ = "0.1.0"
