"""
AI Lab analysis core.

Two independent primitives:
    - ai_lab.forecasting  : least-squares trend forecaster over a price series
    - ai_lab.features.sentiment : lexicon-based line sentiment scorer

Everything else (dashboard, api, cli) calls into these and renders results.
"""

__version__ = "1.0.0"
