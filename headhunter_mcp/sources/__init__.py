"""Simulated data sources used by the research tools."""

from .data_sources import DEFAULT_BUSINESS_MODEL, REVENUE_PROFILES, DataSourceError, DataSources

__all__ = [
    'DataSources',
    'DataSourceError',
    'DEFAULT_BUSINESS_MODEL',
    'REVENUE_PROFILES',
]
