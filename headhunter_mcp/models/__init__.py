"""Typed argument records for the research operations."""

from .arguments import (
    RECORD_TYPES,
    ExecutiveBriefArgs,
    InterviewPreparationArgs,
    LinkedInIntelligenceArgs,
    OperationArguments,
    Plan306090Args,
    ResearchCompanyArgs,
    RevenueEngineArgs,
)

__all__ = [
    'OperationArguments',
    'RECORD_TYPES',
    'ResearchCompanyArgs',
    'RevenueEngineArgs',
    'LinkedInIntelligenceArgs',
    'InterviewPreparationArgs',
    'ExecutiveBriefArgs',
    'Plan306090Args',
]
