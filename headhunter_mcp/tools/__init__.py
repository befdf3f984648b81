"""
Research tools exposed as MCP operations.

``create_handlers`` binds each operation name to the coroutine that
implements it; the catalog supplies the matching schema.
"""

from typing import Dict, Optional

from ..registry import Handler
from ..sources import DataSources
from ..templates import TemplateEngine
from .company_research import CompanyResearchTool
from .executive_brief import ExecutiveBriefTool
from .interview_prep import InterviewPrepTool
from .linkedin_intelligence import LinkedInIntelligenceTool
from .revenue_engine import RevenueEngineTool


def create_handlers(
    templates: Optional[TemplateEngine] = None,
    sources: Optional[DataSources] = None,
) -> Dict[str, Handler]:
    """
    Build the handler table for all research operations.

    Args:
        templates: Template engine (default: bundled library)
        sources: Data sources (default: simulated sources)
    """
    templates = templates or TemplateEngine()
    sources = sources or DataSources()

    interview = InterviewPrepTool(templates, sources)
    return {
        "research_company": CompanyResearchTool(templates, sources).execute,
        "analyze_revenue_engine": RevenueEngineTool(templates, sources).execute,
        "linkedin_intelligence": LinkedInIntelligenceTool(templates, sources).execute,
        "interview_preparation": interview.execute,
        "executive_brief": ExecutiveBriefTool(templates, sources).execute,
        "create_30_60_90_plan": interview.create_plan,
    }


__all__ = [
    'create_handlers',
    'CompanyResearchTool',
    'ExecutiveBriefTool',
    'InterviewPrepTool',
    'LinkedInIntelligenceTool',
    'RevenueEngineTool',
]
