"""
Company research tool.

Builds the company profile report: overview, business model, technology
assessment, challenges and interview intelligence for a target role.
"""

import logging

from ..config import get_setting
from ..models import ResearchCompanyArgs
from ..sources import DataSources
from ..templates import TemplateEngine
from ..utils.markdown import bullet_list, humanize

logger = logging.getLogger(__name__)


class CompanyResearchTool:
    """Handles the research_company operation."""

    def __init__(self, templates: TemplateEngine, sources: DataSources):
        self.templates = templates
        self.sources = sources

    async def execute(self, args: ResearchCompanyArgs) -> str:
        """Generate the company research report."""
        logger.info(f"Researching {args.company} for {args.role}")

        data = await self.sources.gather_company_data(args.company)
        basic = data["basic_info"]
        business = data["business_model"]
        stack = data["technology_stack"]

        variables = {
            "company": args.company,
            "role": args.role,
            "focus_areas": ", ".join(humanize(area) for area in args.focus_areas) or "None",
            "research_date": self.sources.research_date(),
            "revenue_summary": ", ".join(business["revenue_streams"]).lower(),
            "revenue_streams": ", ".join(business["revenue_streams"]),
            "pricing_strategy": business["pricing_strategy"],
            "unit_economics": business["unit_economics"],
            "languages": ", ".join(stack["languages"]),
            "frameworks": ", ".join(stack["frameworks"]),
            "cloud_platform": stack["cloud_platform"],
            "architecture": stack["architecture"],
            "challenges": bullet_list(data["challenges"]),
            "opportunities": bullet_list(data["opportunities"]),
            "recent_news": bullet_list(data["recent_news"]),
            "server_version": get_setting("server_version"),
            **basic,
        }
        return self.templates.render("company_research", variables)
