"""
Executive brief tool.

Assembles a brief from the requested sections. Each known section is a
``brief_<section>`` template; unknown section names are reported as
skipped rather than failing the call.
"""

import logging
from typing import Dict, List, Tuple

from ..config import get_setting
from ..models import ExecutiveBriefArgs
from ..sources import DataSources
from ..templates import TemplateEngine
from ..utils.markdown import bullet_list, humanize

logger = logging.getLogger(__name__)

KNOWN_SECTIONS: Tuple[str, ...] = (
    "company_overview",
    "strategic_fit",
    "key_challenges",
    "interview_strategy",
    "next_steps",
    "compensation",
    "risk_assessment",
)

STAGE_PRIORITIES: Dict[str, str] = {
    "research": "Build company understanding and identify introduction paths",
    "application": "Tailor positioning and secure a referral",
    "interview": "Rehearse scenarios and align stories to the panel",
    "negotiation": "Anchor on value delivered and agree on scope before numbers",
}


class ExecutiveBriefTool:
    """Handles the executive_brief operation."""

    def __init__(self, templates: TemplateEngine, sources: DataSources):
        self.templates = templates
        self.sources = sources

    def split_sections(self, requested: List[str]) -> Tuple[List[str], List[str]]:
        """Partition requested names into (known, skipped), keeping request order."""
        known, skipped = [], []
        for name in requested:
            if name in KNOWN_SECTIONS:
                if name not in known:
                    known.append(name)
            elif name not in skipped:
                skipped.append(name)
        return known, skipped

    async def execute(self, args: ExecutiveBriefArgs) -> str:
        """Generate the executive brief."""
        known, skipped = self.split_sections(args.include_sections)
        logger.info(f"Building executive brief for {args.company} with {len(known)} sections")
        if skipped:
            logger.warning(f"Skipping unknown brief sections: {', '.join(skipped)}")

        data = await self.sources.gather_company_data(args.company)
        stack = data["technology_stack"]
        business = data["business_model"]

        section_variables = {
            "company": args.company,
            "role": args.role,
            "industry": data["basic_info"]["industry"],
            "revenue_streams": ", ".join(business["revenue_streams"]),
            "pricing_strategy": business["pricing_strategy"],
            "architecture": stack["architecture"],
            "languages": ", ".join(stack["languages"]),
            "cloud_platform": stack["cloud_platform"],
            "challenges": bullet_list(data["challenges"]),
            "opportunities": bullet_list(data["opportunities"]),
            "first_challenge": data["challenges"][0].lower(),
        }
        rendered = [
            self.templates.render(f"brief_{name}", section_variables) for name in known
        ]

        skipped_notice = ""
        if skipped:
            skipped_notice = f"\n**Skipped Sections** (not recognized): {', '.join(skipped)}\n"

        variables = {
            "company": args.company,
            "role": args.role,
            "application_stage": args.application_stage,
            "stage_priorities": STAGE_PRIORITIES[args.application_stage],
            "section_list": ", ".join(humanize(name) for name in known) or "None",
            "skipped_notice": skipped_notice,
            "sections": "".join(rendered) or "\nNo sections requested.\n",
            "research_date": self.sources.research_date(),
            "server_version": get_setting("server_version"),
        }
        return self.templates.render("executive_brief", variables)
