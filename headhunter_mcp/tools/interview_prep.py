"""
Interview preparation tools.

Covers both the interview preparation guide and the 30-60-90 day plan,
which share the same research inputs.
"""

import logging
from typing import Dict

from ..config import get_setting
from ..models import InterviewPreparationArgs, Plan306090Args
from ..sources import DataSources
from ..templates import TemplateEngine
from ..utils.markdown import humanize

logger = logging.getLogger(__name__)

# Talking points for known focus areas; other areas get a generic prompt
FOCUS_AREA_NOTES: Dict[str, str] = {
    "architecture": "Walk through a system you designed: constraints, trade-offs and what you would change today.",
    "leadership": "Prepare examples of growing managers, handling underperformance and building a hiring bar.",
    "strategy": "Connect a multi-year technical roadmap to revenue, margin and market position.",
    "culture": "Describe the engineering culture you build and how you preserve it through rapid growth.",
    "security": "Explain how you embed security and compliance into delivery without slowing teams down.",
    "reliability": "Show how you set SLOs, run incident reviews and turn outages into lasting improvements.",
}

STYLE_EMPHASIS: Dict[str, str] = {
    "transformation": "Prioritize diagnosing systemic issues, building the case for change and sequencing a modernization program without stalling delivery.",
    "growth": "Prioritize hiring velocity, scalable team structures and platform investments that keep pace with demand.",
    "optimization": "Prioritize efficiency: cost per unit of work, delivery throughput and removing waste from existing processes.",
    "startup": "Prioritize hands-on execution, fast iteration and establishing just enough process for the next stage.",
}

TEAM_SIZE_PLACEHOLDER = "TBD"
CHALLENGES_PLACEHOLDER = "To be assessed"


def _format_team_size(team_size) -> str:
    if team_size is None:
        return TEAM_SIZE_PLACEHOLDER
    if isinstance(team_size, float) and team_size.is_integer():
        team_size = int(team_size)
    return f"{team_size} engineers"


class InterviewPrepTool:
    """Handles the interview_preparation and create_30_60_90_plan operations."""

    def __init__(self, templates: TemplateEngine, sources: DataSources):
        self.templates = templates
        self.sources = sources

    async def execute(self, args: InterviewPreparationArgs) -> str:
        """Generate the interview preparation guide."""
        logger.info(f"Preparing {args.interview_type} interview for {args.role} at {args.company}")
        await self.sources.gather_company_data(args.company)

        sections = []
        for area in args.focus_areas:
            note = FOCUS_AREA_NOTES.get(
                area.lower(),
                f"Prepare two concrete examples that demonstrate depth in {area}.",
            )
            sections.append(f"\n### {humanize(area)}\n{note}")

        variables = {
            "company": args.company,
            "role": args.role,
            "interview_type": args.interview_type,
            "focus_areas": ", ".join(humanize(area) for area in args.focus_areas) or "None",
            "focus_area_sections": "\n".join(sections) or "\nNo focus areas requested.",
            "research_date": self.sources.research_date(),
            "server_version": get_setting("server_version"),
        }
        return self.templates.render("interview_preparation", variables)

    async def create_plan(self, args: Plan306090Args) -> str:
        """Generate the 30-60-90 day plan."""
        logger.info(f"Creating {args.focus_style} 30-60-90 plan for {args.role} at {args.company}")
        await self.sources.gather_company_data(args.company)

        if args.key_challenges:
            challenges = ", ".join(args.key_challenges)
        else:
            challenges = CHALLENGES_PLACEHOLDER

        variables = {
            "company": args.company,
            "role": args.role,
            "team_size": _format_team_size(args.team_size),
            "key_challenges": challenges,
            "focus_style": args.focus_style,
            "focus_style_title": args.focus_style.title(),
            "style_emphasis": STYLE_EMPHASIS[args.focus_style],
            "research_date": self.sources.research_date(),
            "server_version": get_setting("server_version"),
        }
        return self.templates.render("plan_30_60_90", variables)
