"""
LinkedIn intelligence tool.

Team structure, interview panel and warm introduction paths for a
company's engineering organization.
"""

import logging
from typing import Any, Dict, List

from ..config import get_setting
from ..models import LinkedInIntelligenceArgs
from ..sources import DataSources
from ..templates import TemplateEngine
from ..utils.markdown import bullet_list

logger = logging.getLogger(__name__)

DEFAULT_ROLE_LABEL = "Engineering leadership"


def _format_panel(panel: List[Dict[str, Any]]) -> str:
    blocks = []
    for person in panel:
        blocks.append(
            f"#### {person['name']} - {person['title']}\n"
            f"- **Interview Type**: {person['interview_type']}\n"
            f"- **Likely Topics**: {', '.join(person['likely_topics'])}\n"
            f"- **Question for Them**: \"{person['question_for_them']}\""
        )
    return "\n\n".join(blocks)


def _format_warm_paths(paths: List[Dict[str, Any]]) -> str:
    blocks = []
    for index, path in enumerate(paths, start=1):
        blocks.append(
            f"#### Path {index}: {path['target_person']}\n"
            f"- **Via**: {path['connection_name']} ({path['strength']}, score {path['strength_score']})\n"
            f"- **Context**: {path['relationship_context']}\n"
            f"- **Recommended Ask**: {path['recommended_ask']}"
        )
    return "\n\n".join(blocks)


class LinkedInIntelligenceTool:
    """Handles the linkedin_intelligence operation."""

    def __init__(self, templates: TemplateEngine, sources: DataSources):
        self.templates = templates
        self.sources = sources

    async def execute(self, args: LinkedInIntelligenceArgs) -> str:
        """Generate the LinkedIn intelligence report."""
        logger.info(f"Gathering LinkedIn intelligence for {args.company} ({args.research_depth})")

        linkedin = await self.sources.gather_linkedin_data(args.company, args.export_data)
        team = await self.sources.gather_team_intelligence(args.company)
        cto = team["leadership"]["cto"]
        director = team["leadership"]["director"]

        if linkedin["source"] == "export":
            data_source = f"LinkedIn export ({linkedin['export_path']})"
        else:
            data_source = f"Public profiles ({linkedin['company_page']})"

        direct = [
            f"**{person['name']}** ({person['title']}): {person['relationship_context']}"
            for person in team["direct_connections"]
        ]

        variables = {
            "company": args.company,
            "role": args.role or DEFAULT_ROLE_LABEL,
            "research_depth": args.research_depth,
            "data_source": data_source,
            "research_date": self.sources.research_date(),
            "growth_pattern": team["growth_pattern"],
            "total_people": team["total_people"],
            "common_backgrounds": ", ".join(team["common_backgrounds"]),
            "common_background_list": bullet_list(team["common_backgrounds"]),
            "warm_path_count": len(team["warm_paths"]),
            "direct_connection_count": len(team["direct_connections"]),
            "hiring_focus": ", ".join(team["hiring"]["focus_areas"]),
            "recent_postings": team["hiring"]["recent_postings"],
            "growth_rate": team["hiring"]["growth_rate"],
            "c_level_count": team["counts"]["c_level"],
            "director_count": team["counts"]["directors"],
            "manager_count": team["counts"]["managers"],
            "staff_count": team["counts"]["staff"],
            "cto_name": cto["name"],
            "cto_title": cto["title"],
            "cto_background": cto["background"],
            "cto_tenure": cto["tenure"],
            "cto_interests": ", ".join(cto["interests"]),
            "cto_connection_path": cto["connection_path"],
            "director_name": director["name"],
            "director_title": director["title"],
            "director_background": director["background"],
            "director_tenure": director["tenure"],
            "director_team_size": director["team_size"],
            "director_connection_path": director["connection_path"],
            "interview_panel": _format_panel(team["interview_panel"]),
            "warm_paths": _format_warm_paths(team["warm_paths"]),
            "direct_connections": bullet_list(direct) or "- None identified",
            "server_version": get_setting("server_version"),
        }
        return self.templates.render("linkedin_intelligence", variables)
