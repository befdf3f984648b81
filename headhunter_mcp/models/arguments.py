"""Typed argument records, one per research operation.

The dispatcher validates raw arguments against the catalog schema (which
also supplies defaults) and then loads the result into the matching model
below. Fields therefore carry no defaults of their own beyond ``None`` for
optional parameters the catalog leaves undefaulted.
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


RevenueFocus = Literal["cost_optimization", "growth_levers", "risk_assessment", "comprehensive"]
ResearchDepth = Literal["basic", "detailed", "comprehensive"]
InterviewType = Literal["technical", "behavioral", "case_study", "comprehensive"]
ApplicationStage = Literal["research", "application", "interview", "negotiation"]
FocusStyle = Literal["transformation", "growth", "optimization", "startup"]


class _ArgumentRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class ResearchCompanyArgs(_ArgumentRecord):
    operation: Literal["research_company"] = "research_company"
    company: str
    role: str
    focus_areas: List[str]


class RevenueEngineArgs(_ArgumentRecord):
    operation: Literal["analyze_revenue_engine"] = "analyze_revenue_engine"
    company: str
    business_model: Optional[str] = None
    focus: RevenueFocus


class LinkedInIntelligenceArgs(_ArgumentRecord):
    operation: Literal["linkedin_intelligence"] = "linkedin_intelligence"
    company: str
    role: Optional[str] = None
    export_data: Optional[str] = None
    research_depth: ResearchDepth


class InterviewPreparationArgs(_ArgumentRecord):
    operation: Literal["interview_preparation"] = "interview_preparation"
    company: str
    role: str
    interview_type: InterviewType
    focus_areas: List[str]


class ExecutiveBriefArgs(_ArgumentRecord):
    operation: Literal["executive_brief"] = "executive_brief"
    company: str
    role: str
    application_stage: ApplicationStage
    include_sections: List[str]


class Plan306090Args(_ArgumentRecord):
    operation: Literal["create_30_60_90_plan"] = "create_30_60_90_plan"
    company: str
    role: str
    team_size: Optional[Union[int, float]] = None
    key_challenges: Optional[List[str]] = None
    focus_style: FocusStyle


OperationArguments = Annotated[
    Union[
        ResearchCompanyArgs,
        RevenueEngineArgs,
        LinkedInIntelligenceArgs,
        InterviewPreparationArgs,
        ExecutiveBriefArgs,
        Plan306090Args,
    ],
    Field(discriminator="operation"),
]

RECORD_TYPES = {
    "research_company": ResearchCompanyArgs,
    "analyze_revenue_engine": RevenueEngineArgs,
    "linkedin_intelligence": LinkedInIntelligenceArgs,
    "interview_preparation": InterviewPreparationArgs,
    "executive_brief": ExecutiveBriefArgs,
    "create_30_60_90_plan": Plan306090Args,
}
