"""
Simulated data sources for company research.

Every value returned here is a placeholder. The methods are async so
handlers are written against the same interface a real provider
(Crunchbase, job postings, LinkedIn exports) would expose.
"""

import copy
import logging
import re
from datetime import date
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class DataSourceError(Exception):
    """Data could not be gathered for the requested subject."""
    pass


DEFAULT_BUSINESS_MODEL = "B2B SaaS"

REVENUE_PROFILES: Dict[str, Dict[str, Any]] = {
    "B2B SaaS": {
        "streams": [
            {"name": "Subscription Revenue", "percentage": "85%", "margin": "80%", "tech_dependency": "Platform availability"},
            {"name": "Professional Services", "percentage": "10%", "margin": "40%", "tech_dependency": "Implementation tools"},
            {"name": "API/Usage Fees", "percentage": "5%", "margin": "90%", "tech_dependency": "API gateway performance"},
        ],
        "systems": [
            {"name": "API Gateway", "revenue_impact": "Direct: $50K/month transactions", "downtime_cost": "$5K/minute", "sla": "99.99%", "owner": "Platform Team"},
            {"name": "Auth System", "revenue_impact": "Enabler: User access", "downtime_cost": "$2K/minute", "sla": "99.95%", "owner": "Security Team"},
            {"name": "Billing Platform", "revenue_impact": "Direct: Revenue collection", "downtime_cost": "$10K/hour", "sla": "99.9%", "owner": "Finance Systems"},
            {"name": "Data Pipeline", "revenue_impact": "Intelligence: Customer insights", "downtime_cost": "$1K/hour", "sla": "99.5%", "owner": "Data Team"},
        ],
        "flow": "Lead -> Demo -> Trial -> Conversion -> Subscription -> Expansion",
        "velocity_equation": "Revenue Velocity = (Leads x Conversion Rate x ACV) / Sales Cycle",
    },
    "Marketplace": {
        "streams": [
            {"name": "Transaction Fees", "percentage": "70%", "margin": "85%", "tech_dependency": "Payment processing"},
            {"name": "Subscription Fees", "percentage": "20%", "margin": "90%", "tech_dependency": "Platform access"},
            {"name": "Advertising Revenue", "percentage": "10%", "margin": "75%", "tech_dependency": "Ad serving platform"},
        ],
        "systems": [
            {"name": "Payment Gateway", "revenue_impact": "Direct: Transaction fees", "downtime_cost": "$8K/minute", "sla": "99.99%", "owner": "Payments Team"},
            {"name": "Search & Discovery", "revenue_impact": "Driver: Buyer conversion", "downtime_cost": "$3K/minute", "sla": "99.95%", "owner": "Discovery Team"},
            {"name": "Seller Onboarding", "revenue_impact": "Enabler: Supply growth", "downtime_cost": "$2K/hour", "sla": "99.5%", "owner": "Growth Team"},
        ],
        "flow": "Seller -> Listing -> Buyer -> Transaction -> Payment -> Fulfillment",
        "velocity_equation": "GMV = Active Users x Transaction Rate x Average Order Value",
    },
    "E-commerce": {
        "streams": [
            {"name": "Product Sales", "percentage": "85%", "margin": "25%", "tech_dependency": "Checkout system"},
            {"name": "Fulfillment Fees", "percentage": "10%", "margin": "60%", "tech_dependency": "Logistics platform"},
            {"name": "Advertising", "percentage": "5%", "margin": "80%", "tech_dependency": "Recommendation engine"},
        ],
        "systems": [
            {"name": "Checkout Service", "revenue_impact": "Direct: Order capture", "downtime_cost": "$12K/minute", "sla": "99.99%", "owner": "Commerce Team"},
            {"name": "Product Catalog", "revenue_impact": "Driver: Browse to cart", "downtime_cost": "$4K/minute", "sla": "99.95%", "owner": "Catalog Team"},
            {"name": "Logistics Platform", "revenue_impact": "Enabler: Delivery promise", "downtime_cost": "$5K/hour", "sla": "99.9%", "owner": "Fulfillment Team"},
        ],
        "flow": "Traffic -> Browse -> Cart -> Checkout -> Payment -> Fulfillment",
        "velocity_equation": "Revenue = Traffic x Conversion Rate x Average Order Value",
    },
}

_TEAM_INTELLIGENCE: Dict[str, Any] = {
    "total_people": 45,
    "growth_pattern": "rapid",
    "leadership": {
        "cto": {
            "name": "Sarah Chen",
            "title": "CTO",
            "background": "Former Staff Engineer at Google, led platform scaling",
            "tenure": "2 years",
            "interests": ["Distributed Systems", "ML Infrastructure", "Developer Experience"],
            "connection_path": "Via Alex Rodriguez (mutual connection)",
        },
        "director": {
            "name": "Michael Torres",
            "title": "Director of Engineering",
            "background": "Ex-Stripe, scaled payments infrastructure",
            "tenure": "1.5 years",
            "team_size": 15,
            "connection_path": "Direct connection",
        },
    },
    "counts": {"c_level": 1, "directors": 3, "managers": 8, "staff": 12},
    "hiring": {
        "recent_postings": 8,
        "growth_rate": "40% YoY",
        "focus_areas": ["Platform Engineering", "ML Infrastructure", "Security"],
    },
    "common_backgrounds": ["Google", "Meta", "Stripe", "Uber"],
    "interview_panel": [
        {
            "name": "Sarah Chen",
            "title": "CTO",
            "interview_type": "Strategic/Cultural",
            "likely_topics": ["Platform vision", "Team scaling", "Technology strategy"],
            "question_for_them": "What's the biggest platform challenge you're excited to solve in the next 18 months?",
        },
        {
            "name": "Michael Torres",
            "title": "Director of Engineering",
            "interview_type": "Technical depth",
            "likely_topics": ["System design", "Architecture decisions", "Performance optimization"],
            "question_for_them": "What's the most interesting architectural problem you've solved recently?",
        },
    ],
    "warm_paths": [
        {
            "target_person": "Sarah Chen (CTO)",
            "connection_name": "Alex Rodriguez",
            "strength": "Strong",
            "strength_score": 12,
            "relationship_context": "Former colleague at previous startup",
            "recommended_ask": "15-minute conversation about platform strategy",
        },
        {
            "target_person": "Michael Torres (Director)",
            "connection_name": "Lisa Park",
            "strength": "Medium",
            "strength_score": 8,
            "relationship_context": "Met at tech conference, stayed in touch",
            "recommended_ask": "Coffee chat about engineering culture",
        },
    ],
    "direct_connections": [
        {"name": "Michael Torres", "title": "Director of Engineering", "relationship_context": "Connected via industry event 6 months ago"},
    ],
}


def _slug(company: str) -> str:
    return re.sub(r'\s+', '', company.lower())


class DataSources:
    """Placeholder providers for company, revenue and team intelligence."""

    def research_date(self) -> str:
        """Date stamped on generated reports (ISO format)."""
        return date.today().isoformat()

    async def gather_company_data(self, company: str) -> Dict[str, Any]:
        """
        Gather a company profile.

        Raises:
            DataSourceError: If the company name is blank
        """
        self._require_subject(company)

        return {
            "company_name": company,
            "basic_info": {
                "founded": "Unknown",
                "headquarters": "Unknown",
                "size": "Unknown",
                "stage": "Unknown",
                "industry": "Technology",
                "website": f"https://{_slug(company)}.com",
            },
            "business_model": {
                "revenue_streams": ["Subscription/SaaS", "Professional Services"],
                "pricing_strategy": "Enterprise and self-serve",
                "unit_economics": "Under research",
            },
            "technology_stack": {
                "languages": ["JavaScript", "Python", "Go"],
                "frameworks": ["React", "Node.js", "PostgreSQL"],
                "cloud_platform": "AWS",
                "architecture": "Microservices",
            },
            "challenges": [
                "Scaling engineering team",
                "Technical debt management",
                "Platform reliability",
                "Competitive differentiation",
            ],
            "opportunities": [
                "Market expansion",
                "AI/ML integration",
                "Platform efficiency",
                "Developer productivity",
            ],
            "recent_news": [
                "Hiring for senior engineering roles",
                "Platform performance improvements",
                "New product feature launches",
            ],
        }

    async def get_revenue_profile(self, business_model: Optional[str]) -> Dict[str, Any]:
        """
        Revenue streams and system mappings for a business model.

        Unrecognized or missing models use the B2B SaaS reference profile.
        """
        profile = REVENUE_PROFILES.get(business_model or "")
        if profile is None:
            logger.debug(f"No revenue profile for {business_model!r}, using {DEFAULT_BUSINESS_MODEL}")
            profile = REVENUE_PROFILES[DEFAULT_BUSINESS_MODEL]
        return copy.deepcopy(profile)

    async def gather_team_intelligence(self, company: str) -> Dict[str, Any]:
        """
        Engineering organization, interview panel and introduction paths.

        Raises:
            DataSourceError: If the company name is blank
        """
        self._require_subject(company)

        data = copy.deepcopy(_TEAM_INTELLIGENCE)
        data["company_page"] = f"https://linkedin.com/company/{_slug(company)}"
        return data

    async def gather_linkedin_data(self, company: str, export_data: Optional[str] = None) -> Dict[str, Any]:
        """
        Describe the LinkedIn data source used for a report.

        Export files are only referenced, never opened.
        """
        self._require_subject(company)

        if export_data:
            return {
                "source": "export",
                "export_path": export_data,
                "connections": [],
            }

        return {
            "source": "public",
            "company_page": f"https://linkedin.com/company/{_slug(company)}",
            "connections": [],
        }

    def _require_subject(self, company: str) -> None:
        if not company or not company.strip():
            raise DataSourceError("company name is empty")

