"""
samvidhan/assistants/base.py
Shared machinery for the sector guidance assistants

A sector assistant is pure data plus a handful of lookups: given an issue
type, an urgency and a language it assembles a guidance bundle (strategy,
remedies, action plan, timeline, checklists, letter templates, contacts).
Nothing is persisted and no provider is called.
"""
import logging
from datetime import datetime, timezone
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from samvidhan.errors import BadRequestError, ErrorCode
from samvidhan.services.localization import pick_language

logger = logging.getLogger(__name__)

URGENCY_MULTIPLIERS = {
    "urgent": 0.5,
    "priority": 0.75,
    "normal": 1,
}

DEFAULT_STAGES = {
    "documentation": "1-3 days",
    "complaint": "7-14 days",
    "investigation": "14-30 days",
    "resolution": "30-60 days",
}


@dataclass
class IssueType:
    """One kind of problem a sector assistant can guide on."""
    id: str
    name: str
    description: str
    category: str
    urgency: str
    constitutional: List[str]
    legal: List[str]
    timeline: str
    immediate: List[str]
    remedies: List[str]
    # milestone label -> what happens then, shown in the strategy
    milestones: Dict[str, str] = field(default_factory=dict)
    # stage -> "start-end days", scaled by urgency in the timeline
    stages: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_STAGES))
    subject: Optional[str] = None

    @property
    def noun(self) -> str:
        return self.subject or self.name.lower()

    def listing(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "urgency": self.urgency,
            "constitutional": list(self.constitutional),
            "legal": list(self.legal),
            "timeline": self.timeline,
        }


def _format_days(value: float) -> str:
    return f"{value:g}"


def scale_stages(stages: Dict[str, str], urgency: Optional[str]) -> Dict[str, str]:
    """
    Shrink "start-end days" windows for urgent (x0.5) and priority (x0.75)
    cases. Unknown urgencies keep the normal windows.
    """
    multiplier = URGENCY_MULTIPLIERS.get(urgency or "normal", 1)
    scaled = {}
    for stage, window in stages.items():
        bounds, _, unit = window.partition(" ")
        start, _, end = bounds.partition("-")
        try:
            low = int(start) * multiplier
            high = int(end or start) * multiplier
        except ValueError:
            scaled[stage] = window
            continue
        scaled[stage] = f"{_format_days(low)}-{_format_days(high)} {unit or 'days'}"
    return scaled


class SectorAssistant:
    """
    Guidance assistant for one sector (banking, housing, ...).

    Subclasses are not needed: each sector module builds one instance from
    its fixtures. `slug` is the URL segment; `aliases` are extra segments
    served by the same assistant. `location_param` is the GET query parameter
    and `location_field` the POST body field used to pick local contacts.
    """

    def __init__(
        self,
        slug: str,
        title: str,
        type_field: str,
        issue_types: Sequence[IssueType],
        legal_options: Dict[str, Dict[str, Any]],
        resources: Dict[str, List[dict]],
        contacts: Dict[str, List[dict]],
        statistics: Dict[str, Any],
        recent_cases: List[dict],
        constitutional_basis: Dict[str, dict],
        laws: List[dict],
        templates: Dict[str, List[dict]],
        extras: Optional[Dict[str, Any]] = None,
        aliases: Tuple[str, ...] = (),
        location_param: str = "location",
        location_field: str = "location",
        required_fields: Optional[Tuple[str, ...]] = None,
    ):
        if not issue_types:
            raise ValueError(f"{slug}: at least one issue type is required")
        self.slug = slug
        self.title = title
        self.type_field = type_field
        self.issue_types = list(issue_types)
        self.legal_options = legal_options
        self.resources = resources
        self.contacts = contacts
        self.statistics = statistics
        self.recent_cases = recent_cases
        self.constitutional_basis = constitutional_basis
        self.laws = laws
        self.templates = templates
        self.extras = extras or {}
        self.aliases = aliases
        self.location_param = location_param
        self.location_field = location_field
        self.required_fields = required_fields or (type_field, "description")

    def __repr__(self):
        return f"<SectorAssistant(slug='{self.slug}', issue_types={len(self.issue_types)})>"

    @property
    def default_issue(self) -> IssueType:
        return self.issue_types[0]

    def issue(self, issue_id: Optional[str]) -> IssueType:
        """The issue type with `issue_id`, or the sector default."""
        for issue in self.issue_types:
            if issue.id == issue_id:
                return issue
        return self.default_issue

    def validate(self, payload) -> None:
        missing = [name for name in self.required_fields if not _present(payload.field(name))]
        if missing:
            logger.warning(f"{self.slug}: missing required fields {missing}")
            raise BadRequestError(
                f"Missing required fields: {', '.join(missing)}",
                code=ErrorCode.MISSING_FIELD,
                details={"fields": missing},
            )
        location = payload.field(self.location_field)
        if location is not None and not isinstance(location, str):
            raise BadRequestError(
                f"{self.location_field} must be a string",
                code=ErrorCode.INVALID_FORMAT,
                details={"field": self.location_field},
            )

    # -- bundle pieces -------------------------------------------------

    def strategy(self, issue: IssueType) -> dict:
        return {
            "immediate": list(issue.immediate),
            "legal": list(issue.remedies),
            "constitutional": issue.constitutional + issue.legal,
            "timeline": dict(issue.milestones),
        }

    def action_plan(self, issue: IssueType, urgency: str) -> dict:
        noun = issue.noun
        return {
            "priority": "high" if urgency == "urgent" else issue.urgency,
            "immediate": list(issue.immediate),
            "short": [
                "Follow up on complaint resolution",
                f"Monitor progress on the {noun} matter",
                "Keep copies of every letter and acknowledgement",
                "Escalate to the next authority if there is no response",
            ],
            "long": [
                "Follow up on legal proceedings",
                f"Update your {noun} documentation",
                f"Share what you learned about {noun} with others",
            ],
        }

    def checklists(self, issue: IssueType) -> dict:
        noun = issue.noun
        return {
            "pre": [
                f"Know the laws that cover {noun}",
                "Collect identity and address proof",
                "Write down dates, names and amounts",
                "Keep originals safe and work from copies",
            ],
            "during": [
                f"Document every {noun} incident as it happens",
                "Get a receipt or acknowledgement number for each complaint",
                "Note the name and designation of officials you speak to",
            ],
            "post": [
                "Track the response deadline",
                "Escalate if the deadline passes",
                "Keep the final order or resolution letter",
            ],
        }

    def timeline(self, issue: IssueType, urgency: str) -> Dict[str, str]:
        return scale_stages(issue.stages, urgency)

    def localized_templates(self, language: Optional[str]) -> List[dict]:
        return pick_language(self.templates, language)

    def contacts_for(self, location: Optional[str]) -> dict:
        local = None
        if location:
            local = self.contacts.get(location.strip().lower())
        return {
            "national": self.contacts.get("national", []),
            "local": local,
        }

    def issue_listing(self, type_filter: Optional[str]) -> List[dict]:
        issues = self.issue_types
        if type_filter:
            issues = [i for i in issues if i.id == type_filter]
        return [i.listing() for i in issues]

    def stats(self) -> dict:
        return {**self.statistics, "lastUpdated": datetime.now(timezone.utc).isoformat()}

    def options_for(self, issue: IssueType) -> Dict[str, Any]:
        return self.legal_options.get(issue.id) or self.legal_options.get("default", {})

    # -- responses -------------------------------------------------------

    def guide(self, payload) -> dict:
        """POST body → guidance bundle."""
        self.validate(payload)
        issue = self.issue(payload.field(self.type_field))
        urgency = payload.urgency or "normal"

        logger.info(f"{self.slug}: guidance for {issue.id} (urgency={urgency})")

        return {
            "issueType": issue.id,
            "strategy": self.strategy(issue),
            "resources": self.resources,
            "legalOptions": self.options_for(issue),
            "actionPlan": self.action_plan(issue, urgency),
            "timeline": self.timeline(issue, urgency),
            "checklists": self.checklists(issue),
            "templates": self.localized_templates(payload.language),
            "contacts": self.contacts_for(payload.field(self.location_field)),
            "statistics": self.stats(),
            "constitutionalBasis": self.constitutional_basis,
        }

    def directory(self, type_filter: Optional[str], location: Optional[str]) -> dict:
        """GET query → directory of issue types and reference material."""
        data = {
            "issueTypes": self.issue_listing(type_filter),
            "statistics": self.stats(),
            "recentCases": self.recent_cases,
            "locationResources": self.contacts_for(location) if location else None,
            "constitutionalBasis": self.constitutional_basis,
            "laws": self.laws,
        }
        data.update(self.extras)
        return data


def _present(value) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    return True
