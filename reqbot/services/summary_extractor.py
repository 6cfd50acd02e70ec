"""Reduce an interview transcript to the canonical requirements summary."""

from __future__ import annotations

import json
import re
from typing import Any, Dict, List, Sequence

from fastapi import Depends

from configs import settings
from reqbot.logger_config import get_logger
from reqbot.models.conversation_models import ConversationMessage
from reqbot.models.summary_models import CanonicalSummary
from reqbot.services.exceptions import SummaryExtractionError
from reqbot.services.llm_gateway import (
    AllProvidersFailedError,
    ProviderGateway,
    get_provider_gateway,
)
from reqbot.services.prompt_loader import PromptLoader, prompt_loader

logger = get_logger("summary.extractor")

# Canonical field -> heading the model is asked to return.
LIST_SECTIONS: Dict[str, str] = {
    "functional": "Functional Requirements",
    "non_functional": "Non-Functional Requirements",
    "user_stories": "User Stories",
    "constraints": "Constraints",
    "risks": "Risks & Challenges",
}
STAKEHOLDERS_SECTION = "Stakeholders"
TIMELINE_SECTION = "Timeline"
COST_SECTION = "Cost Estimate"

FAILURE_POLICIES = ("soft", "raise")

_CODE_FENCE_RE = re.compile(r"^```(?:json)?\s*(?P<body>.*?)\s*```$", re.DOTALL)


def _compact_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def normalize_stakeholder(entry: Any) -> str:
    """Render one stakeholder as ``Name (Role)``, ``Name``, ``Role`` or raw JSON."""
    if isinstance(entry, str):
        return entry
    if isinstance(entry, dict):
        name = entry.get("name") if isinstance(entry.get("name"), str) else ""
        role = entry.get("role") if isinstance(entry.get("role"), str) else ""
        if name and role:
            return f"{name} ({role})"
        if name:
            return name
        if role:
            return role
    return _compact_json(entry)


def _string_items(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    items: List[str] = []
    for item in value:
        if item is None:
            continue
        items.append(item if isinstance(item, str) else _compact_json(item))
    return items


def normalize_summary(raw: Dict[str, Any]) -> CanonicalSummary:
    """Coerce a parsed model object into the canonical summary shape.

    Sections that are missing or not arrays become ``[]``; Timeline and Cost
    Estimate survive only as strings. ``overview`` and ``summary`` are not
    requested from the model and stay empty.
    """
    fields: Dict[str, Any] = {
        field: _string_items(raw.get(heading)) for field, heading in LIST_SECTIONS.items()
    }
    stakeholders = raw.get(STAKEHOLDERS_SECTION)
    fields["stakeholders"] = (
        [normalize_stakeholder(entry) for entry in stakeholders]
        if isinstance(stakeholders, list)
        else []
    )
    timeline = raw.get(TIMELINE_SECTION)
    cost = raw.get(COST_SECTION)
    fields["timeline"] = timeline if isinstance(timeline, str) else ""
    fields["cost_estimate"] = cost if isinstance(cost, str) else ""
    return CanonicalSummary(overview="", summary="", **fields)


def format_transcript(transcript: Sequence[ConversationMessage]) -> str:
    """Render the transcript as ``User:``/``Assistant:`` paragraphs."""
    lines = []
    for message in transcript:
        speaker = "Assistant" if message.role == "model" else "User"
        lines.append(f"{speaker}: {message.text}")
    return "\n\n".join(lines)


class SummaryExtractor:
    """Ask the gateway for the summary JSON and normalize it.

    With the ``soft`` policy provider and parse failures collapse to an
    all-empty summary; with ``raise`` they surface as SummaryExtractionError.
    """

    def __init__(
        self,
        gateway: ProviderGateway,
        prompts: PromptLoader = prompt_loader,
        failure_policy: str = "soft",
    ) -> None:
        if failure_policy not in FAILURE_POLICIES:
            raise ValueError(f"Unknown summary failure policy '{failure_policy}'")
        self.gateway = gateway
        self.prompts = prompts
        self.failure_policy = failure_policy

    def instruction(self, transcript: Sequence[ConversationMessage]) -> str:
        return self.prompts.get(
            "extraction", "instruction", conversation=format_transcript(transcript)
        )

    def extract(self, transcript: Sequence[ConversationMessage]) -> CanonicalSummary:
        """Return the canonical summary for ``transcript``."""
        request = [ConversationMessage.from_text("user", self.instruction(transcript))]
        try:
            raw_text = self.gateway.invoke(
                self.prompts.get("extraction", "system"), request, response_mode="json"
            )
        except AllProvidersFailedError as exc:
            return self._fail(f"Summary extraction failed: {exc}", exc)

        try:
            raw = json.loads(self._strip_code_fence(raw_text))
        except json.JSONDecodeError as exc:
            return self._fail(f"Summary response is not valid JSON: {exc}", exc)
        if not isinstance(raw, dict):
            return self._fail(
                f"Summary response is a JSON {type(raw).__name__}, expected an object"
            )

        summary = normalize_summary(raw)
        logger.info(
            "Extracted summary: %d functional, %d non-functional, %d stakeholder(s)",
            len(summary.functional),
            len(summary.non_functional),
            len(summary.stakeholders),
        )
        return summary

    def _fail(self, message: str, cause: Exception | None = None) -> CanonicalSummary:
        logger.error(message)
        if self.failure_policy == "raise":
            raise SummaryExtractionError(message) from cause
        return CanonicalSummary.empty()

    @staticmethod
    def _strip_code_fence(text: str) -> str:
        stripped = (text or "").strip()
        match = _CODE_FENCE_RE.match(stripped)
        return match.group("body") if match else stripped


def get_summary_extractor(
    gateway: ProviderGateway = Depends(get_provider_gateway),
) -> SummaryExtractor:
    """FastAPI dependency wiring the extractor with the configured failure policy."""
    return SummaryExtractor(gateway, failure_policy=settings.SUMMARY_FAILURE_POLICY)
