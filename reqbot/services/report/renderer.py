"""Render a canonical summary as a paginated SRS report (PDF)."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional, Sequence, Tuple, Union

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from reqbot.logger_config import get_logger
from reqbot.models.summary_models import CanonicalSummary

logger = get_logger("report")

HOURS_PER_REQUIREMENT = 6
HOURLY_RATE_USD = 8
OVERHEAD_RATE = 0.2
DAYS_PER_REQUIREMENT = 1.3
NOT_PROVIDED = "Not provided"

SectionContent = Union[str, Sequence[str]]


class ReportRenderError(RuntimeError):
    """Raised when the PDF cannot be produced."""


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def calculate_cost(functional_count: int) -> int:
    """Requirements x 6 hours x $8/hour, plus 20% overhead."""
    base_cost = functional_count * HOURS_PER_REQUIREMENT * HOURLY_RATE_USD
    return _round_half_up(base_cost + base_cost * OVERHEAD_RATE)


def calculate_timeline(functional_count: int) -> int:
    """Estimated duration in days."""
    return _round_half_up(functional_count * DAYS_PER_REQUIREMENT)


def estimate_cost_and_timeline(summary: CanonicalSummary) -> Tuple[str, str]:
    """Return the summary's own estimates, deriving missing ones from the requirement count."""
    count = len(summary.functional)
    cost = summary.cost_estimate or (f"${calculate_cost(count):,}" if count else NOT_PROVIDED)
    timeline = summary.timeline or (f"{calculate_timeline(count)} days" if count else NOT_PROVIDED)
    return cost, timeline


class BaseReportRenderer(ABC):
    """Contract for turning a summary into a downloadable document."""

    media_type = "application/octet-stream"
    extension = "bin"

    @abstractmethod
    def render(
        self,
        summary: CanonicalSummary,
        client_name: Optional[str] = None,
        client_email: Optional[str] = None,
        project_name: Optional[str] = None,
    ) -> bytes:
        """Return the rendered document."""
        raise NotImplementedError

    def filename(self, on: Optional[date] = None) -> str:
        return f"SRS_Report_{(on or date.today()).isoformat()}.{self.extension}"


class _ReportPDF(FPDF):
    """FPDF document with a page-number footer."""

    def footer(self) -> None:
        self.set_y(-40)
        self.set_font("Helvetica", size=10)
        self.set_text_color(128, 128, 128)
        self.cell(0, 12, f"Page {self.page_no()} of {{nb}}", align="R")
        self.set_text_color(0, 0, 0)


class SRSReportRenderer(BaseReportRenderer):
    """Software Requirements Specification laid out with fpdf2 core fonts."""

    media_type = "application/pdf"
    extension = "pdf"

    _UNICODE_TRANSLATION = str.maketrans(
        {
            "\u00a0": " ",  # non-breaking space
            "\u2010": "-",  # hyphen
            "\u2011": "-",  # non-breaking hyphen
            "\u2013": "-",  # en dash
            "\u2014": "-",  # em dash
            "\u2018": "'",  # left single quote
            "\u2019": "'",  # right single quote
            "\u201c": '"',  # left double quote
            "\u201d": '"',  # right double quote
            "\u2022": "-",  # bullet
            "\u2212": "-",  # minus sign
        }
    )

    def render(
        self,
        summary: CanonicalSummary,
        client_name: Optional[str] = None,
        client_email: Optional[str] = None,
        project_name: Optional[str] = None,
    ) -> bytes:
        pdf = _ReportPDF(unit="pt", format="Letter")
        pdf.set_auto_page_break(auto=True, margin=60)
        pdf.set_margins(50, 50, 50)
        pdf.set_title("Software Requirements Specification")

        self._title_page(pdf, client_name, client_email, project_name)

        pdf.add_page()
        sections = self._sections(summary)
        estimates_title = f"{len(sections) + 1}. Cost Estimate & Timeline"
        self._table_of_contents(pdf, [title for title, _ in sections] + [estimates_title])
        for title, content in sections:
            self._section(pdf, title, content)
        self._estimates(pdf, summary, estimates_title)

        try:
            return bytes(pdf.output())
        except (RuntimeError, ValueError) as exc:
            logger.error("PDF generation failed: %s", exc)
            raise ReportRenderError(f"Unable to render report: {exc}") from exc

    def _sections(self, summary: CanonicalSummary) -> List[Tuple[str, SectionContent]]:
        entries: List[Tuple[str, SectionContent]] = []
        if summary.summary:
            entries.append(("Executive Summary", summary.summary))
        entries.extend(
            [
                ("Project Overview", summary.overview),
                ("Functional Requirements", summary.functional),
                ("Non-Functional Requirements", summary.non_functional),
                ("User Stories", summary.user_stories),
                ("Stakeholders", summary.stakeholders),
                ("Constraints", summary.constraints),
                ("Risks", summary.risks),
            ]
        )
        return [
            (f"{index}. {title}", content)
            for index, (title, content) in enumerate(entries, start=1)
        ]

    def _title_page(
        self,
        pdf: FPDF,
        client_name: Optional[str],
        client_email: Optional[str],
        project_name: Optional[str],
    ) -> None:
        pdf.add_page()
        pdf.set_y(pdf.h / 2 - 100)
        pdf.set_font("Helvetica", "B", size=24)
        self._line(pdf, "Software Requirements Specification", 30)
        self._line(pdf, "(SRS) Report", 30)
        pdf.ln(20)
        pdf.set_font("Helvetica", size=12)
        pdf.set_text_color(110, 110, 110)
        for label, value in (
            ("Project", project_name),
            ("Client", client_name),
            ("Contact", client_email),
        ):
            if value:
                self._line(pdf, f"{label}: {value}", 18)
        self._line(pdf, f"Generated on: {date.today().strftime('%B %d, %Y')}", 18)
        pdf.set_text_color(0, 0, 0)

    def _table_of_contents(self, pdf: FPDF, titles: Sequence[str]) -> None:
        pdf.set_font("Helvetica", "B", size=16)
        self._line(pdf, "Table of Contents", 22)
        pdf.ln(6)
        pdf.set_font("Helvetica", size=11)
        pdf.set_text_color(51, 51, 51)
        for title in titles:
            self._line(pdf, title, 16, indent=20)
        pdf.set_text_color(0, 0, 0)
        pdf.ln(24)

    def _section(self, pdf: FPDF, title: str, content: SectionContent) -> None:
        self._heading(pdf, title)
        pdf.set_font("Helvetica", size=10)

        if isinstance(content, str):
            items = [content] if content.strip() else []
            bullet = False
        else:
            items = [item for item in content if item.strip()]
            bullet = True

        if not items:
            pdf.set_text_color(128, 128, 128)
            self._line(pdf, NOT_PROVIDED, 14, indent=20)
        else:
            pdf.set_text_color(51, 51, 51)
            for item in items:
                self._line(pdf, f"- {item}" if bullet else item, 14, indent=20)
                pdf.ln(3)
        pdf.set_text_color(0, 0, 0)
        pdf.ln(18)

    def _estimates(self, pdf: FPDF, summary: CanonicalSummary, title: str) -> None:
        cost, timeline = estimate_cost_and_timeline(summary)
        count = len(summary.functional)

        self._heading(pdf, title)
        pdf.set_font("Helvetica", size=11)
        pdf.set_text_color(51, 51, 51)
        self._line(pdf, f"Estimated Cost: {cost}", 16, indent=20)
        self._line(pdf, f"Estimated Timeline: {timeline}", 16, indent=20)
        if count:
            pdf.set_font("Helvetica", "I", size=10)
            pdf.set_text_color(128, 128, 128)
            plural = "s" if count != 1 else ""
            self._line(pdf, f"Based on {count} functional requirement{plural}", 14, indent=20)
        pdf.set_text_color(0, 0, 0)

    def _heading(self, pdf: FPDF, title: str) -> None:
        pdf.set_font("Helvetica", "B", size=14)
        self._line(pdf, title, 20)
        pdf.ln(4)

    def _line(self, pdf: FPDF, text: str, height: float, indent: float = 0) -> None:
        pdf.set_x(pdf.l_margin + indent)
        pdf.multi_cell(
            0, height, self._safe_text(text), new_x=XPos.LMARGIN, new_y=YPos.NEXT
        )

    @classmethod
    def _safe_text(cls, text: str) -> str:
        text = text.translate(cls._UNICODE_TRANSLATION)
        try:
            text.encode("latin-1")
        except UnicodeEncodeError:
            return text.encode("latin-1", "replace").decode("latin-1")
        return text


def get_report_renderer() -> BaseReportRenderer:
    """FastAPI dependency for the default report renderer."""
    return SRSReportRenderer()
