"""
Context Builder.

Renders the vault as plain text for the status assistant: live
documents with their kind-specific details, expired documents, the
computed status and its warnings.
"""

from datetime import date, datetime

from statusvault.core.entities.document import Document, DocumentKind, DocumentState
from statusvault.core.lifecycle.status_engine import StatusEngine

NO_DOCUMENTS = "The user has no documents uploaded yet."

SYSTEM_PROMPT = """You are an immigration assistant for StatusVault, an app that helps users manage their U.S. immigration documents.

Your role is to:
1. Answer questions about U.S. immigration rules, visa types, travel restrictions, and document requirements
2. Provide personalized advice based on the user's specific documents and immigration status
3. Help users understand their work and study authorization
4. Advise on travel considerations (e.g., "Can I travel to Mexico?", "Do I need a visa for Canada?")
5. Explain document expiration impacts and what steps to take
6. Clarify SEVIS, OPT, CPT, H-1B, and other immigration program rules

Important guidelines:
- Base your answers on the user's actual documents when relevant
- Be accurate and cite official sources when possible (USCIS, DOS, etc.)
- If you're not certain about something, say so and recommend consulting an immigration attorney
- Be concise but thorough
- Use clear, jargon-free language when possible, but explain technical terms when needed
- For travel questions, consider visa requirements, work authorization, and re-entry considerations

You will receive the user's document information as context before each conversation."""


def format_date(value: date | datetime) -> str:
    """Medium style, e.g. 'Jan 5, 2026'."""
    return f"{value:%b} {value.day}, {value.year}"


def _kind_details(document: Document) -> str:
    fields = document.fields
    if fields is None:
        return ""

    parts = []
    if fields.full_name:
        parts.append(f" (Name: {fields.full_name})")

    if document.kind == DocumentKind.EAD:
        if fields.ead_category:
            parts.append(f", Category: {fields.ead_category}")
        if fields.valid_until:
            parts.append(f", Valid Until: {format_date(fields.valid_until)}")
    elif document.kind == DocumentKind.I20:
        if fields.sevis_id:
            parts.append(f", SEVIS ID: {fields.sevis_id}")
        if fields.program_end_date:
            parts.append(f", Program Ends: {format_date(fields.program_end_date)}")
    elif document.kind == DocumentKind.VISA:
        if fields.visa_type:
            parts.append(f", Type: {fields.visa_type}")
    elif document.kind == DocumentKind.PASSPORT:
        if fields.nationality:
            parts.append(f", Nationality: {fields.nationality}")

    return "".join(parts)


class ContextBuilder:
    """Builds the assistant's view of the vault."""

    def __init__(self, status_engine: StatusEngine | None = None):
        self._status = status_engine or StatusEngine()

    def build_context(self, documents: list[Document], now: datetime | None = None) -> str:
        if not documents:
            return NO_DOCUMENTS

        lines = ["User's Immigration Documents:", ""]

        live = [d for d in documents if d.is_live]
        expired = [d for d in documents if d.state == DocumentState.EXPIRED]

        if live:
            lines.append("Active Documents:")
            for doc in live:
                entry = f"- {doc.kind.label}{_kind_details(doc)}"
                if doc.expiry_date:
                    entry += f", Expires: {format_date(doc.expiry_date)}"
                entry += f", Status: {doc.state.value}"
                lines.append(entry)
            lines.append("")

        if expired:
            lines.append("Expired Documents:")
            for doc in expired:
                entry = f"- {doc.kind.label}"
                if doc.expiry_date:
                    entry += f" (Expired: {format_date(doc.expiry_date)})"
                lines.append(entry)
            lines.append("")

        snapshot = self._status.compute_snapshot(documents, now)
        lines.append("Current Immigration Status:")
        lines.append(f"- Status: {snapshot.current_status}")
        work = f"- Work Authorization: {'Yes' if snapshot.can_work else 'No'}"
        if snapshot.work_expiry_date:
            work += f" (until {format_date(snapshot.work_expiry_date)})"
        lines.append(work)
        lines.append(f"- Study Authorization: {'Yes' if snapshot.can_study else 'No'}")

        if snapshot.warnings:
            lines.append("")
            lines.append("Warnings:")
            lines.extend(f"- {warning}" for warning in snapshot.warnings)

        return "\n".join(lines) + "\n"

    @staticmethod
    def build_system_prompt() -> str:
        return SYSTEM_PROMPT
