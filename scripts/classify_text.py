"""
Classify a recognized-text file and print its kind, extracted fields and
lifecycle state. Nothing is stored.

Usage:
    python scripts/classify_text.py samples/ead.txt
    python scripts/classify_text.py samples/i20.txt --now 2026-01-15
"""
import argparse
import json
import os
import sys
from datetime import datetime
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dotenv import load_dotenv
load_dotenv(os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ".env"))

from statusvault.config.settings import get_settings
from statusvault.core.entities.document import Document, utc_now
from statusvault.core.lifecycle.lifecycle_engine import LifecycleEngine
from statusvault.core.lifecycle.timeline_generator import TimelineGenerator
from statusvault.core.use_cases.ingest_document import resolve_dates
from statusvault.infrastructure.rules.field_extractor import extract
from statusvault.infrastructure.rules.type_classifier import classify


def main():
    parser = argparse.ArgumentParser(description="Classify a recognized-text document")
    parser.add_argument("path", help="Text file with one recognized line per line")
    parser.add_argument("--now", help="Reference date YYYY-MM-DD (default: today)")
    parser.add_argument("--json", action="store_true", help="Print fields as JSON only")
    args = parser.parse_args()

    path = Path(args.path)
    if not path.is_file():
        print(f"ERROR: {path} not found")
        sys.exit(1)

    now = datetime.strptime(args.now, "%Y-%m-%d") if args.now else utc_now()
    lines = path.read_text(encoding="utf-8").splitlines()

    kind = classify(lines)
    fields = extract(lines, kind)

    if args.json:
        print(json.dumps({"kind": kind.value, "fields": fields.present()}, indent=2, default=str))
        return

    effective, expiry = resolve_dates(fields)
    document = Document(kind=kind, effective_date=effective, expiry_date=expiry, fields=fields, created_at=now)
    lifecycle = LifecycleEngine(expiring_soon_days=get_settings().expiring_soon_days)
    lifecycle.refresh([document], now)

    print(f"{'='*60}")
    print(f"  {kind.icon} {kind.label}  [{document.state.value}]")
    print(f"{'='*60}")
    for name, value in fields.present().items():
        print(f"  {name:<22} {value}")
    if not fields.present():
        print("  (no fields extracted)")

    print(f"\n── Timeline (as of {now:%Y-%m-%d}) ──")
    for event in TimelineGenerator().events(document):
        print(f"  {event.event_date:%Y-%m-%d}  {event.event_type.icon} {event.description}")


if __name__ == "__main__":
    main()
