"""
Command line risk assessment.

Reads an assessment subject (or a submission with detail sections) from a
JSON file and prints the classification.

Usage:
    kycrisk-assess subject.json                 # Assess against the default catalogs
    kycrisk-assess - < subject.json             # Read from stdin
    kycrisk-assess subject.json --database      # Assess against the catalog database
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Optional

from kycrisk.config import settings
from kycrisk.db.session import create_engine, create_session_factory
from kycrisk.errors import InvalidInputError, LookupFailureError
from kycrisk.reference.catalogs import load_default_catalogs
from kycrisk.reference.lookup import ReferenceDataLookup
from kycrisk.reference.repository import SqlReferenceData
from kycrisk.schemas.subject import parse_subject, subject_from_details
from kycrisk.scoring.engine import AssessmentResult, RiskClassificationEngine

logger = logging.getLogger(__name__)


def load_payload(source: str) -> dict[str, Any]:
    """Load the JSON payload from a path, or stdin for '-'."""
    if source == "-":
        return json.load(sys.stdin)
    with open(source, encoding="utf-8") as f:
        return json.load(f)


def subject_from_payload(payload: Any):
    """Accept either a bare subject or a stored {type, details} submission."""
    if isinstance(payload, dict) and "details" in payload:
        return subject_from_details(payload["details"], default_type=payload.get("type"))
    return parse_subject(payload)


async def assess_payload(
    payload: Any,
    reference: Optional[ReferenceDataLookup] = None,
    use_database: bool = False,
    case_sensitive: bool = True,
) -> AssessmentResult:
    """Assess a payload against the in-memory or database catalogs."""
    subject = subject_from_payload(payload)

    if reference is None and not use_database:
        reference = load_default_catalogs(case_sensitive=case_sensitive)
    if reference is not None:
        return await RiskClassificationEngine(reference).assess(subject)

    engine = create_engine()
    try:
        session_factory = create_session_factory(engine)
        async with session_factory() as session:
            reference = SqlReferenceData(session, case_sensitive=case_sensitive)
            return await RiskClassificationEngine(reference).assess(subject)
    finally:
        await engine.dispose()


async def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Classify an onboarding record into a risk band",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "subject",
        help="Path to a JSON subject or submission ('-' for stdin)",
    )
    parser.add_argument(
        "--database",
        action="store_true",
        help="Read reference catalogs from DATABASE_URL instead of the defaults",
    )
    parser.add_argument(
        "--case-insensitive",
        action="store_true",
        help="Match catalog keys case-insensitively",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON output indentation",
    )
    args = parser.parse_args(argv)

    case_sensitive = settings.reference_case_sensitive and not args.case_insensitive

    try:
        payload = load_payload(args.subject)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read subject: {e}")
        return 2

    try:
        result = await assess_payload(
            payload,
            use_database=args.database,
            case_sensitive=case_sensitive,
        )
    except InvalidInputError as e:
        logger.error(f"Invalid subject: {e}")
        for error in e.errors:
            logger.error(f"  {'.'.join(str(p) for p in error.get('loc', ()))}: {error.get('msg')}")
        return 2
    except LookupFailureError as e:
        logger.error(str(e))
        return 1

    print(json.dumps(result.to_dict(), indent=args.indent, ensure_ascii=False))
    return 0


def run() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
