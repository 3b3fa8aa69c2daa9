"""
Demo data seeding script
------------------------
Loads appointments, medicines and activities from a JSON file and posts
them to a running API server. Keys may be camelCase (old json-server
dumps) or snake_case.

JSON layout:
    {
        "appointments": [...],
        "prescriptions": [...],   # or "medicines"
        "activities": [...]
    }
"""

import json
import re
import sys
from pathlib import Path
from typing import Any, Dict, List

import requests

# make backend/ importable
sys.path.insert(0, str(Path(__file__).parent.parent))

from utils.logger import logger

# section in the JSON file → (API path, name field for log lines)
SECTIONS = {
    "appointments": ("/appointments", "patient_name"),
    "medicines": ("/pharmacy/medicines", "name"),
    "activities": ("/activities", "title"),
}

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_snake(key: str) -> str:
    """expiryDate → expiry_date"""
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def normalize_record(record: Dict[str, Any]) -> Dict[str, Any]:
    """snake_case keys, server-assigned fields dropped"""
    out = {}
    for key, value in record.items():
        if key in ("id", "_id", "_creationTime"):
            continue
        if isinstance(value, dict):
            value = normalize_record(value)
        out[to_snake(key)] = value
    return out


def load_sections(json_path: str) -> Dict[str, List[Dict[str, Any]]]:
    with open(json_path, encoding="utf-8") as f:
        raw = json.load(f)

    sections = {
        "appointments": raw.get("appointments", []),
        "medicines": raw.get("medicines") or raw.get("prescriptions", []),
        "activities": raw.get("activities", []),
    }
    for medicine in sections["medicines"]:
        # json-server dumps store numbers as strings
        if "stock" in medicine:
            medicine["stock"] = int(medicine["stock"])
        if "price" in medicine:
            medicine["price"] = float(medicine["price"])
    return sections


def seed(json_path: str, base_url: str, timeout: int = 10) -> bool:
    """
    Post every record to the server

    Returns:
        True when every record was accepted
    """
    try:
        logger.info(f"📂 [Seed] loading seed file: {json_path}")
        sections = load_sections(json_path)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"❌ [Seed] could not read seed file: {e}")
        return False

    failures = 0
    for section, records in sections.items():
        path, name_field = SECTIONS[section]
        logger.info(f"⏳ [Seed] {section}: {len(records)} records → {path}")

        for record in records:
            payload = normalize_record(record)
            label = payload.get(name_field, "?")
            try:
                response = requests.post(f"{base_url.rstrip('/')}{path}", json=payload, timeout=timeout)
                response.raise_for_status()
                logger.info(f"✅ [Seed] {section}: {label}")

            except requests.exceptions.HTTPError as e:
                failures += 1
                logger.error(f"❌ [Seed] {section}: {label} rejected ({e.response.status_code}) {e.response.text[:200]}")

            except requests.exceptions.RequestException as e:
                failures += 1
                logger.error(f"❌ [Seed] {section}: {label} - {e}")

    if failures:
        logger.warning(f"⚠️ [Seed] seeding finished with {failures} failures")
        return False

    logger.info("🎉 [Seed] seeding complete")
    return True


def main():
    import argparse

    parser = argparse.ArgumentParser(description="Seed a running API server with demo data")
    parser.add_argument("json_path", type=str, help="JSON file with appointments / medicines / activities")
    parser.add_argument("--base-url", type=str, default="http://localhost:3001", help="API base URL (default: http://localhost:3001)")
    parser.add_argument("--timeout", type=int, default=10, help="Per-request timeout in seconds (default: 10)")
    args = parser.parse_args()

    success = seed(args.json_path, args.base_url, args.timeout)
    if not success:
        sys.exit(1)


if __name__ == "__main__":
    main()
