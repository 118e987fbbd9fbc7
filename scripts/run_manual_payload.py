#!/usr/bin/env python3
"""
Manual E2E Test Script

Reads sample_transcript.json and POSTs it to a running summary webhook.
Prints the {success, error} response for verification.

Usage:
    python scripts/run_manual_payload.py [webhook_url]
"""

import json
import sys
import httpx
from pathlib import Path
from datetime import datetime, timezone


DEFAULT_URL = "http://localhost:8000/webhooks/summary-service-webhook"
PAYLOAD_FILE = Path(__file__).parent / "sample_transcript.json"


def load_payload() -> dict:
    """Load the sample webhook body from JSON file."""
    if not PAYLOAD_FILE.exists():
        print(f"ERROR: Payload file not found: {PAYLOAD_FILE}")
        sys.exit(1)

    with open(PAYLOAD_FILE, "r") as f:
        return json.load(f)


def run_e2e_test(url: str) -> dict:
    """Send the sample transcript and report the pipeline result."""
    print("=" * 60)
    print("MANUAL E2E TEST - Summary Webhook")
    print("=" * 60)
    print(f"Timestamp: {datetime.now(timezone.utc).isoformat()}")
    print(f"Target URL: {url}")
    print()

    payload = load_payload()
    print(f"  Meeting id: {payload.get('id')}")
    print(f"  Participants: {', '.join(payload.get('participants', []))}")
    print(f"  Transcript blocks: {len(payload.get('transcript', []))}")
    print()

    print("Sending POST request...")
    print("-" * 60)

    try:
        # Summarization plus rendering and upload can take a few minutes
        with httpx.Client(timeout=300.0) as client:
            response = client.post(url, json=payload)
    except httpx.TimeoutException:
        print("ERROR: Request timed out after 300 seconds")
        return {"success": False, "error": "timeout"}
    except httpx.HTTPError as e:
        print(f"ERROR: {type(e).__name__}: {e}")
        return {"success": False, "error": str(e)}

    print(f"Status Code: {response.status_code}")
    print()

    if response.status_code != 200:
        print(f"Response: {response.text}")
        return {"success": False, "error": response.text}

    result = response.json()
    print("FULL RESPONSE:")
    print("-" * 60)
    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    target = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_URL
    result = run_e2e_test(target)

    print()
    print("=" * 60)
    if result.get("success"):
        print("TEST COMPLETED SUCCESSFULLY")
        print(f"  Presentation: presentation-{load_payload()['id']}.pptx")
    else:
        print("TEST FAILED")
        sys.exit(1)
    print("=" * 60)
