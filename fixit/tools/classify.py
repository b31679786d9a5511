"""Classify complaint descriptions from the command line.

Usage:
    python -m fixit.tools.classify "Water leaking from the bathroom pipe"
    python -m fixit.tools.classify --image uploads/leak.jpg "Ceiling crack"
    python -m fixit.tools.classify --local-only "Projector not working"
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from fixit.adapters.ai_service.http_adapter import HttpRemoteAnalyzer
from fixit.application.use_cases.analyze_complaint import classify
from fixit.domain.policies.heuristic_classifier import classify_locally


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Classify a campus maintenance complaint")
    parser.add_argument("description", nargs="+", help="Complaint text")
    parser.add_argument(
        "--image", type=str, default=None,
        help="Image URL or path attached to the complaint",
    )
    parser.add_argument(
        "--local-only", action="store_true",
        help="Skip the remote AI service and use the built-in analyzer",
    )
    parser.add_argument(
        "--url", type=str, default=None,
        help="Override AI_SERVICE_URL",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    description = " ".join(args.description)

    if args.local_only:
        result = classify_locally(description, has_image=bool(args.image))
    else:
        remote = HttpRemoteAnalyzer(url=args.url)
        result = asyncio.run(classify(description, args.image, remote=remote))

    json.dump(result.to_dict(), sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
