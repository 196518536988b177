#!/usr/bin/env python3
"""
SOLID Examples Verification Script

Runs every demonstration and reports whether each example still shows the
principle it is labelled with.
"""

import argparse
import sys
from pathlib import Path
sys.path.append(str(Path(__file__).parent))

from solid_guide.container import get_service_builder
from solid_guide.principles import PRINCIPLE_CODES


def verify(principle: str = None, as_json: bool = False) -> int:
    """Run demonstrations and print the outcome; returns the process exit code"""
    builder = get_service_builder()
    registry = builder.container.get_registry()

    if principle:
        results = registry.run_principle(principle)
    else:
        results = registry.run_all()

    if as_json:
        print(builder.container.get_json_transformer().transform(results))
    else:
        print("🔍 SOLID Examples Verification")
        print("=" * 50)
        for result in results:
            mark = "✅" if result.holds else "❌"
            print(f"{mark} [{result.principle}] {result.example} ({result.label})")
            for observation in result.observations:
                print(f"     {observation}")
            if result.error:
                print(f"     error: {result.error}")

    failed = sum(1 for result in results if not result.holds)
    if not results:
        print(f"No demonstrations found for {principle}")
        return 1
    return 1 if failed else 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Verify SOLID examples")
    parser.add_argument("--principle", choices=PRINCIPLE_CODES,
                        type=str.upper, help="Only verify one principle")
    parser.add_argument("--json", action="store_true", help="Print a JSON report")
    args = parser.parse_args()

    sys.exit(verify(args.principle, args.json))


if __name__ == "__main__":
    main()
