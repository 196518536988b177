"""
Walkthrough flow that runs every SOLID demonstration and publishes guides.
Each task has a single responsibility and uses dependency injection.
"""
from prefect import flow, task
from typing import List, Dict, Any, Optional
import sys
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from solid_guide.catalog import Catalog
from solid_guide.container import get_service_builder
from solid_guide.interfaces import DemoResult


@task(log_prints=True)
def load_topic_catalog(catalog_path: Optional[str] = None) -> Catalog:
    """Load the topic catalog"""
    builder = get_service_builder()
    catalog = builder.container.get_catalog(catalog_path)
    print(f"Loaded {len(catalog)} topics, {len(catalog.pending())} still to do")
    return catalog


@task(log_prints=True)
def run_demonstrations(principle: str) -> List[DemoResult]:
    """Run every demonstration registered for a principle"""
    builder = get_service_builder()
    registry = builder.container.get_registry()

    results = registry.run_principle(principle)
    failed = [result.example for result in results if not result.holds]
    print(f"{principle}: {len(results)} demonstrations, {len(failed)} failed")
    return results


@task(log_prints=True)
def render_guide(principle: str, results: List[DemoResult], catalog: Catalog) -> str:
    """Render the Markdown guide for one principle"""
    builder = get_service_builder()
    return builder.render_guide(principle, results, catalog)


@task(log_prints=True)
def store_guide(principle: str, content: str, output_dir: Optional[str] = None) -> Dict[str, Any]:
    """Store a rendered guide under the principle's file name"""
    if not content:
        return {"success": False, "error": "No content to store"}

    builder = get_service_builder()
    storage = builder.container.get_local_storage(output_dir)
    result = storage.store_guide(principle, content)

    if result.get("success"):
        print(f"Guide stored: {result.get('file_path', result.get('key'))}")
    else:
        print(f"Failed to store guide: {result.get('error')}")

    return result


@flow(name="SOLID Walkthrough")
def solid_walkthrough(
    principles: Optional[List[str]] = None,
    output_dir: Optional[str] = None,
    catalog_path: Optional[str] = None
) -> Dict[str, Any]:
    """
    Run demonstrations and write one guide per principle

    Raises ValueError before any guide is written when a code is not in the catalog

    Args:
        principles: Principle codes to cover, all catalog principles when omitted
        output_dir: Directory for the rendered guides
        catalog_path: Alternative topic catalog
    """
    catalog = load_topic_catalog(catalog_path)
    codes = [code.upper() for code in principles] if principles else [
        topic.code for topic in catalog.principles()
    ]

    unknown = [code for code in codes if catalog.get(code) is None]
    if unknown:
        raise ValueError(f"Unknown principles: {', '.join(unknown)}")

    print(f"Starting SOLID walkthrough for: {', '.join(codes)}")

    guides: Dict[str, Optional[str]] = {}
    failed_total = 0

    for code in codes:
        results = run_demonstrations(code)
        failed_total += sum(1 for result in results if not result.holds)

        content = render_guide(code, results, catalog)
        stored = store_guide(code, content, output_dir)
        guides[code] = stored.get("file_path") if stored.get("success") else None

    summary = {
        "success": failed_total == 0 and all(guides.values()),
        "guides": guides,
        "failed_demonstrations": failed_total,
        "pending_topics": [topic.code for topic in catalog.pending()]
    }

    if summary["success"]:
        print(f"Walkthrough completed: {len(guides)} guides written")
    else:
        print(f"Walkthrough finished with problems: {failed_total} failing demonstrations")

    return summary


if __name__ == "__main__":
    result = solid_walkthrough()
    print(f"\nWalkthrough result: {result}")
