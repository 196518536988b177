"""
Test the guide architecture end to end: container, registry, transformers and storage.
"""
import sys
import tempfile
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent))

from solid_guide.config import DictConfigProvider
from solid_guide.container import DIContainer, ServiceBuilder


def test_solid_architecture():
    """Run every demonstration and publish one guide per principle"""
    print("Testing SOLID guide architecture...")

    with tempfile.TemporaryDirectory() as output_dir:
        container = DIContainer(DictConfigProvider({"OUTPUT_DIR": output_dir}))
        builder = ServiceBuilder(container)
        services = builder.build_walkthrough()

        catalog = services['catalog']
        registry = services['registry']
        storage = services['storage']

        # Demonstrations (each example proves exactly one principle)
        results = registry.run_all()
        failing = [result.example for result in results if not result.holds]
        print(f"Ran {len(results)} demonstrations, failing: {failing}")
        assert not failing

        # Guides (OCP - new topics only need a catalog entry)
        for topic in catalog.principles():
            topic_results = [result for result in results if result.principle == topic.code]
            page = builder.render_guide(topic.code, topic_results, catalog)
            stored = storage.store_guide(topic, page)
            assert stored['success'], stored
            print(f"Guide saved to: {stored['file_path']}")

        # JSON report (DIP - same results, different transformer)
        report = services['json_transformer'].transform(results)
        assert storage.store_guide("report", report, "json")['success']

        written = storage.list_guides()
        print(f"Written files: {written}")
        assert written == ["dip.md", "isp.md", "lsp.md", "ocp.md", "report.json", "srp.md"]

    print("SOLID guide architecture test completed!")


if __name__ == "__main__":
    test_solid_architecture()
