#!/usr/bin/env python3
"""
Tests for configuration, logging, storage, transformers and the container
"""

import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
import sys

sys.path.append(str(Path(__file__).parent.parent))

from solid_guide.catalog import Topic
from solid_guide.config import (
    ConfigurationManager, DictConfigProvider, EnvironmentConfigProvider, GuideConfiguration
)
from solid_guide.container import DIContainer, ServiceBuilder
from solid_guide.demonstrations import DemonstrationRegistry
from solid_guide.errors import ServiceNotRegisteredError
from solid_guide.interfaces import COMPLIANT, VIOLATION, DemoResult, StorageProvider
from solid_guide.logging import ConsoleLogger, LoggerFactory, PrefectLogger, StandardLogger
from solid_guide.storage import LocalFileStorage, StorageFactory, guide_key
from solid_guide.transformers import JSONReportTransformer, MarkdownGuideTransformer


class TestConfiguration(unittest.TestCase):

    def test_defaults(self):
        config = ConfigurationManager(DictConfigProvider({})).get_guide_config()
        self.assertEqual(config.output_dir, "output")
        self.assertTrue(config.catalog_path.endswith("catalog.yaml"))
        self.assertTrue(config.validate())

    def test_provider_values_and_override(self):
        manager = ConfigurationManager(DictConfigProvider({
            "OUTPUT_DIR": "guides", "LOG_LEVEL": "debug", "LOGGER_TYPE": "standard"
        }))
        config = manager.get_guide_config()
        self.assertEqual(config.output_dir, "guides")
        self.assertEqual(config.log_level, "DEBUG")
        self.assertEqual(manager.get_guide_config(output_dir="elsewhere").output_dir, "elsewhere")

    def test_invalid_logger_type(self):
        self.assertFalse(GuideConfiguration(logger_type="syslog").validate())

    def test_environment_provider_prefix(self):
        provider = EnvironmentConfigProvider(prefix="SOLID_GUIDE_TEST_")
        self.assertEqual(provider.get("UNSET_VALUE", "fallback"), "fallback")


class TestLoggers(unittest.TestCase):

    def test_console_logger_skips_debug_by_default(self):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            logger = ConsoleLogger("demo")
            logger.info("hello")
            logger.debug("hidden")
        output = buffer.getvalue()
        self.assertIn("INFO - demo: hello", output)
        self.assertNotIn("hidden", output)

    def test_prefect_logger_outside_run_prints(self):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            PrefectLogger().error("failed")
        self.assertIn("ERROR: failed", buffer.getvalue())

    def test_factory_by_type(self):
        self.assertIsInstance(LoggerFactory.create("console"), ConsoleLogger)
        self.assertIsInstance(LoggerFactory.create("standard", "solid_guide.test"), StandardLogger)
        with self.assertRaises(ValueError):
            LoggerFactory.create("syslog")


class TestLocalFileStorage(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.storage = StorageFactory.create_local_storage(self.tmp.name, ConsoleLogger(level="ERROR"))

    def test_store_exists_delete(self):
        result = self.storage.store("# Guide\n", "guides/srp.md", content_type="text/markdown")

        self.assertTrue(result["success"])
        self.assertTrue(self.storage.exists("guides/srp.md"))
        self.assertEqual(Path(result["file_path"]).read_text(encoding="utf-8"), "# Guide\n")

        deleted = self.storage.delete("guides/srp.md")
        self.assertTrue(deleted["success"])
        self.assertFalse(self.storage.exists("guides/srp.md"))

    def test_delete_missing(self):
        result = self.storage.delete("nothing.md")
        self.assertFalse(result["success"])
        self.assertEqual(result["error"], "File does not exist")

    def test_store_failure_is_reported(self):
        Path(self.tmp.name, "blocker").write_text("file, not a directory")
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            result = self.storage.store("x", "blocker/guide.md")
        self.assertFalse(result["success"])
        self.assertIn("Failed to store content", result["error"])

    def test_is_a_storage_provider(self):
        self.assertIsInstance(LocalFileStorage(self.tmp.name), StorageProvider)

    def test_store_guide_names_file_after_topic(self):
        topic = Topic(code="OCP", title="Open/Closed Principle", kind="principle")

        result = self.storage.store_guide(topic, "# OCP\n")

        self.assertTrue(result["success"])
        self.assertEqual(result["key"], "ocp.md")
        self.assertEqual(result["topic"], "OCP")
        self.assertEqual(result["content_type"], "text/markdown")
        self.assertEqual(result["bytes"], 6)
        self.assertTrue(self.storage.exists("ocp.md"))

    def test_store_guide_json_report(self):
        result = self.storage.store_guide("report", "[]", "json")

        self.assertEqual(result["key"], "report.json")
        self.assertEqual(result["content_type"], "application/json")

    def test_content_type_derived_from_extension(self):
        self.assertEqual(self.storage.store("{}", "summary.json")["content_type"], "application/json")
        self.assertIsNone(self.storage.store("x", "notes.txt")["content_type"])

    def test_guide_key_rejects_unknown_format(self):
        self.assertEqual(guide_key("SRP"), "srp.md")
        with self.assertRaises(ValueError):
            guide_key("SRP", "html")
        with self.assertRaises(ValueError):
            guide_key("")

    def test_list_guides_skips_other_files(self):
        self.storage.store_guide("DIP", "# DIP\n")
        self.storage.store_guide("report", "[]", "json")
        self.storage.store("x", "notes.txt")

        self.assertEqual(self.storage.list_guides(), ["dip.md", "report.json"])


class TestTransformers(unittest.TestCase):

    def setUp(self):
        self.results = [
            DemoResult("LSP", "Square extends Rectangle", VIOLATION, True,
                       ["Rectangle area: 20", "Square area: 16"], 20, 16),
            DemoResult("LSP", "Shapes | siblings", COMPLIANT, False, ["Area: 20"]),
        ]
        self.topic = Topic(
            code="LSP", title="Liskov Substitution Principle",
            definition="Subtypes must be substitutable.",
            why_important=["Keeps polymorphism honest"],
            checklist=["Would clients still pass?"]
        )

    def test_markdown_guide(self):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            page = MarkdownGuideTransformer(self.topic).transform(self.results)

        self.assertTrue(page.startswith("# Liskov Substitution Principle (LSP)"))
        self.assertIn("## Why important?", page)
        self.assertIn("- [ ] Would clients still pass?", page)
        self.assertIn("| Square extends Rectangle | violation | yes | Rectangle area: 20; Square area: 16 |", page)
        self.assertIn("Shapes \\| siblings", page)
        self.assertNotIn("## When to use?", page)

    def test_markdown_pending_topic(self):
        topic = Topic(code="STRATEGY", title="Strategy Pattern", kind="pattern", status="todo")
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            page = MarkdownGuideTransformer(topic).transform([])
        self.assertIn("_Still to do._", page)

    def test_json_report(self):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            payload = json.loads(JSONReportTransformer().transform(self.results))
        self.assertEqual(payload["total"], 2)
        self.assertEqual(payload["failed"], 1)
        self.assertEqual(payload["results"][0]["actual"], 16)


class TestContainer(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.container = DIContainer(DictConfigProvider({
            "OUTPUT_DIR": self.tmp.name, "LOGGER_TYPE": "standard", "LOG_LEVEL": "ERROR"
        }))

    def test_registered_factories(self):
        self.assertIsInstance(self.container.get(DemonstrationRegistry), DemonstrationRegistry)
        self.assertEqual(self.container.get(GuideConfiguration).output_dir, self.tmp.name)

    def test_singleton_wins(self):
        config = GuideConfiguration(output_dir="pinned")
        self.container.register_singleton(GuideConfiguration, config)
        self.assertIs(self.container.get(GuideConfiguration), config)

    def test_unregistered_service(self):
        with self.assertRaises(ServiceNotRegisteredError):
            self.container.get(Topic)

    def test_logger_follows_configuration(self):
        self.assertIsInstance(self.container.get_logger(), StandardLogger)

    def test_unknown_topic(self):
        with self.assertRaises(ValueError):
            self.container.get_guide_transformer("NOPE")

    def test_builder_renders_guide(self):
        builder = ServiceBuilder(self.container)
        services = builder.build_walkthrough()
        results = services["registry"].run_principle("ISP")

        page = builder.render_guide("ISP", results, services["catalog"])
        stored = services["storage"].store_guide("ISP", page)

        self.assertTrue(stored["success"])
        self.assertIn("Interface Segregation Principle", Path(stored["file_path"]).read_text(encoding="utf-8"))


if __name__ == '__main__':
    unittest.main(verbosity=2)
