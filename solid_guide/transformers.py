"""
Report transformers following SOLID principles.
Implements ReportTransformer interface for Markdown guides and JSON reports.
"""
import json
from dataclasses import asdict
from datetime import datetime
from typing import List, Optional

from .catalog import Topic
from .interfaces import ReportTransformer, DemoResult, Logger
from .logging import log_info


class MarkdownGuideTransformer(ReportTransformer):
    """Renders a topic's write-up followed by its live demonstration results"""

    def __init__(self, topic: Topic, logger: Optional[Logger] = None):
        self.topic = topic
        self.logger = logger

    def transform(self, results: List[DemoResult]) -> str:
        """Transform demonstration results to a Markdown guide page"""
        log_info(self.logger, f"Rendering {self.topic.code} guide with {len(results)} results")

        lines = [f"# {self.topic.title} ({self.topic.code})", ""]

        if self.topic.pending:
            lines.extend(["_Still to do._", ""])
            return "\n".join(lines)

        if self.topic.definition:
            lines.extend([self.topic.definition, ""])

        self._add_section(lines, "Why important?", self.topic.why_important)
        self._add_section(lines, "When to use?", self.topic.when_to_use)
        self._add_checklist(lines)
        self._add_results(lines, results)

        lines.append(f"_Generated {datetime.now().strftime('%Y-%m-%d %H:%M')}_")
        return "\n".join(lines) + "\n"

    @staticmethod
    def _add_section(lines: List[str], heading: str, items: List[str]) -> None:
        if not items:
            return
        lines.append(f"## {heading}")
        lines.append("")
        lines.extend(f"- {item}" for item in items)
        lines.append("")

    def _add_checklist(self, lines: List[str]) -> None:
        if not self.topic.checklist:
            return
        lines.append("## Developer's checklist")
        lines.append("")
        lines.extend(f"- [ ] {item}" for item in self.topic.checklist)
        lines.append("")

    @staticmethod
    def _add_results(lines: List[str], results: List[DemoResult]) -> None:
        if not results:
            return
        lines.append("## Examples")
        lines.append("")
        lines.append("| Example | Kind | Demonstrated | Observations |")
        lines.append("|---|---|---|---|")
        for result in results:
            status = "yes" if result.holds else "NO"
            observations = _cell("; ".join(result.observations))
            lines.append(f"| {_cell(result.example)} | {result.label} | {status} | {observations} |")
        lines.append("")


class JSONReportTransformer(ReportTransformer):
    """Transforms demonstration results into JSON format"""

    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger

    def transform(self, results: List[DemoResult]) -> str:
        """Transform demonstration results to JSON"""
        log_info(self.logger, f"Transforming {len(results)} results to JSON")

        payload = {
            "total": len(results),
            "failed": sum(1 for result in results if not result.holds),
            "results": [asdict(result) for result in results]
        }
        return json.dumps(payload, ensure_ascii=False, indent=2, default=str)


def _cell(text: str) -> str:
    """Make text safe for a single Markdown table cell"""
    return text.replace("|", "\\|").replace("\n", " ")
