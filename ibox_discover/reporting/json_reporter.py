"""JSON report generator for discovery results.

Generates structured JSON reports from a DiscoveryResult.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from ..config.schema import DiscoveryConfig
from ..discovery.errors import DiscoveryResult


class JsonReporter:
    """Generates JSON reports from discovery results."""

    def generate(
        self,
        result: DiscoveryResult,
        config: Optional[DiscoveryConfig] = None,
    ) -> dict[str, Any]:
        """Generate a JSON report from a discovery run.

        Args:
            result: Outcome of the run.
            config: Settings the run used, echoed into the report.

        Returns:
            Report dictionary ready for JSON serialization.
        """
        fatal = result.fatal_issue

        report = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "status": "aborted" if fatal else "completed",
            "summary": {
                "devices": result.device_count,
                "targets": len(result.targets),
                "issues": len(result.issues),
                "discarded": result.discarded,
                "duration_ms": result.duration_ms,
            },
            "config": config.to_dict() if config else None,
            "targets": list(result.targets),
            "devices": [d.to_dict() for d in result.devices],
            "issues": [i.to_dict() for i in result.issues],
            "error": fatal.message if fatal else None,
        }

        return report

    def save(self, report: dict[str, Any], path: Path) -> Path:
        """Save report to a JSON file.

        Args:
            report: Report dictionary.
            path: Output file path.

        Returns:
            Path to the saved file.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2, ensure_ascii=False)

        return path

    def to_json_string(self, report: dict[str, Any], pretty: bool = True) -> str:
        """Convert report to JSON string.

        Args:
            report: Report dictionary.
            pretty: If True, format with indentation.

        Returns:
            JSON string.
        """
        if pretty:
            return json.dumps(report, indent=2, ensure_ascii=False)
        return json.dumps(report, ensure_ascii=False)
