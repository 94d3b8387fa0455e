"""Smoke tests for example scripts.

These tests ensure that the example scripts run their main execution paths
without raising exceptions.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

# Determine the repo root
ROOT = Path(__file__).resolve().parents[1]


def test_network_resilience_example_runs() -> None:
    """Test that examples/network_resilience_demo.py runs successfully."""
    script = ROOT / "examples" / "network_resilience_demo.py"
    assert script.exists(), f"Example script not found: {script}"

    result = subprocess.run(
        [sys.executable, str(script)],
        capture_output=True,
        text=True,
        check=False,
        timeout=30,
    )

    assert result.returncode == 0, (
        f"Example script failed with return code {result.returncode}.\n"
        f"STDOUT:\n{result.stdout}\n"
        f"STDERR:\n{result.stderr}"
    )

    assert "Critical routers: [1, 2, 3, 5, 7]" in result.stdout, (
        "Expected output message not found in script output"
    )
    assert "All examples completed successfully!" in result.stdout
