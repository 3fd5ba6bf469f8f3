"""Enforce import boundaries via importlinter.

Contracts live in pyproject.toml under [tool.importlinter.contracts]:

- guest programs import nothing from the host (their source is the program
  identity, so host changes must not leak into it);
- the prover/verifier services depend on ports only, never on adapters or
  the bootstrap wiring.
"""

from __future__ import annotations

import shutil
import subprocess
import sys
from pathlib import Path


def test_importlinter_contracts_enforced() -> None:
    """Run lint-imports and assert every contract is kept."""
    lint_imports = shutil.which("lint-imports")
    if lint_imports is None:
        # Fallback to virtualenv bin directory
        lint_imports = str(Path(sys.executable).parent / "lint-imports")

    result = subprocess.run(
        [lint_imports],
        capture_output=True,
        text=True,
        cwd=Path(__file__).resolve().parent.parent,
    )

    if result.returncode != 0:
        output = result.stdout + "\n" + result.stderr
        raise AssertionError(f"Import contracts violated.\n\nOutput:\n{output}")

    assert "Contracts:" in result.stdout, (
        "Unexpected importlinter output - missing 'Contracts:' summary. "
        f"Got: {result.stdout[:500]}"
    )
    assert "0 broken" in result.stdout, f"Contract status unclear. Output: {result.stdout[:500]}"
