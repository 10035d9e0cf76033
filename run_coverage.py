"""
Run the daptest suite under coverage.

Pass ``--open`` to view the HTML report in a browser afterwards.
"""

import subprocess
import sys
import webbrowser
from pathlib import Path


def run_coverage(open_report: bool = False) -> int:
    """Run pytest with coverage for the daptest package."""
    cmd = [
        sys.executable,
        "-m",
        "pytest",
        "--cov=daptest",
        "--cov-report=term-missing",
        "--cov-report=html",
    ]

    project_dir = Path(__file__).resolve().parent
    result = subprocess.run(cmd, check=False, cwd=str(project_dir))

    html_path = project_dir / "htmlcov" / "index.html"
    if result.returncode == 0 and open_report and html_path.exists():
        webbrowser.open(f"file://{html_path}")
    return result.returncode


if __name__ == "__main__":
    sys.exit(run_coverage(open_report="--open" in sys.argv[1:]))
