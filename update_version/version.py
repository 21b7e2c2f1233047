from pathlib import Path

def read_version() -> str:
    """Read the release number of update_version from the VERSION file at the repo root."""
    version_file = Path(__file__).resolve().parents[1] / "VERSION"
    try:
        return version_file.read_text(encoding="utf-8").strip() or "0.0.0"
    except OSError:
        return "0.0.0"
