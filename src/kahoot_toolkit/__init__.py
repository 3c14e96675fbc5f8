"""Top-level package for the Kahoot result converter.

Provides subpackages:
- kahoot_toolkit.core – question models, collection and error taxonomy
- kahoot_toolkit.extractor – reads Kahoot result workbooks into a QuestionCollection
- kahoot_toolkit.builder – renders a QuestionCollection to DOCX/PDF
- kahoot_toolkit.cli – command line entry point
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    # In dev mode, read directly from pyproject.toml
    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"

    if pyproject.exists():
        try:
            content = pyproject.read_text(encoding="utf-8")
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    # Fallback to importlib.metadata for installed package
    try:
        from importlib.metadata import version as pkg_version
        return pkg_version("kahoot-toolkit")
    except Exception:
        return "0.0.0"

__version__ = _get_version()
__copyright__ = "Copyright 2026 kahoot_toolkit contributors. Licensed under the MIT License"
__all__: list[str] = ["__version__", "__copyright__"]
