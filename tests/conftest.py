"""Test setup for vibedocs."""

from __future__ import annotations

import sys
import textwrap
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests that run the CLI end to end",
    )


SAMPLE_CORPUS: dict[str, str] = {
    "01-getting-started/overview.md": """\
        ---
        title: Getting Started
        description: Learn the fundamentals of VibeCode methodology
        author: Ada Example
        date: 2024-01-15
        tags: [basics, introduction]
        order: 1
        ---
        # Getting Started

        Welcome to the guide. Context Engineering is covered later.

        ## Setup

        Install the tools.

        ```bash
        # not a heading
        npm install
        ```

        ## Setup

        Second setup section.

        Next: [Installation](installation.md)
        """,
    "01-getting-started/installation.md": """\
        ---
        title: Installation
        order: 2
        ---
        # Installation

        Steps to install. See [setup](overview.md#setup) and [web](../04-web-development/overview.md).

        Up: [Getting Started](overview.md)
        """,
    "04-web-development/overview.md": """\
        # Web Development Excellence

        Frontend and backend strategies with context engineering.

        Next: [React](frontend/react.md)
        """,
    "04-web-development/draft.md": """\
        ---
        title: Draft Notes
        published: false
        ---
        # Draft Notes

        Not ready yet.
        """,
    "04-web-development/frontend/react.md": """\
        ---
        title: React Patterns
        tags: [web, frontend]
        ---
        # React Patterns

        Components and hooks.

        ```tsx
        export const App = () => null
        ```
        """,
    "GLOSSARY.md": """\
        # Glossary

        - **Context Engineering**: layered prompting context.
        """,
    "TOC.md": """\
        # Table of Contents

        - [Overview](01-getting-started/overview.md)
        - [Installation](01-getting-started/installation.md)
        - [Web](04-web-development/overview.md)
        - [Draft](04-web-development/draft.md)
        - [React](04-web-development/frontend/react.md)
        - [Glossary](GLOSSARY.md)
        """,
}


def write_corpus(root: Path, files: dict[str, str]) -> Path:
    """Write ``{relative path: markdown}`` under ``root`` and return ``root``."""
    for relative, text in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(text), encoding="utf-8")
    return root


@pytest.fixture
def docs_root(tmp_path: Path) -> Path:
    """A small, lint-clean corpus with two sections and a nested subsection."""
    return write_corpus(tmp_path / "docs", SAMPLE_CORPUS)
