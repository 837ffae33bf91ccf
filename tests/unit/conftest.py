"""
Shared test fixtures for all unit tests.
Provides mock uploads, sample README text and an httpx mock transport so no
network access is needed.
"""
from pathlib import Path

import httpx
import pytest


SAMPLE_README = """# JavaScript Interview Questions

<!-- TOC_START -->
### Table of Contents

| No. | Questions |
| --- | --------- |
| 1 | [What is closure?](#what-is-closure) |
| 2 | [What is hoisting?](#what-is-hoisting) |
| 3 | [What are the possible ways to create objects](#what-are-the-possible-ways-to-create-objects) |
<!-- TOC_END -->

Intro text that is outside both sections.

<!-- QUESTIONS_START -->
### What is closure?
A closure is a function bundled with its lexical scope.
#### Example
```js
function outer() { return () => 1; }
```
### What is hoisting?
Declarations are moved to the top of their scope.
### What are the possible ways to create objects
Object literals, constructors and `Object.create`.
<!-- QUESTIONS_END -->
"""


# ---------------------------------------------------------------------------
# MockUploadFile – mimics FastAPI's UploadFile
# ---------------------------------------------------------------------------
class MockUploadFile:
    """Mock UploadFile that works with async test code."""

    def __init__(
        self,
        filename: str = "README.md",
        content_type: str = "text/markdown",
        content: bytes = SAMPLE_README.encode("utf-8"),
    ):
        self.filename = filename
        self.content_type = content_type
        self._content = content

    async def read(self) -> bytes:
        return self._content


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_readme():
    return SAMPLE_README


@pytest.fixture
def mock_upload_file():
    """Return a factory that creates MockUploadFile instances."""
    def _factory(
        filename="README.md",
        content_type="text/markdown",
        content=SAMPLE_README.encode("utf-8"),
    ):
        return MockUploadFile(filename=filename, content_type=content_type, content=content)
    return _factory


@pytest.fixture
def markdown_transport():
    """
    Return a factory building an ``httpx.MockTransport``.

    Usage:
        transport = markdown_transport(text="...", status_code=200)
        transport.requests  # list of requests seen
    """
    def _factory(text=SAMPLE_README, status_code=200, exc=None):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if exc is not None:
                raise exc
            return httpx.Response(status_code, text=text)

        transport = httpx.MockTransport(handler)
        transport.requests = seen
        return transport
    return _factory


def questions_section(*lines: str) -> str:
    """Helper: wrap lines in the questions sentinels."""
    return "\n".join(["<!-- QUESTIONS_START -->", *lines, "<!-- QUESTIONS_END -->"])


def toc_section(*lines: str) -> str:
    """Helper: wrap lines in the TOC sentinels."""
    return "\n".join(["<!-- TOC_START -->", *lines, "<!-- TOC_END -->"])


def write_markdown_file(directory: Path, name: str, content: str = SAMPLE_README) -> Path:
    """Helper: write a Markdown file on disk."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(content, encoding="utf-8")
    return path
