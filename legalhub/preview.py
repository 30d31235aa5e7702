"""
legalhub.preview – markdown → HTML for the editor's live preview.

Rendering is delegated to Python-Markdown with the extensions that cover
the GitHub-flavoured features the editor advertises (tables, fenced code).
Raw HTML in the source is escaped rather than passed through, and links or
images pointing at script-capable URL schemes lose their target, so the
preview can be echoed back into the page safely.
"""
from __future__ import annotations

import re
import xml.etree.ElementTree as etree

import markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

_UNSAFE_SCHEME_RE = re.compile(r"^\s*(javascript|vbscript|data):", re.IGNORECASE)


class _DropUnsafeUrls(Treeprocessor):
    def run(self, root: etree.Element) -> None:
        for element in root.iter():
            for attribute in ("href", "src"):
                # control characters are ignored by browsers inside schemes
                value = re.sub(r"[\x00-\x20]", "", element.get(attribute, ""))
                if _UNSAFE_SCHEME_RE.match(value):
                    element.set(attribute, "")


class EscapeHtmlExtension(Extension):
    """Treat raw HTML as text and neutralise unsafe link targets."""

    def extendMarkdown(self, md: markdown.Markdown) -> None:
        md.preprocessors.deregister("html_block")
        md.inlinePatterns.deregister("html")
        md.treeprocessors.register(_DropUnsafeUrls(md), "drop_unsafe_urls", 0)


def _extensions() -> list:
    return ["tables", "fenced_code", "sane_lists", EscapeHtmlExtension()]


SAMPLE_MARKDOWN = """# Welcome to the Markdown Editor!

This is a live preview of your Markdown text. You can use standard Markdown syntax here.

## Features

- Real-time preview
- GitHub Flavored Markdown (GFM) support for tables, fenced code, etc.
- AI-powered summarization

### Example Table

| Feature         | Status         |
| --------------- | -------------- |
| Live Preview    | ✅ Complete    |
| AI Summarizer   | ✅ Complete    |
| More Features   | 🚀 Coming Soon |

### Example Code Block

```javascript
function greet() {
  console.log("Hello, Markdown!");
}
greet();
```

Start typing in the editor to see the magic happen!
"""


def render_markdown(text: str) -> str:
    """Render markdown source to an HTML fragment."""
    if not text.strip():
        return ""
    return markdown.markdown(text, extensions=_extensions(), output_format="html")
