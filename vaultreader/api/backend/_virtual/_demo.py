"""Built-in demo vault: bootstrap manifest and bundled default contents."""

from typing import Any

WELCOME_CONTENT = """# Welcome to vaultreader

This is a **virtual vault** demonstrating the reader's capabilities.

## Wiki Links Demo

- Link to another note: [[Projects/Alpha/Specs]] (Standard link)
- Link with alias: [[Projects/Alpha/Specs|Project Alpha Specs]]
- Link by filename only: [[Specs]] (Auto-resolve)

## Image Attachment Demo

Attachments live in the `FigureBed 🌄` folder, which can be hidden from listings.

Below is an image embedded using Wiki Link syntax `![[demo-image.svg]]`:

![[demo-image.svg]]
"""

PROJECT_SPECS_CONTENT = """---
tags: [project, alpha]
status: draft
---
# Project Alpha Specs

## Overview
Project Alpha aims to revolutionize the way we take notes.

## Requirements
1. **Fast**: Must load in under 100ms.
2. **Offline**: Must work without internet.
3. **Secure**: Local-first architecture.

| Feature | Priority | Status |
| :--- | :--- | :--- |
| File System Access | High | Done |
| Markdown Parser | High | Done |
| Search | Medium | Pending |
"""

MEETING_NOTES_CONTENT = """# Weekly Sync - 2023-10-27

**Attendees**: Alice, Bob, Charlie

## Agenda
- Review sprint progress
- Discuss deployment strategy

## Notes
- Bob suggested using a static manifest file for the hosted version.
- Alice is working on the mobile responsive layout.
"""

MARKDOWN_DEMO_CONTENT = """# Markdown Capabilities

Here is a showcase of supported syntax.

### Code

```python
greeting = "Hello, World!"
print(greeting)
```

### Quotes

> "The best way to predict the future is to invent it."
> Alan Kay

### Lists

- Item 1
- Item 2
  - Nested Item 2.1
  - Nested Item 2.2
"""

DEMO_IMAGE_CONTENT = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="400" height="200" viewBox="0 0 400 200">'
    '<rect width="100%" height="100%" fill="#e3f2fd" />'
    '<text x="50%" y="50%" font-family="arial" font-size="20" fill="#00796b" '
    'dominant-baseline="middle" text-anchor="middle">Demo Image</text></svg>'
)

DEMO_CONTENTS: dict[str, str] = {
    "Welcome.md": WELCOME_CONTENT,
    "Projects/Alpha/Specs.md": PROJECT_SPECS_CONTENT,
    "Work/Meetings/2023-10-27.md": MEETING_NOTES_CONTENT,
    "Tech/Markdown Demo.md": MARKDOWN_DEMO_CONTENT,
    "FigureBed 🌄/demo-image.svg": DEMO_IMAGE_CONTENT,
}


def demo_manifest() -> dict[str, Any]:
    """Manifest of the demo vault, derived from the bundled content paths."""
    root: dict[str, Any] = {"name": "Demo Vault", "kind": "directory", "path": "", "children": []}
    for file_path in DEMO_CONTENTS:
        current = root
        parts = file_path.split("/")
        for depth, part in enumerate(parts):
            path = "/".join(parts[: depth + 1])
            if depth == len(parts) - 1:
                current["children"].append({"name": part, "kind": "file", "path": path})
                break
            existing = next((c for c in current["children"] if c["path"] == path), None)
            if existing is None:
                existing = {"name": part, "kind": "directory", "path": path, "children": []}
                current["children"].append(existing)
            current = existing
    return root
