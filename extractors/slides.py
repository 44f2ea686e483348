"""
Slides Extractor — Pure function for summarising presentation metadata.

Receives the presentation object from the platform, returns plain text.
Only slide identifiers are listed; rendered slide content is not available.
No API calls, no MCP awareness.
"""

from typing import Any


def render_slides(presentation: dict[str, Any]) -> str:
    """
    Summarise a presentation.

    Returns:
        Text like:
            Presentation title: Q3 Review

            3 slides

            Slide 1: p1
            Slide 2: p2
            Slide 3: p3
    """
    slides = presentation.get("slides") or []
    lines = [
        f"Presentation title: {presentation.get('title') or 'Untitled'}",
        "",
        f"{len(slides)} slides",
        "",
    ]
    for index, slide in enumerate(slides, start=1):
        lines.append(f"Slide {index}: {slide.get('object_id', '')}")
    return "\n".join(lines) + "\n"
