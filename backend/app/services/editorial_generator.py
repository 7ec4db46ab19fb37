from __future__ import annotations

from typing import Optional


def generate_editorial(prompt: str, title: Optional[str] = None) -> str:
    """Placeholder editorial draft built around the prompt.

    No language model is called; the copy is a fixed house-style template.
    """
    subject = "luxury property market" if "market" in prompt.lower() else "architectural landscape"
    heading = f"# {title}\n\n" if title else ""
    paragraphs = [
        f"The {subject} along the Costa del Sol continues to evolve, driven by discerning buyers "
        "who seek more than just square footage and amenities.",
        prompt,
        "This shift represents a fundamental change in expectations. No longer satisfied with generic "
        "luxury, today's clients appreciate the intersection of design integrity, sustainable materials "
        "and spaces that genuinely enhance daily living. The emphasis has moved from ostentation to "
        "understated refinement, a philosophy that puts quality of life ahead of status.",
        "Recent developments exemplify this trend: clean architectural lines replacing ornate excess, "
        "locally-sourced materials chosen for their longevity and beauty, and layouts that favour natural "
        "light and flow over formal rooms that go unused.",
        "As we look to the future, this editorial approach to property development will only gain "
        "momentum. True luxury lies in the details: the proportion of a room, the quality of natural "
        "light, the thoughtful selection of materials.",
    ]
    return heading + "\n\n".join(paragraphs)
