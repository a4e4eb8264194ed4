"""
Blog Content Model

Typed view over generated blog posts as produced by the content pipeline
(JSON with camelCase keys).
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.exceptions import QualityGateError


@dataclass
class BlogSection:
    heading: str = ""
    content: str = ""


@dataclass
class Source:
    title: str = ""
    url: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {'title': self.title, 'url': self.url}


@dataclass
class RealWorldExample:
    company: str = ""
    scenario: str = ""
    lesson: str = ""


@dataclass
class BlogContent:
    """A generated blog post."""
    title: str = ""
    introduction: str = ""
    sections: List[BlogSection] = field(default_factory=list)
    conclusion: str = ""
    tags: List[str] = field(default_factory=list)
    sources: List[Source] = field(default_factory=list)
    real_world_example: Optional[RealWorldExample] = None
    diagram: str = ""
    glossary: List[Any] = field(default_factory=list)
    quick_reference: List[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BlogContent":
        """Build from pipeline JSON; missing fields become empty."""
        if not isinstance(data, dict):
            raise QualityGateError("Blog content must be a JSON object")

        sections = [
            BlogSection(heading=s.get('heading') or "", content=s.get('content') or "")
            for s in data.get('sections') or []
            if isinstance(s, dict)
        ]
        sources = [
            Source(title=s.get('title') or "", url=s.get('url') or "")
            for s in data.get('sources') or []
            if isinstance(s, dict)
        ]

        example_data = data.get('realWorldExample', data.get('real_world_example'))
        example = None
        if isinstance(example_data, dict):
            example = RealWorldExample(
                company=example_data.get('company') or "",
                scenario=example_data.get('scenario') or "",
                lesson=example_data.get('lesson') or "",
            )

        return cls(
            title=data.get('title') or "",
            introduction=data.get('introduction') or "",
            sections=sections,
            conclusion=data.get('conclusion') or "",
            tags=[str(t) for t in data.get('tags') or []],
            sources=sources,
            real_world_example=example,
            diagram=data.get('diagram') or "",
            glossary=list(data.get('glossary') or []),
            quick_reference=list(data.get('quickReference', data.get('quick_reference')) or []),
        )


def load_blog(path: Path) -> BlogContent:
    """Load blog content from a JSON file."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise QualityGateError(f"Could not load blog content from {path}: {e}")
    return BlogContent.from_dict(data)
