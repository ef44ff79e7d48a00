"""
Models Module - Immutable value records for the portfolio catalog
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Poster:
    name: str
    url: str


@dataclass(frozen=True)
class Photo:
    src: str  # relative to the static folder
    alt: str
    caption: str = ''


@dataclass(frozen=True)
class Project:
    id: str
    title: str
    subtitle: str
    tag: str
    description: str
    overview: str
    role: str
    technologies: Tuple[str, ...] = field(default_factory=tuple)
    live_link: Optional[str] = None
    code_link: Optional[str] = None
    paper_link: Optional[str] = None
    posters: Optional[Tuple[Poster, ...]] = None

    def __post_init__(self):
        object.__setattr__(self, 'technologies', tuple(self.technologies))
        if self.posters is not None:
            object.__setattr__(self, 'posters', tuple(self.posters))

    @property
    def resource_links(self) -> List[dict]:
        """
        External resource links that are present, in display order:
        paper, then code, then live site.
        """
        candidates = [
            ('paper', 'Read Paper', self.paper_link),
            ('code', 'View Code', self.code_link),
            ('live', 'Live Site', self.live_link),
        ]
        return [
            {'kind': kind, 'label': label, 'url': url}
            for kind, label, url in candidates
            if url
        ]

    @property
    def detail_path(self) -> str:
        return f'/project/{self.id}'
