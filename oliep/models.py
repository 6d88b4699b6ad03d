import datetime
import enum
import sys
from dataclasses import dataclass, field, replace
from typing import Dict, FrozenSet, List, Optional, Tuple

from .config import SITE_DESCRIPTION, SITE_LANGUAGE, SITE_NAME, SITE_URL, logger
from .formatting import normalize_tag


class SectionID(enum.Enum):
    """Closed set of sections the site is built from, in navigation order."""
    POSTS = "posts"
    APPS = "apps"
    ABOUT = "about"

    @property
    def path(self) -> str:
        return f"/{self.value}"


def _fail(what: str, errors: List[str]):
    error_msg = f"Validation failed for '{what}': {', '.join(errors)}"
    logger.error(error_msg)
    print(f"CRITICAL ERROR: {error_msg}", file=sys.stderr)
    raise ValueError(error_msg)


@dataclass(frozen=True, order=True)
class Tag:
    """A label grouping items across sections.

    Identity and ordering come from the normalized form, so "Swift" and
    "swift" are one tag; ``string`` is only the display text.
    """
    normalized: str = field(init=False)
    string: str = field(compare=False)

    def __post_init__(self):
        if not self.string.strip():
            _fail(self.string, ["Tag cannot be empty"])
        normalized = normalize_tag(self.string)
        if not normalized:
            _fail(self.string, ["Tag has no URL-safe characters"])
        object.__setattr__(self, "normalized", normalized)

    @property
    def path(self) -> str:
        return f"/tags/{self.normalized}"

    def __str__(self) -> str:
        return self.string


@dataclass(frozen=True)
class Site:
    name: str
    url: str
    description: str
    language: str
    section_ids: Tuple[SectionID, ...] = tuple(SectionID)

    def __post_init__(self):
        errors = []
        if not self.name.strip():
            errors.append("Site name cannot be empty")
        if not self.url.startswith(('http://', 'https://')):
            errors.append(f"Site URL must be absolute: {self.url}")
        if len(set(self.section_ids)) != len(self.section_ids):
            errors.append("Section ids must be unique")
        if errors:
            _fail(self.name, errors)

    def absolute_url(self, path: str) -> str:
        return self.url.rstrip('/') + '/' + path.lstrip('/')


@dataclass(frozen=True)
class Item:
    """A dated content entry belonging to exactly one section."""
    title: str
    date: datetime.date
    body: str
    section_id: SectionID
    slug: str
    tags: Tuple[Tag, ...] = ()
    description: str = ""
    reading_time: float = 0.0

    def __post_init__(self):
        # repeated tags collapse onto their first occurrence
        object.__setattr__(self, "tags", tuple(dict.fromkeys(self.tags)))
        errors = []
        if not self.title.strip():
            errors.append("Title cannot be empty")
        if not self.slug.strip() or '/' in self.slug:
            errors.append(f"Slug must be a single path component: {self.slug!r}")
        if not isinstance(self.date, datetime.date):
            errors.append(f"Date must be a date: {self.date!r}")
        if not isinstance(self.section_id, SectionID):
            errors.append(f"Unknown section: {self.section_id!r}")
        if self.reading_time < 0:
            errors.append("Reading time cannot be negative")
        if errors:
            _fail(self.slug, errors)

    @property
    def path(self) -> str:
        return f"{self.section_id.path}/{self.slug}"

    def with_reading_time(self, minutes: float) -> "Item":
        return replace(self, reading_time=minutes)


@dataclass(frozen=True)
class Section:
    id: SectionID
    title: str
    body: str = ""
    items: Tuple[Item, ...] = ()

    def __post_init__(self):
        errors = []
        if not self.title.strip():
            errors.append("Title cannot be empty")
        strays = [item.slug for item in self.items if item.section_id is not self.id]
        if strays:
            errors.append(f"Items belong to another section: {', '.join(strays)}")
        if errors:
            _fail(self.id.value, errors)

    @property
    def path(self) -> str:
        return self.id.path


@dataclass(frozen=True)
class Page:
    """Free-standing content not tied to a section."""
    title: str
    body: str
    slug: str

    def __post_init__(self):
        errors = []
        if not self.title.strip():
            errors.append("Title cannot be empty")
        if not self.slug.strip():
            errors.append("Slug cannot be empty")
        if errors:
            _fail(self.slug, errors)

    @property
    def path(self) -> str:
        return f"/{self.slug.strip('/')}"


@dataclass(frozen=True)
class Index:
    body: str = ""
    title: str = ""
    description: str = ""


@dataclass(frozen=True)
class TagListPage:
    tags: FrozenSet[Tag]


@dataclass(frozen=True)
class TagDetailsPage:
    tag: Tag


@dataclass(frozen=True)
class PublishingContext:
    """Everything a render needs to know about the site, read-only."""
    site: Site
    sections: Dict[SectionID, Section]
    index: Index = field(default_factory=Index)
    pages: Tuple[Page, ...] = ()

    def __post_init__(self):
        missing = [sid.value for sid in self.site.section_ids if sid not in self.sections]
        if missing:
            _fail(self.site.name, [f"Missing sections: {', '.join(missing)}"])

    def section(self, section_id: SectionID) -> Section:
        return self.sections[section_id]

    def all_items(self) -> List[Item]:
        return [item for sid in self.site.section_ids for item in self.sections[sid].items]

    def items_tagged(self, tag: Tag) -> List[Item]:
        return [item for item in self.all_items() if tag in item.tags]

    def all_tags(self) -> FrozenSet[Tag]:
        return frozenset(tag for item in self.all_items() for tag in item.tags)

    def tag_count(self, tag: Tag) -> int:
        return len(self.items_tagged(tag))

    def tag_list_page(self) -> TagListPage:
        return TagListPage(tags=self.all_tags())

    def map_items(self, transform) -> "PublishingContext":
        """Copy of the context with ``transform`` applied to every item."""
        sections = {
            sid: replace(section, items=tuple(transform(item) for item in section.items))
            for sid, section in self.sections.items()
        }
        return replace(self, sections=sections)


def sorted_by_date(items) -> List[Item]:
    """Newest first; items sharing a date keep their given order."""
    return sorted(items, key=lambda x: x.date, reverse=True)


def sorted_tags(tags) -> List[Tag]:
    return sorted(tags)


def default_site(section_ids: Optional[Tuple[SectionID, ...]] = None) -> Site:
    return Site(
        name=SITE_NAME,
        url=SITE_URL,
        description=SITE_DESCRIPTION,
        language=SITE_LANGUAGE,
        section_ids=section_ids or tuple(SectionID),
    )
