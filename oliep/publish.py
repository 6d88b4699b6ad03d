import datetime
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .config import FEED_ITEM_LIMIT, FEED_PATH, MINIFY_HTML, READING_WORDS_PER_MINUTE, SITEMAP_PATH, logger
from .formatting import rfc822_date
from .models import PublishingContext, SectionID, TagDetailsPage, sorted_by_date
from .reading_time import with_reading_time
from .renderer import SiteRenderer


@dataclass
class BuildResult:
    """Rendered output keyed by path relative to the output root."""
    files: Dict[str, str] = field(default_factory=dict)
    resource_paths: List[str] = field(default_factory=list)

    def add(self, path: str, text: str):
        if path in self.files:
            raise ValueError(f"Duplicate output path: {path}")
        self.files[path] = text


def _output_path(url_path: str) -> str:
    """'/posts/hello' -> 'posts/hello/index.html'"""
    stripped = url_path.strip('/')
    return f"{stripped}/index.html" if stripped else "index.html"


class SitePublisher:
    """Runs one build pass over a content model, entirely in memory."""

    def __init__(self, context: PublishingContext, renderer: Optional[SiteRenderer] = None):
        self.context = context
        self.renderer = renderer or SiteRenderer(minify=MINIFY_HTML)
        self.result = BuildResult(resource_paths=list(self.renderer.resource_paths))

    def add_reading_times(self, words_per_minute: int = READING_WORDS_PER_MINUTE):
        """Attaches a reading-time estimate to every item."""
        logger.info("Estimating reading times...")
        self.context = self.context.map_items(lambda item: with_reading_time(item, words_per_minute))

    def generate_html(self):
        """Renders every page of the site once."""
        context = self.context
        renderer = self.renderer
        logger.info(f"Generating HTML for {context.site.name}...")

        self.result.add("index.html", renderer.render_index(context.index, context))

        for section_id in context.site.section_ids:
            section = context.section(section_id)
            logger.info(f"Building: {section.path}")
            self.result.add(_output_path(section.path), renderer.render_section(section, context))
            for item in section.items:
                logger.info(f"Building: {item.path}")
                self.result.add(_output_path(item.path), renderer.render_item(item, context))

        for page in context.pages:
            logger.info(f"Building: {page.path}")
            self.result.add(_output_path(page.path), renderer.render_page(page, context))

        tag_list = context.tag_list_page()
        self.result.add(_output_path("/tags"), renderer.render_tag_list(tag_list, context))
        for tag in tag_list.tags:
            self.result.add(_output_path(tag.path), renderer.render_tag_details(TagDetailsPage(tag), context))

    def generate_rss_feed(self, include: Iterable[SectionID] = (SectionID.POSTS,)):
        """Generates an RSS feed for the items of the included sections."""
        logger.info("Generating RSS feed...")
        include = set(include)
        feed_items = sorted_by_date(
            item for item in self.context.all_items() if item.section_id in include
        )[:FEED_ITEM_LIMIT]

        last_updated = feed_items[0].date if feed_items else datetime.date.today()
        xml_output = self.renderer.render(FEED_PATH, {
            'site': self.context.site,
            'items': feed_items,
            'last_updated': rfc822_date(last_updated),
        })
        self.result.add(FEED_PATH, xml_output)
        logger.info(f"Feed generated with {len(feed_items)} items")

    def generate_sitemap(self):
        logger.info("Generating sitemap...")
        context = self.context
        entries = [{'path': '/', 'lastmod': None}]
        for section_id in context.site.section_ids:
            section = context.section(section_id)
            newest = sorted_by_date(section.items)
            entries.append({'path': section.path, 'lastmod': newest[0].date if newest else None})
            entries.extend({'path': item.path, 'lastmod': item.date} for item in section.items)
        entries.extend({'path': page.path, 'lastmod': None} for page in context.pages)
        entries.append({'path': '/tags', 'lastmod': None})
        entries.extend({'path': tag.path, 'lastmod': None} for tag in sorted(context.all_tags()))

        self.result.add(SITEMAP_PATH, self.renderer.render(SITEMAP_PATH, {
            'site': context.site,
            'entries': entries,
        }))

    def publish(self) -> BuildResult:
        """Orchestrates the full build pass."""
        self.add_reading_times()
        self.generate_html()
        self.generate_rss_feed()
        self.generate_sitemap()
        logger.info(f"Build Complete! {len(self.result.files)} files rendered")
        return self.result


def publish(context: PublishingContext, renderer: Optional[SiteRenderer] = None) -> BuildResult:
    return SitePublisher(context, renderer).publish()
