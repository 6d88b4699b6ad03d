from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import minify_html
from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from . import config
from .config import TEMPLATES_DIR, logger
from .formatting import cdata_safe, long_date, reading_minutes, rfc822_date
from .models import (
    Index, Item, Page, PublishingContext, Section, SectionID, TagDetailsPage, TagListPage,
    sorted_by_date, sorted_tags,
)


def _tag_entries(page: TagListPage, context: PublishingContext) -> List[Dict[str, Any]]:
    """Tags in alphabetical order, each with the number of items carrying it."""
    return [{'tag': tag, 'count': context.tag_count(tag)} for tag in sorted_tags(page.tags)]


class SiteRenderer:
    """Turns one piece of content plus the site context into an HTML document.

    Every ``render_*`` method is a pure function of its arguments; the
    instance only holds the template environment.
    """

    resource_paths: Tuple[str, ...] = tuple(config.RESOURCE_PATHS)

    def __init__(self, templates_dir: Path = TEMPLATES_DIR, minify: bool = False):
        if not templates_dir.exists():
            logger.error(f"Templates directory not found: {templates_dir}")
            raise FileNotFoundError(f"Templates directory not found: {templates_dir}")

        self.minify = minify
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(['html', 'xml', 'rss']),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True
        )

        self.env.filters.update({
            'long_date': long_date,
            'reading_minutes': reading_minutes,
            'rfc822_date': rfc822_date,
            'cdata_safe': cdata_safe,
        })
        self.env.globals.update({
            'SectionID': SectionID,
            'stylesheets': config.STYLESHEETS,
            'avatar': config.AVATAR,
            'social_links': config.SOCIAL_LINKS,
            'icon_font_script': config.ICON_FONT_SCRIPT,
            'nav_extra_link': config.NAV_EXTRA_LINK,
            'framework_link': config.FRAMEWORK_LINK,
            'inspiration_link': config.INSPIRATION_LINK,
            'author_name': config.AUTHOR_NAME,
            'feed_path': '/' + config.FEED_PATH,
        })

    def render(self, template_name: str, context: Dict[str, Any], minify: Optional[bool] = None) -> str:
        """Renders a template and optionally minifies the output."""
        if minify is None:
            minify = self.minify
        try:
            template = self.env.get_template(template_name)
            html = template.render(context)

            if minify and template_name.endswith('.html'):
                return minify_html.minify(
                    html,
                    minify_css=True,
                    minify_js=False,
                    remove_processing_instructions=True
                )
            return html
        except Exception as e:
            logger.error(f"Error rendering template {template_name}: {e}")
            raise

    def _render_document(self, template_name: str, context: PublishingContext, page_title: str,
                         description: str = "", **kwargs) -> str:
        site = context.site
        title = f"{page_title} | {site.name}" if page_title else site.name
        logger.debug(f"Rendering {template_name}: {title}")
        return self.render(template_name, {
            'site': site,
            'context': context,
            'title': title,
            'page_description': description or site.description,
            'selected_section': None,
            **kwargs
        })

    def render_index(self, index: Index, context: PublishingContext) -> str:
        return self._render_document(
            'index.html', context, index.title,
            description=index.description, index=index,
        )

    def render_section(self, section: Section, context: PublishingContext) -> str:
        return self._render_document(
            'section.html', context, section.title,
            section=section, items=sorted_by_date(section.items),
        )

    def render_item(self, item: Item, context: PublishingContext) -> str:
        return self._render_document(
            'item.html', context, item.title,
            description=item.description, item=item,
        )

    def render_page(self, page: Page, context: PublishingContext) -> str:
        return self._render_document('page.html', context, page.title, page=page)

    def render_tag_list(self, page: TagListPage, context: PublishingContext) -> str:
        return self._render_document('tag_list.html', context, "Tags", tags=_tag_entries(page, context))

    def render_tag_details(self, page: TagDetailsPage, context: PublishingContext) -> str:
        items = sorted_by_date(context.items_tagged(page.tag))
        return self._render_document(
            'tag_details.html', context, f"Tagged with {page.tag}",
            tag=page.tag, items=items,
        )

    # Shared fragments, exposed for callers that compose their own pages.

    @property
    def _macros(self):
        return self.env.get_template('macros.html').module

    def header(self, context: PublishingContext, selected_section: Optional[SectionID] = None) -> str:
        return str(self._macros.header(context, selected_section))

    def footer(self) -> str:
        return str(self._macros.footer())

    def item_list(self, items: List[Item]) -> str:
        """Renders ``items`` in the order given."""
        return str(self._macros.item_list(items))

    def item_metadata(self, item: Item) -> str:
        return str(self._macros.item_metadata(item))

    def tag_list(self, page: TagListPage, context: PublishingContext) -> str:
        return str(self._macros.tag_list(_tag_entries(page, context)))
