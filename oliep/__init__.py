from .config import (
    RESOURCE_PATHS, SITE_DESCRIPTION, SITE_LANGUAGE, SITE_NAME, SITE_URL, TEMPLATES_DIR, logger,
)
from .formatting import long_date, normalize_tag, reading_minutes
from .models import (
    Index, Item, Page, PublishingContext, Section, SectionID, Site, Tag, TagDetailsPage,
    TagListPage, default_site,
)
from .publish import BuildResult, SitePublisher, publish
from .reading_time import estimate_reading_time, with_reading_time
from .renderer import SiteRenderer
