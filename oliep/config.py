import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Logging Configuration
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger("oliep")

# Environment overrides (.env is optional)
load_dotenv()

# Base Directories
PACKAGE_ROOT = Path(__file__).parent.absolute()
TEMPLATES_DIR = PACKAGE_ROOT / "templates"

# Site Metadata
SITE_NAME = os.getenv("OLIEP_SITE_NAME", "oliep")
SITE_URL = os.getenv("OLIEP_SITE_URL", "https://oliver-epper.de").rstrip('/')
SITE_DESCRIPTION = "Golf Professional & Professional Software Developer"
SITE_LANGUAGE = "en"
AUTHOR_NAME = "Oliver Epper"

# Output
MINIFY_HTML = os.getenv("OLIEP_MINIFY", "1") not in ("0", "false", "no")
FEED_PATH = "feed.rss"
FEED_ITEM_LIMIT = 100
SITEMAP_PATH = "sitemap.xml"

# Style sheets the theme links to, relative to PACKAGE_ROOT; copied next to the generated pages by the caller.
RESOURCE_PATHS = [
    "Resources/css/styles.css",
    "Resources/css/pygments-xcode.css",
    "Resources/css/pygments-monokai.css",
]

STYLESHEETS = [
    {'href': '/css/styles.css', 'media': None},
    {'href': '/css/pygments-xcode.css', 'media': '(prefers-color-scheme: light)'},
    {'href': '/css/pygments-monokai.css', 'media': '(prefers-color-scheme: dark)'},
]

# Index page
AVATAR = {'src': '/images/oliep.jpg', 'alt': AUTHOR_NAME}

SOCIAL_LINKS = [
    {'href': 'https://github.com/oliverepper', 'icon': 'fab fa-github fa-2x', 'label': 'GitHub'},
    {'href': 'https://twitter.com/oliverepper', 'icon': 'fab fa-twitter fa-2x', 'label': 'Twitter'},
]

ICON_FONT_SCRIPT = "https://kit.fontawesome.com/fd7cbf6928.js"

# Navigation entry placed right after the posts section
NAV_EXTRA_LINK = {'href': 'https://github.com/oliverepper', 'title': 'Code'}

# Footer
FRAMEWORK_LINK = {'href': 'https://jinja.palletsprojects.com', 'title': 'Jinja'}
INSPIRATION_LINK = {'href': 'https://github.com/johnsundell/publish', 'title': 'Publish'}

# Reading time
READING_WORDS_PER_MINUTE = 200
