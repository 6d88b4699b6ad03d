import datetime

from bs4 import BeautifulSoup

from oliep.models import Index, Item, Page, PublishingContext, Section, SectionID, Site, Tag

TITLES = {
    SectionID.POSTS: "Posts",
    SectionID.APPS: "Apps",
    SectionID.ABOUT: "About",
}


def make_site(section_ids=tuple(SectionID)):
    return Site(
        name="oliep",
        url="https://example.org",
        description="Golf & Software",
        language="en",
        section_ids=tuple(section_ids),
    )


def make_item(slug, date, section_id=SectionID.POSTS, tags=(), reading_time=0.0, body="<p>Hello</p>"):
    return Item(
        title=slug.replace('-', ' ').title(),
        date=date,
        body=body,
        section_id=section_id,
        slug=slug,
        tags=tuple(Tag(t) for t in tags),
        reading_time=reading_time,
    )


def make_context(items=(), section_ids=tuple(SectionID), index_body="<p>Welcome</p>", pages=()):
    sections = {}
    for sid in section_ids:
        sections[sid] = Section(
            id=sid,
            title=TITLES[sid],
            body=f"<p>{TITLES[sid]} intro</p>",
            items=tuple(item for item in items if item.section_id is sid),
        )
    return PublishingContext(
        site=make_site(section_ids),
        sections=sections,
        index=Index(body=index_body),
        pages=tuple(pages),
    )


def sample_context():
    items = [
        make_item("first-swing", datetime.date(2021, 1, 1), tags=["golf"], body="<p>" + "word " * 400 + "</p>"),
        make_item("swift-tips", datetime.date(2021, 3, 1), tags=["swift"]),
        make_item("more-swift", datetime.date(2021, 2, 1), tags=["swift", "tooling"]),
        make_item("pitch-app", datetime.date(2020, 6, 5), section_id=SectionID.APPS, tags=["swift"]),
    ]
    pages = [Page(title="Imprint", body="<p>Legal</p>", slug="imprint")]
    return make_context(items, pages=pages)


def soup(html):
    return BeautifulSoup(html, "html.parser")
