import datetime
import unittest

from oliep.formatting import cdata_safe, long_date, normalize_tag, reading_minutes, rfc822_date
from oliep.config import SITE_NAME
from oliep.models import (
    Index, Item, Page, PublishingContext, Section, SectionID, Site, Tag, default_site, sorted_by_date,
)
from oliep.reading_time import estimate_reading_time, with_reading_time, word_count
from tests.helpers import make_context, make_item, make_site, sample_context


class TestFormatting(unittest.TestCase):
    def test_long_date(self):
        self.assertEqual(long_date(datetime.date(2021, 4, 3)), "April 3, 2021")
        self.assertEqual(long_date(datetime.date(2020, 12, 25)), "December 25, 2020")

    def test_reading_minutes_floors(self):
        self.assertEqual(reading_minutes(4.7), 4)
        self.assertEqual(reading_minutes(0.2), 0)
        self.assertEqual(reading_minutes(3.0), 3)

    def test_normalize_tag(self):
        self.assertEqual(normalize_tag("Swift UI"), "swift-ui")
        self.assertEqual(normalize_tag("C++ & Golf!"), "c-golf")

    def test_cdata_safe_splits_terminator(self):
        self.assertEqual(cdata_safe("x]]>y"), "x]]]]><![CDATA[>y")
        self.assertEqual(cdata_safe("<p>plain</p>"), "<p>plain</p>")

    def test_rfc822_date(self):
        self.assertEqual(rfc822_date(datetime.date(2021, 4, 3)), "Sat, 03 Apr 2021 00:00:00 +0000")


class TestModels(unittest.TestCase):
    def test_item_path(self):
        item = make_item("hello-world", datetime.date(2021, 1, 1), section_id=SectionID.APPS)
        self.assertEqual(item.path, "/apps/hello-world")

    def test_item_validation(self):
        with self.assertRaises(ValueError) as cm:
            Item(title=" ", date=datetime.date(2021, 1, 1), body="", section_id=SectionID.POSTS, slug="x")
        self.assertIn("Title cannot be empty", str(cm.exception))

    def test_item_rejects_unknown_section(self):
        with self.assertRaises(ValueError):
            Item(title="T", date=datetime.date(2021, 1, 1), body="", section_id="posts", slug="x")

    def test_item_rejects_missing_date(self):
        with self.assertRaises(ValueError):
            Item(title="T", date=None, body="", section_id=SectionID.POSTS, slug="x")

    def test_section_rejects_foreign_items(self):
        item = make_item("x", datetime.date(2021, 1, 1), section_id=SectionID.APPS)
        with self.assertRaises(ValueError):
            Section(id=SectionID.POSTS, title="Posts", items=(item,))

    def test_tag_ordering_is_lexicographic(self):
        tags = sorted([Tag("swift"), Tag("golf"), Tag("apps")])
        self.assertEqual([t.string for t in tags], ["apps", "golf", "swift"])
        self.assertEqual(Tag("Swift UI").path, "/tags/swift-ui")

    def test_tags_differing_in_case_are_one_tag(self):
        self.assertEqual(Tag("Swift"), Tag("swift"))
        self.assertEqual(hash(Tag("Swift")), hash(Tag("swift")))
        self.assertEqual(len({Tag("Swift"), Tag("swift")}), 1)
        self.assertEqual(str(Tag("Swift")), "Swift")

    def test_item_drops_repeated_tags(self):
        item = make_item("a", datetime.date(2021, 1, 1), tags=["a", "b", "A", "a"])
        self.assertEqual([t.string for t in item.tags], ["a", "b"])

    def test_empty_tag_rejected(self):
        with self.assertRaises(ValueError):
            Tag("  ")

    def test_site_validation(self):
        with self.assertRaises(ValueError):
            Site(name="oliep", url="oliver-epper.de", description="", language="en")
        with self.assertRaises(ValueError):
            Site(name="oliep", url="https://x.org", description="", language="en",
                 section_ids=(SectionID.POSTS, SectionID.POSTS))

    def test_context_requires_declared_sections(self):
        with self.assertRaises(ValueError):
            PublishingContext(site=make_site(), sections={})

    def test_context_tag_queries(self):
        context = sample_context()
        self.assertEqual(context.all_tags(), frozenset({Tag("golf"), Tag("swift"), Tag("tooling")}))
        self.assertEqual(context.tag_count(Tag("swift")), 3)
        self.assertEqual([i.slug for i in context.items_tagged(Tag("golf"))], ["first-swing"])

    def test_sorted_by_date_is_stable_on_ties(self):
        same_day = datetime.date(2021, 5, 5)
        items = [make_item("a", same_day), make_item("b", datetime.date(2021, 6, 1)), make_item("c", same_day)]
        self.assertEqual([i.slug for i in sorted_by_date(items)], ["b", "a", "c"])

    def test_map_items_leaves_original_untouched(self):
        context = make_context([make_item("a", datetime.date(2021, 1, 1))])
        updated = context.map_items(lambda item: item.with_reading_time(2.5))
        self.assertEqual(updated.section(SectionID.POSTS).items[0].reading_time, 2.5)
        self.assertEqual(context.section(SectionID.POSTS).items[0].reading_time, 0.0)

    def test_default_site_uses_config(self):
        site = default_site()
        self.assertEqual(site.name, SITE_NAME)
        self.assertEqual(site.section_ids, (SectionID.POSTS, SectionID.APPS, SectionID.ABOUT))

    def test_page_path(self):
        self.assertEqual(Page(title="Imprint", body="", slug="imprint").path, "/imprint")
        self.assertEqual(Index().body, "")


class TestReadingTime(unittest.TestCase):
    def test_word_count_ignores_markup(self):
        self.assertEqual(word_count("<p>Hello <strong>big</strong> world</p>"), 3)

    def test_estimate(self):
        html = "<p>" + "word " * 300 + "</p>"
        self.assertAlmostEqual(estimate_reading_time(html), 1.5)
        self.assertAlmostEqual(estimate_reading_time(html, words_per_minute=100), 3.0)

    def test_rejects_non_positive_speed(self):
        with self.assertRaises(ValueError):
            estimate_reading_time("<p>hi</p>", words_per_minute=0)

    def test_with_reading_time(self):
        item = make_item("a", datetime.date(2021, 1, 1), body="<p>" + "word " * 940 + "</p>")
        self.assertAlmostEqual(with_reading_time(item).reading_time, 4.7)
        self.assertEqual(item.reading_time, 0.0)


if __name__ == '__main__':
    unittest.main()
