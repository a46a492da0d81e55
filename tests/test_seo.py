import unittest
from datetime import datetime, timezone

from swingpoint_site.seo import (
    STATIC_PAGES,
    build_sitemap,
    business_meta,
    home_meta,
    not_found_meta,
    render_robots_txt,
    render_sitemap_xml,
)

from factories import BASE_URL, business_data, business_record, catalog_of

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class SitemapTests(unittest.TestCase):
    def test_static_pages_plus_one_per_business(self):
        catalog = catalog_of(*(business_data(slug=f"biz-{i}") for i in range(3)))
        entries = build_sitemap(catalog, BASE_URL, now=NOW)
        self.assertEqual(len(STATIC_PAGES) + 3, len(entries))
        self.assertEqual(7, len(entries))
        urls = [entry.url for entry in entries]
        self.assertEqual(len(urls), len(set(urls)))

    def test_entry_values(self):
        entries = build_sitemap(catalog_of(business_data()), BASE_URL + "/", now=NOW)
        by_url = {entry.url: entry for entry in entries}
        self.assertEqual(1.0, by_url[BASE_URL].priority)
        self.assertEqual("weekly", by_url[f"{BASE_URL}/blog"].change_frequency)
        business = by_url[f"{BASE_URL}/business/swingpointmedia"]
        self.assertEqual(("monthly", 0.9), (business.change_frequency, business.priority))
        self.assertTrue(all(entry.last_modified == NOW for entry in entries))

    def test_business_entries_follow_catalog_order(self):
        catalog = catalog_of(business_data(slug="b"), business_data(slug="a"))
        urls = [entry.url for entry in build_sitemap(catalog, BASE_URL, now=NOW)][len(STATIC_PAGES):]
        self.assertEqual([f"{BASE_URL}/business/b", f"{BASE_URL}/business/a"], urls)

    def test_defaults_to_current_time(self):
        entries = build_sitemap(catalog_of(business_data()), BASE_URL)
        self.assertIsNotNone(entries[0].last_modified.tzinfo)

    def test_xml(self):
        xml = render_sitemap_xml(build_sitemap(catalog_of(business_data()), BASE_URL, now=NOW))
        self.assertTrue(xml.startswith('<?xml version="1.0" encoding="UTF-8"?>'))
        self.assertEqual(5, xml.count("<url>"))
        self.assertIn(f"<loc>{BASE_URL}/business/swingpointmedia</loc>", xml)
        self.assertIn("<lastmod>2024-05-01T12:00:00+00:00</lastmod>", xml)
        self.assertIn("<priority>0.8</priority>", xml)


class RobotsTests(unittest.TestCase):
    def test_per_crawler_rules(self):
        text = render_robots_txt(BASE_URL)
        self.assertIn("User-agent: Googlebot\nAllow: /", text)
        self.assertIn("User-agent: GPTBot\nDisallow: /", text)
        self.assertIn("User-agent: ClaudeBot\nDisallow: /", text)
        self.assertIn("User-agent: PerplexityBot\nAllow: /", text)
        self.assertIn("User-agent: *\nAllow: /", text)
        self.assertTrue(text.rstrip().endswith(f"Sitemap: {BASE_URL}/sitemap.xml"))


class PageMetaTests(unittest.TestCase):
    def test_business_title(self):
        meta = business_meta(business_record())
        self.assertEqual("SwingPointMedia - AI Automation | La Quinta, CA", meta.title)
        self.assertEqual("/business/swingpointmedia", meta.path)

    def test_not_found_title(self):
        self.assertEqual("Business Not Found", not_found_meta("x").title)

    def test_head_tags_escape_and_include_open_graph(self):
        meta = business_meta(business_record(name='Tom & "Jerry"'))
        tags = meta.head_tags(BASE_URL, "SwingPointMedia")
        self.assertIn("Tom &amp; &quot;Jerry&quot;", tags)
        self.assertIn(f'<meta property="og:url" content="{BASE_URL}/business/swingpointmedia">', tags)
        self.assertIn('<meta property="og:locale" content="en_US">', tags)

    def test_home_keywords(self):
        tags = home_meta("SwingPointMedia").head_tags(BASE_URL, "SwingPointMedia")
        self.assertIn('name="keywords"', tags)


if __name__ == "__main__":
    unittest.main()
