import json
import unittest

from swingpoint_site.structured_data import (
    StructuredDataKind,
    project_structured_data,
    to_json_ld,
)

from factories import BASE_URL, business_record

ALL_KINDS = list(StructuredDataKind)


class FaqPageTests(unittest.TestCase):
    def test_one_question_per_faq_in_order(self):
        faqs = [
            {"question": "Q1", "answer": "A1"},
            {"question": "Q2 <b>&</b>", "answer": "A long answer, café, with “quotes” and\nnewlines."},
            {"question": "Q3", "answer": "A3"},
        ]
        doc = project_structured_data(business_record(faqs=faqs), "FAQPage")
        self.assertEqual("FAQPage", doc["@type"])
        self.assertEqual(3, len(doc["mainEntity"]))
        for entity, faq in zip(doc["mainEntity"], faqs):
            self.assertEqual("Question", entity["@type"])
            self.assertEqual(faq["question"], entity["name"])
            self.assertEqual(faq["answer"], entity["acceptedAnswer"]["text"])

    def test_scenario_first_question(self):
        doc = project_structured_data(business_record(), StructuredDataKind.FAQ_PAGE)
        self.assertEqual("Q1", doc["mainEntity"][0]["name"])
        self.assertEqual("A1", doc["mainEntity"][0]["acceptedAnswer"]["text"])


class OmissionTests(unittest.TestCase):
    def test_email_absent_from_organization_and_local_business(self):
        record = business_record(email=None)
        org = project_structured_data(record, StructuredDataKind.ORGANIZATION)
        self.assertNotIn("email", org)
        self.assertNotIn("email", org["contactPoint"])

        local = project_structured_data(record, StructuredDataKind.LOCAL_BUSINESS)
        self.assertNotIn("email", local)

    def test_email_present_when_on_record(self):
        org = project_structured_data(business_record(), StructuredDataKind.ORGANIZATION)
        self.assertEqual("jeff@swingpointmedia.com", org["email"])
        self.assertEqual("jeff@swingpointmedia.com", org["contactPoint"]["email"])

    def test_optional_fields_omitted_not_blank(self):
        record = business_record(
            email="",
            mapLink=None,
            openingHours=None,
            areaServed=None,
            geo=None,
            social={},
        )
        for kind in (StructuredDataKind.PROFESSIONAL_SERVICE, StructuredDataKind.LOCAL_BUSINESS):
            doc = project_structured_data(record, kind)
            for key in ("email", "hasMap", "openingHours", "areaServed", "geo", "serviceArea", "sameAs"):
                self.assertNotIn(key, doc, f"{kind.value} should omit {key}")

    def test_no_none_values_anywhere(self):
        record = business_record(email=None, geo=None, founder=None)
        for kind in ALL_KINDS:
            text = json.dumps(project_structured_data(record, kind))
            self.assertNotIn("null", text, kind.value)

    def test_partial_social_links(self):
        record = business_record(social={"linkedin": "https://linkedin.com/company/spm", "twitter": ""})
        doc = project_structured_data(record, StructuredDataKind.PROFESSIONAL_SERVICE)
        self.assertEqual(["https://linkedin.com/company/spm"], doc["sameAs"])

    def test_incomplete_geo_is_omitted(self):
        for geo in ({"latitude": None, "longitude": ""}, {"latitude": "33.6634"}, {"longitude": " "}):
            record = business_record(geo=geo)
            for kind in (StructuredDataKind.PROFESSIONAL_SERVICE, StructuredDataKind.LOCAL_BUSINESS):
                with self.subTest(geo=geo, kind=kind.value):
                    doc = project_structured_data(record, kind)
                    self.assertNotIn("geo", doc)
                    self.assertNotIn("serviceArea", doc)
                    self.assertNotIn("None", json.dumps(doc))

    def test_service_area_needs_radius(self):
        doc = project_structured_data(business_record(serviceRadiusMeters=None), "LocalBusiness")
        self.assertIn("geo", doc)
        self.assertNotIn("serviceArea", doc)


class BusinessProjectionTests(unittest.TestCase):
    def test_professional_service_fields(self):
        doc = project_structured_data(business_record(), "ProfessionalService")
        self.assertEqual("https://schema.org", doc["@context"])
        self.assertEqual("ProfessionalService", doc["@type"])
        self.assertEqual("760-413-3508", doc["telephone"])
        self.assertEqual(
            {
                "@type": "PostalAddress",
                "streetAddress": "100 Main St",
                "addressLocality": "La Quinta",
                "addressRegion": "CA",
                "postalCode": "92253",
                "addressCountry": "US",
            },
            doc["address"],
        )
        self.assertEqual({"@type": "GeoCoordinates", "latitude": "33.6634", "longitude": "-116.3100"}, doc["geo"])
        self.assertEqual("50000", doc["serviceArea"]["geoRadius"])
        self.assertEqual("Mo-Fr 09:00-16:00", doc["openingHours"])

    def test_offer_catalog_follows_service_order(self):
        doc = project_structured_data(business_record(), "ProfessionalService")
        names = [offer["itemOffered"]["name"] for offer in doc["hasOfferCatalog"]["itemListElement"]]
        self.assertEqual(["AI Voice Agents", "Content Marketing"], names)

    def test_offer_catalog_omitted_without_services(self):
        doc = project_structured_data(business_record(services=[]), "LocalBusiness")
        self.assertNotIn("hasOfferCatalog", doc)

    def test_organization_founder(self):
        doc = project_structured_data(business_record(), "Organization")
        self.assertEqual({"@type": "Person", "name": "Jeff", "jobTitle": "The AI Architect"}, doc["founder"])
        self.assertEqual("customer service", doc["contactPoint"]["contactType"])


class SiteProjectionTests(unittest.TestCase):
    def test_website_uses_base_url(self):
        doc = project_structured_data(
            business_record(), "WebSite", base_url=BASE_URL + "/", site_name="SPM Site"
        )
        self.assertEqual(BASE_URL, doc["url"])
        self.assertEqual("SPM Site", doc["name"])
        self.assertEqual("SwingPointMedia", doc["publisher"]["name"])

    def test_default_breadcrumbs(self):
        doc = project_structured_data(business_record(), "BreadcrumbList", base_url=BASE_URL)
        items = doc["itemListElement"]
        self.assertEqual([1, 2], [item["position"] for item in items])
        self.assertEqual(["Home", "SwingPointMedia"], [item["name"] for item in items])
        self.assertEqual(f"{BASE_URL}/business/swingpointmedia", items[1]["item"])

    def test_custom_breadcrumbs(self):
        doc = project_structured_data(
            business_record(),
            StructuredDataKind.BREADCRUMB_LIST,
            base_url=BASE_URL,
            breadcrumbs=[("Home", "/"), ("Blog", "/blog")],
        )
        self.assertEqual(f"{BASE_URL}/blog", doc["itemListElement"][-1]["item"])


class DeterminismTests(unittest.TestCase):
    def test_repeat_projection_is_byte_identical(self):
        record = business_record()
        for kind in ALL_KINDS:
            first = to_json_ld(project_structured_data(record, kind, base_url=BASE_URL))
            second = to_json_ld(project_structured_data(record, kind, base_url=BASE_URL))
            self.assertEqual(first, second, kind.value)

    def test_unknown_kind_raises(self):
        with self.assertRaises(ValueError):
            project_structured_data(business_record(), "Restaurant")


class JsonLdSerializationTests(unittest.TestCase):
    def test_script_close_is_escaped(self):
        record = business_record(faqs=[{"question": "</script><script>alert(1)</script>", "answer": "A"}])
        text = to_json_ld(project_structured_data(record, "FAQPage"))
        self.assertNotIn("</script>", text)
        self.assertEqual(
            "</script><script>alert(1)</script>",
            json.loads(text)["mainEntity"][0]["name"],
        )


if __name__ == "__main__":
    unittest.main()
