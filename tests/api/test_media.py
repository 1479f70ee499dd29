"""Content Negotiation — Accept header parsing and XML rendering.

Tests cover:
    - JSON default for missing, wildcard and unknown Accept values
    - XML chosen when it outranks JSON (order and q-values)
    - to_xml nests dicts and leaves None as empty elements
"""

import xml.etree.ElementTree as ET

import pytest

from app.api.media import preferred_media_type, render, to_xml
from app.core.domain_types import MediaType


@pytest.mark.parametrize("accept", [None, "", "*/*", "text/html", "application/json"])
def test_json_is_default(accept):
    assert preferred_media_type(accept) is MediaType.JSON


@pytest.mark.parametrize("accept", [
    "application/xml",
    "text/xml",
    "application/xml, application/json",
    "application/json;q=0.5, application/xml",
    "text/html, application/xml;q=0.9, */*;q=0.8",
])
def test_xml_when_preferred(accept):
    assert preferred_media_type(accept) is MediaType.XML


def test_json_wins_tie_when_listed_first():
    assert preferred_media_type("application/json, application/xml") is MediaType.JSON


def test_invalid_quality_counts_as_zero():
    accept = "application/xml;q=abc, application/json;q=0.1"
    assert preferred_media_type(accept) is MediaType.JSON


def test_to_xml_nests_dicts():
    doc = ET.fromstring(to_xml("customer", {
        "id": 1, "firstName": "Raja", "lastName": None,
        "address": {"town": "Belfast"},
    }))
    assert doc.tag == "customer"
    assert doc.findtext("id") == "1"
    assert doc.findtext("firstName") == "Raja"
    assert doc.find("lastName").text is None
    assert doc.findtext("address/town") == "Belfast"


def test_render_picks_representation():
    assert render({"id": 1}, "customer", None).media_type == "application/json"
    assert render({"id": 1}, "customer", "application/xml").media_type == "application/xml"
