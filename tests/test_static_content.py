"""Tests for the embedded landing page content and the process-wide bundle."""

import logging
import threading

import pytest

from sims import get_content_bundle
from sims.config import ContentSettings
from sims.content.bundle import reset_content_bundle
from sims.content.data import SITE_CONTENT
from sims.content.providers import StaticContentProvider
from sims.core.logger import _ContentSourceFilter


@pytest.fixture(autouse=True)
def _fresh_bundle(monkeypatch):
    monkeypatch.delenv("SIMS_CONTENT_PATH", raising=False)
    monkeypatch.delenv("SIMS_LOG_LEVEL", raising=False)
    reset_content_bundle()
    yield
    reset_content_bundle()


def test_navigation_ids_are_unique():
    bundle = get_content_bundle()
    ids = [entry.id for entry in bundle.navigation]
    assert len(ids) == len(set(ids))


def test_section_counts_match_literal_content():
    bundle = get_content_bundle()

    assert len(bundle.services.items) == 3
    assert len(bundle.testimonials.items) == 2
    assert len(bundle.about.reasons) == 8
    assert len(bundle.social.icon_paths) == 6


def test_first_navigation_entry_and_submit_label():
    bundle = get_content_bundle()

    assert bundle.navigation[0].model_dump() == {"id": 1, "url": "/", "label": "Home"}
    assert bundle.data_entry.submit == "Daten absenden"


def test_every_field_is_populated():
    data = get_content_bundle().model_dump()

    def walk(value, path):
        assert value is not None, path
        if isinstance(value, dict):
            for k, v in value.items():
                walk(v, f"{path}.{k}")
        elif isinstance(value, (list, tuple)):
            assert value, path
            for i, v in enumerate(value):
                walk(v, f"{path}[{i}]")

    walk(data, "bundle")
    assert set(data) == {
        "header",
        "navigation",
        "banner",
        "services",
        "about",
        "testimonials",
        "social",
        "data_entry",
    }


def test_reading_twice_returns_the_same_value():
    first = get_content_bundle()
    second = get_content_bundle()

    assert first is second
    assert first.model_dump() == second.model_dump()


def test_rebuilt_bundle_is_structurally_equal():
    first = get_content_bundle()
    reset_content_bundle()
    second = get_content_bundle()

    assert first is not second
    assert first == second


def test_display_order_is_preserved():
    bundle = get_content_bundle()

    assert [e.label for e in bundle.navigation] == ["Home", "Daten eintragen"]
    assert [s.image_path for s in bundle.services.items] == [
        "images/service1.png",
        "images/service2.png",
        "images/service3.png",
    ]
    assert bundle.social.icon_paths[0] == "images/facebook-icon.png"
    assert bundle.social.icon_paths[-1] == "images/snapchat-icon.png"


def test_german_labels_survive_untouched():
    bundle = get_content_bundle()

    assert bundle.header == "SimS - Sicherheit im Supermarkt"
    assert bundle.banner.heading == "Bestands-Tracker"
    assert bundle.banner.description.startswith("Prüfe mit nur einem Klick")
    assert bundle.data_entry.crowdedness == "Wie voll war der Laden?"


def test_asset_paths_lists_every_image_in_display_order():
    paths = get_content_bundle().asset_paths()

    assert len(paths) == 3 + 1 + 2 + 6
    assert paths[3] == "images/network.png"
    assert paths[4:6] == ["images/user1.jpg", "images/user2.jpg"]


def test_static_provider_does_not_mutate_literal_content():
    before = repr(SITE_CONTENT)
    StaticContentProvider().load()
    assert repr(SITE_CONTENT) == before


def test_settings_passed_after_build_are_ignored(tmp_path):
    bundle = get_content_bundle()
    other = get_content_bundle(ContentSettings(content_path=tmp_path / "missing.json"))

    assert other is bundle


def test_concurrent_first_reads_share_one_bundle():
    results = []

    def read():
        results.append(get_content_bundle())

    threads = [threading.Thread(target=read) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 8
    assert all(b is results[0] for b in results)


def test_default_read_writes_nothing_and_leaves_logging_alone(capsys):
    root = logging.getLogger()
    handlers = list(root.handlers)
    root_level = root.level
    sims_level = logging.getLogger("sims").level

    get_content_bundle()

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
    assert root.handlers == handlers
    assert root.level == root_level
    assert logging.getLogger("sims").level == sims_level


def test_ready_message_carries_content_source():
    records = []

    class _Collect(logging.Handler):
        def emit(self, record):
            records.append(record)

    handler = _Collect(level=logging.DEBUG)
    handler.addFilter(_ContentSourceFilter())
    bundle_logger = logging.getLogger("sims.content.bundle")
    previous = bundle_logger.level
    bundle_logger.addHandler(handler)
    bundle_logger.setLevel(logging.DEBUG)
    try:
        get_content_bundle()
    finally:
        bundle_logger.removeHandler(handler)
        bundle_logger.setLevel(previous)

    ready = [r for r in records if r.getMessage() == "Content bundle ready"]
    assert len(ready) == 1
    assert ready[0].content_source == "static"
