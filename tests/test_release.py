import json

import pytest

from release import load_release


def test_load_release_from_event(tmp_path):
    release = {
        "tag_name": "v1.7.3000",
        "html_url": "https://github.com/PCSX2/pcsx2/releases/tag/v1.7.3000",
        "body": "- Fix things",
        "assets": [{"name": "pcsx2-linux-x64.AppImage", "browser_download_url": "u"}],
    }
    (event_path := tmp_path / "event.json").write_text(
        json.dumps({"action": "published", "release": release}), encoding="utf-8"
    )
    assert load_release(str(event_path)) == release


def test_load_release_rejects_other_events(tmp_path):
    (event_path := tmp_path / "event.json").write_text('{"action": "opened"}', encoding="utf-8")
    with pytest.raises(AssertionError):
        load_release(str(event_path))
