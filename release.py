import json
from typing import TypedDict


class Asset(TypedDict):
    name: str
    browser_download_url: str


class Release(TypedDict):
    tag_name: str
    html_url: str
    body: str
    assets: list[Asset]


def load_release(event_path: str) -> Release:
    with open(event_path, encoding="utf-8") as f:
        event = json.load(f)
    assert (release := event.get("release")), "not a release event"
    return release
