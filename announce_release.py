from typing import Any, TypeAlias

import httpx
import rich
from rich import print
from rich.markup import escape

from assets import AssetLinks, classify
from common import CLIENT, require_env
from release import Release, load_release

COLOR = 0xFF8000
TITLE = "New PCSX2 Nightly Build Available!"
INSTALLATION_STEPS = "https://github.com/PCSX2/pcsx2/wiki/Nightly-Build-Usage-Guide"

Embed: TypeAlias = dict[str, Any]


def _field(name: str, value: str, inline: bool = False) -> dict[str, Any]:
    return {"name": name, "value": value, "inline": inline}


def build_embed(release: Release, windows_links: AssetLinks, linux_links: AssetLinks) -> Embed:
    fields = [
        _field("Version", release["tag_name"], inline=True),
        _field("Release Link", f"[Github Release]({release['html_url']})", inline=True),
        _field("Installation Steps", f"[See Here]({INSTALLATION_STEPS})", inline=True),
        _field("Included Changes", release["body"]),
    ]
    if windows_links:
        fields.append(_field("Windows Downloads", windows_links))
    if linux_links:
        fields.append(_field("Linux Downloads", linux_links))
    return {"color": COLOR, "title": TITLE, "fields": fields}


def send(webhook_url: str, embed: Embed, *, client: httpx.Client = CLIENT) -> None:
    response = client.post(webhook_url, json={"embeds": [embed]})
    if not response.is_success:
        raise RuntimeError(f"Webhook returned {response.status_code}: {response.text}")


def announce(release: Release, webhook_url: str, *, client: httpx.Client = CLIENT) -> Embed:
    windows_links, linux_links = classify(release["assets"])
    embed = build_embed(release, windows_links, linux_links)
    send(webhook_url, embed, client=client)
    return embed


def main():
    rich.reconfigure(force_terminal=True, width=4096)
    try:
        webhook_url = require_env("DISCORD_BUILD_WEBHOOK")
        release = load_release(require_env("GITHUB_EVENT_PATH"))
        print(f"Announcing {escape(release['tag_name'])} ({len(release['assets'])} assets)...")
        announce(release, webhook_url, client=CLIENT)
        print("[green]✓ Announced release[/]")
    finally:
        CLIENT.close()


if __name__ == "__main__":
    main()
