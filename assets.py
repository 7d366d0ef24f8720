import re
from collections.abc import Sequence
from typing import NamedTuple, TypeAlias

from rich import print
from rich.markup import escape

from release import Asset

AssetLinks: TypeAlias = str


class Platform(NamedTuple):
    name: str
    prefix: str
    suffix: str

    @property
    def pattern(self) -> re.Pattern[str]:
        prefix, suffix = re.escape(self.prefix), re.escape(self.suffix)
        return re.compile(rf"{prefix}(.*?)(?:{prefix}|{suffix}|\Z)", re.DOTALL)


WINDOWS = Platform("windows", "windows-", ".7z")
LINUX = Platform("linux", "linux-", ".AppImage")

# checked in order, first match wins
PLATFORMS = (WINDOWS, LINUX)


def friendly_name(name: str, platform: Platform) -> str:
    """`pcsx2-windows-x64-Qt.7z` -> `x64 Qt`, or the file name itself if it
    doesn't follow the `<platform>-<label><suffix>` convention."""
    if not (match := platform.pattern.search(name)):
        print(f"[bold red]! No {platform.prefix!r} in '{escape(name)}', using it as is[/]")
        return name
    return match[1].replace("-", " ", 1)


def classify(assets: Sequence[Asset]) -> tuple[AssetLinks, AssetLinks]:
    links = {platform.name: "" for platform in PLATFORMS}
    for asset in assets:
        name = asset["name"]
        if "symbols" in name:
            continue
        for platform in PLATFORMS:
            if platform.name in name:
                label = friendly_name(name, platform)
                links[platform.name] += f"- [{label}]({asset['browser_download_url']})\n"
                break
    return links[WINDOWS.name], links[LINUX.name]
