"""Single-file text exports of a generated site (download / clipboard)"""

from typing import List, Tuple

from bizbuilder.models.schemas import RenderedSite

DOWNLOAD_FILENAME = "website-files.txt"
SCRIPT_PLACEHOLDER = "// Add your custom JavaScript here"


def site_files(site: RenderedSite) -> List[Tuple[str, str]]:
    """The three sections, in export order"""
    return [
        ("index.html", site.html),
        ("styles.css", site.css),
        ("script.js", site.js or SCRIPT_PLACEHOLDER),
    ]


def build_download_text(site: RenderedSite) -> str:
    """Concatenate index.html, styles.css and script.js with comment markers"""
    return "".join(
        f"\n\n/* ===== {filename} ===== */\n\n{content}"
        for filename, content in site_files(site)
    )


def build_clipboard_text(site: RenderedSite) -> str:
    """Same three sections, each under a marker in its own comment syntax"""
    (_, html), (_, css), (_, js) = site_files(site)
    return (
        "\n<!-- index.html -->\n"
        f"{html}\n"
        "\n/* styles.css */\n"
        f"{css}\n"
        "\n// script.js\n"
        f"{js}\n"
    )
