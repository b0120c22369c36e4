"""Command-line front end: generate a site through a running backend and write its files"""

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from bizbuilder.client import DEFAULT_API_URL, WebsiteGeneratorClient
from bizbuilder.models.errors import ApplicationError
from bizbuilder.preview.export import DOWNLOAD_FILENAME
from bizbuilder.preview.renderer import EXAMPLE_PROMPTS
from bizbuilder.preview.session import PreviewSession

logger = logging.getLogger(__name__)


def write_site(session: PreviewSession, out_dir: Path) -> list:
    """Write index.html, styles.css, script.js, the download bundle and preview.html"""
    website = session.website
    out_dir.mkdir(parents=True, exist_ok=True)
    files = {
        "index.html": website.html,
        "styles.css": website.css,
        "script.js": website.js,
        DOWNLOAD_FILENAME: session.download_text(),
        "preview.html": session.render(),
    }
    written = []
    for name, content in files.items():
        path = out_dir / name
        path.write_text(content, encoding="utf-8")
        written.append(path)
    return written


async def run(args: argparse.Namespace) -> int:
    session = PreviewSession(WebsiteGeneratorClient(base_url=args.api_url))

    if args.example is not None:
        session.use_example(args.example - 1)
    else:
        session.set_prompt(args.prompt or "")

    try:
        await session.generate()
    except ApplicationError as e:
        print(f"ERROR: {e.message}", file=sys.stderr)
        if e.hint:
            print(f"Hint: {e.hint}", file=sys.stderr)
        if e.retryable:
            print("This error may be temporary; try again.", file=sys.stderr)
        return 1

    print(f"Generated '{session.website.business_name}' ({session.website.business_type})")
    for path in write_site(session, Path(args.out)):
        print(f"  wrote {path}")

    if args.copy:
        print(session.copy_text())
    return 0


def main(argv=None) -> int:
    load_dotenv()
    parser = argparse.ArgumentParser(description="Generate a business website with BizBuilder AI")
    parser.add_argument("prompt", nargs="?", help="Business description")
    parser.add_argument("--example", type=int, choices=range(1, len(EXAMPLE_PROMPTS) + 1),
                        help="Use one of the example prompts (see --list-examples)")
    parser.add_argument("--list-examples", action="store_true", help="Print the example prompts and exit")
    parser.add_argument("--out", default="generated-site", help="Output directory")
    parser.add_argument("--api-url", default=os.getenv("BIZBUILDER_API_URL", DEFAULT_API_URL),
                        help="Backend base URL")
    parser.add_argument("--copy", action="store_true", help="Also print the copy-to-clipboard text")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    if args.list_examples:
        for i, example in enumerate(EXAMPLE_PROMPTS, start=1):
            print(f"{i}. {example}")
        return 0

    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
