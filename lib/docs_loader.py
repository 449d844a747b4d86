"""Docs Loader - Read markdown documentation pages from disk.

Each `<slug>.md` file in the docs directory is one page. The page title is
the first level-one heading, or the slug when the page has none.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)

TITLE_PATTERN = re.compile(r'^#\s+(.+?)\s*$', re.MULTILINE)


@dataclass
class DocPage:
    """A single documentation page."""
    slug: str
    title: str
    path: Path

    @property
    def href(self) -> str:
        return f"/{self.slug}"


def slug_from_href(href: str) -> str:
    """Convert a site link such as '/multi-page' into a page slug."""
    slug = href.strip().strip('/')
    return slug or 'index'


class DocsLoader:
    """Loader for markdown pages in a docs directory."""

    def __init__(self, docs_dir: Path, nav: Sequence[str] = ()):
        """Initialize the docs loader.

        Args:
            docs_dir: Directory holding the .md pages
            nav: Slugs in preferred navigation order
        """
        self.docs_dir = Path(docs_dir)
        self.nav = list(nav)

    def _read_title(self, path: Path) -> Optional[str]:
        with open(path, 'r', encoding='utf-8') as f:
            match = TITLE_PATTERN.search(f.read())
        return match.group(1) if match else None

    def list_pages(self) -> List[DocPage]:
        """List pages in navigation order.

        Slugs listed in `nav` come first, in that order. Remaining pages
        follow alphabetically. Nav entries without a file are skipped.

        Returns:
            List of DocPage, empty if the docs directory does not exist
        """
        if not self.docs_dir.is_dir():
            logger.warning(f"Docs directory not found: {self.docs_dir}")
            return []

        pages = {}
        for path in sorted(self.docs_dir.glob('*.md')):
            slug = path.stem
            pages[slug] = DocPage(slug=slug, title=self._read_title(path) or slug, path=path)

        for slug in self.nav:
            if slug not in pages:
                logger.warning(f"Navigation lists missing page: {slug}")

        ordered = [pages[slug] for slug in self.nav if slug in pages]
        ordered.extend(page for slug, page in pages.items() if slug not in self.nav)
        return ordered

    def get_page(self, slug: str) -> DocPage:
        """Look up a page by slug.

        Raises:
            FileNotFoundError: If no page has this slug
        """
        for page in self.list_pages():
            if page.slug == slug:
                return page
        raise FileNotFoundError(f"No docs page named '{slug}' in {self.docs_dir}")

    def get_content(self, slug: str) -> str:
        """Read the raw markdown of a page.

        Raises:
            FileNotFoundError: If no page has this slug
        """
        page = self.get_page(slug)
        with open(page.path, 'r', encoding='utf-8') as f:
            return f.read()
