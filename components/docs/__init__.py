"""Docs Components Package.

- MarkdownViewer: renders docs markdown with embedded component tags
- TableOfContents: heading outline for the current page
- doc_components: name to component mapping available to documents
"""

from components.docs.markdown_viewer import render as render_markdown
from components.docs.table_of_contents import render as render_toc
from components.docs.component_map import doc_components

__all__ = [
    'render_markdown',
    'render_toc',
    'doc_components',
]
