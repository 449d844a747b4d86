"""Tests for docs loading, content rendering and the component registry.

Run with: pytest test_docs.py
"""

from unittest.mock import MagicMock, call, patch

import pytest

from components import benchmarks, guides
from components.docs import component_map, markdown_viewer, table_of_contents
from lib.component_registry import lookup_component, merge_components
from lib.docs_loader import DocsLoader, slug_from_href
from lib.session_state import navigate_to
from pages import docs as docs_page


@pytest.fixture
def docs_dir(tmp_path):
    (tmp_path / "index.md").write_text("# Welcome\n\nHello\n", encoding="utf-8")
    (tmp_path / "docker.md").write_text("Intro\n\n# Docker Deployment\n\n<ThroughputChart />\n", encoding="utf-8")
    (tmp_path / "zeta.md").write_text("No heading here\n", encoding="utf-8")
    (tmp_path / "alpha.md").write_text("# Alpha\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("# Not a page\n", encoding="utf-8")
    return tmp_path


class TestDocsLoader:
    """Page discovery and ordering."""

    def test_nav_order_then_alphabetical(self, docs_dir):
        loader = DocsLoader(docs_dir, nav=["index", "docker", "missing"])
        slugs = [page.slug for page in loader.list_pages()]
        assert slugs == ["index", "docker", "alpha", "zeta"]

    def test_titles_from_first_heading(self, docs_dir):
        loader = DocsLoader(docs_dir)
        titles = {page.slug: page.title for page in loader.list_pages()}
        assert titles["index"] == "Welcome"
        assert titles["docker"] == "Docker Deployment"
        assert titles["zeta"] == "zeta"

    def test_get_content(self, docs_dir):
        loader = DocsLoader(docs_dir)
        assert "<ThroughputChart />" in loader.get_content("docker")

    def test_missing_page(self, docs_dir):
        with pytest.raises(FileNotFoundError):
            DocsLoader(docs_dir).get_content("nope")

    def test_missing_directory(self, tmp_path):
        loader = DocsLoader(tmp_path / "does-not-exist")
        assert loader.list_pages() == []

    def test_page_href(self, docs_dir):
        page = DocsLoader(docs_dir).get_page("docker")
        assert page.href == "/docker"
        assert slug_from_href(page.href) == "docker"

    def test_slug_from_href(self):
        assert slug_from_href("/multi-page") == "multi-page"
        assert slug_from_href("/") == "index"


class TestSplitSegments:
    """Markdown is split around self-closing component tags."""

    def test_text_and_components(self):
        content = "# Title\n\nIntro\n\n<ThroughputChart />\n\nMiddle\n<LatencyChart/>\n"
        segments = markdown_viewer.split_segments(content)
        assert [kind for kind, _ in segments] == ['markdown', 'component', 'markdown', 'component']
        assert segments[1] == ('component', 'ThroughputChart')
        assert segments[3] == ('component', 'LatencyChart')
        assert "Intro" in segments[0][1]

    def test_plain_markdown(self):
        assert markdown_viewer.split_segments("just text") == [('markdown', 'just text')]

    def test_inline_tag_is_not_a_component(self):
        segments = markdown_viewer.split_segments("See <Guides /> inline\n")
        assert segments == [('markdown', "See <Guides /> inline\n")]

    def test_tags_in_code_blocks_are_text(self):
        content = "```mdx\n<Guides />\n```\n\n<Guides />\n"
        segments = markdown_viewer.split_segments(content)
        assert segments[-1] == ('component', 'Guides')
        assert sum(1 for kind, _ in segments if kind == 'component') == 1

    def test_backticks_inside_tilde_block_do_not_close_it(self):
        content = "~~~md\n```\n<Guides />\n```\n~~~\n\n<Guides />\n"
        segments = markdown_viewer.split_segments(content)
        assert [kind for kind, _ in segments] == ['markdown', 'component']

    def test_unclosed_fence_runs_to_end(self):
        segments = markdown_viewer.split_segments("```\n<Guides />\n")
        assert segments == [('markdown', "```\n<Guides />\n")]

    def test_bundled_docs_reference_known_components(self):
        from lib.site_config import site_config

        registry = component_map.doc_components()
        loader = DocsLoader(site_config.docs_dir)
        for page in loader.list_pages():
            for kind, name in markdown_viewer.split_segments(loader.get_content(page.slug)):
                if kind == 'component':
                    assert name in registry


class TestMarkdownViewer:
    """Rendering segments in document order."""

    @patch('components.docs.markdown_viewer.st')
    def test_renders_components_in_place(self, mock_st):
        order = []
        mock_st.markdown.side_effect = lambda text: order.append(('md', text.strip()))
        chart = MagicMock(side_effect=lambda: order.append(('chart', None)))

        markdown_viewer.render("Before\n\n<Chart />\n\nAfter\n", {'Chart': chart})

        assert order == [('md', 'Before'), ('chart', None), ('md', 'After')]
        chart.assert_called_once_with()

    @patch('components.docs.markdown_viewer.st')
    def test_unknown_component_is_reported(self, mock_st):
        markdown_viewer.render("<Missing />\n", {})
        mock_st.error.assert_called_once()
        assert "Missing" in mock_st.error.call_args[0][0]


class TestTableOfContents:
    """Heading extraction for the page outline."""

    def test_extract_headings(self):
        content = "# Docker Deployment\n\n## Running with Docker Compose\n\n```\n# not a heading\n```\n### Step 1: Build!\n"
        assert table_of_contents.extract_headings(content) == [
            (1, "Docker Deployment", "docker-deployment"),
            (2, "Running with Docker Compose", "running-with-docker-compose"),
            (3, "Step 1: Build!", "step-1-build"),
        ]

    def test_fence_closes_only_on_matching_marker(self):
        content = "~~~\n```\n# Inside\n~~~\n# After\n"
        assert table_of_contents.extract_headings(content) == [(1, "After", "after")]

    @patch('components.docs.table_of_contents.st')
    def test_render_nested_list(self, mock_st):
        table_of_contents.render("# A\n## B\n")
        outline = mock_st.markdown.call_args_list[-1][0][0]
        assert outline == "- [A](#a)\n  - [B](#b)"

    @patch('components.docs.table_of_contents.st')
    def test_render_without_headings(self, mock_st):
        table_of_contents.render("plain text")
        mock_st.caption.assert_called_once()
        mock_st.markdown.assert_not_called()


class TestComponentRegistry:
    """Union of registries, last one wins."""

    def test_merge_union(self):
        a, b = MagicMock(), MagicMock()
        assert merge_components({'A': a}, {'B': b}) == {'A': a, 'B': b}

    def test_later_registry_wins(self):
        first, second = MagicMock(), MagicMock()
        merged = merge_components({'Chart': first}, None, {'Chart': second})
        assert merged['Chart'] is second

    def test_lookup_unknown(self):
        with pytest.raises(KeyError):
            lookup_component({}, 'Nope')

    def test_doc_components(self):
        registry = component_map.doc_components()
        assert set(registry) == {'Guides', 'ThroughputChart', 'LatencyChart', 'ChartRPS', 'ChartMS'}
        assert registry['Guides'] is guides.render

    def test_previous_chart_tag_names(self):
        registry = component_map.doc_components()
        segments = markdown_viewer.split_segments("<ChartRPS />\n\n<ChartMS />\n")
        names = [name for kind, name in segments if kind == 'component']
        assert [lookup_component(registry, name) for name in names] == [
            benchmarks.throughput_chart,
            benchmarks.latency_chart,
        ]

    def test_chart_components_override_page_components(self):
        custom, override = MagicMock(), MagicMock()
        registry = component_map.doc_components({'Custom': custom, 'ThroughputChart': override})
        assert registry['Custom'] is custom
        assert registry['ThroughputChart'] is not override


class TestGuides:
    """Guide cards navigate to their pages."""

    def test_guide_links_match_bundled_docs(self):
        from lib.site_config import site_config

        slugs = {page.slug for page in DocsLoader(site_config.docs_dir).list_pages()}
        for guide in guides.GUIDES:
            assert slug_from_href(guide['href']) in slugs

    @patch('components.guides.st')
    def test_read_more_buttons(self, mock_st):
        guides.render()
        assert mock_st.button.call_count == len(guides.GUIDES)
        first = mock_st.button.call_args_list[0]
        assert first.kwargs['on_click'] is navigate_to
        assert first.kwargs['args'] == ('quickstart',)


class TestDocsPage:
    """Page-level rendering."""

    @patch('pages.docs.get_state', return_value=False)
    @patch('pages.docs.render_toc')
    @patch('pages.docs.render_markdown')
    @patch('pages.docs.st')
    def test_renders_page(self, mock_st, mock_markdown, mock_toc, mock_get_state, docs_dir):
        docs_page.render("index", DocsLoader(docs_dir))
        content, registry = mock_markdown.call_args[0]
        assert content.startswith("# Welcome")
        assert 'ThroughputChart' in registry
        mock_toc.assert_not_called()

    @patch('pages.docs.get_state', return_value=True)
    @patch('pages.docs.render_toc')
    @patch('pages.docs.render_markdown')
    @patch('pages.docs.st')
    def test_renders_toc(self, mock_st, mock_markdown, mock_toc, mock_get_state, docs_dir):
        mock_st.columns.return_value = (MagicMock(), MagicMock())
        docs_page.render("index", DocsLoader(docs_dir))
        mock_toc.assert_called_once_with("# Welcome\n\nHello\n")

    @patch('pages.docs.render_markdown')
    @patch('pages.docs.st')
    def test_missing_page_shows_error(self, mock_st, mock_markdown, docs_dir):
        docs_page.render("nope", DocsLoader(docs_dir))
        assert mock_st.error.call_args == call("Page not found: nope")
        mock_markdown.assert_not_called()
