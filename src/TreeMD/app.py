"""Streamlit preview UI for TreeMD."""

from __future__ import annotations

import streamlit as st
from streamlit.components.v1 import html as st_html

from TreeMD import token_store
from TreeMD.errors import TreeParseError
from TreeMD.fetcher import FetchError, fetch_document
from TreeMD.markdown_processor import (
    MarkdownProcessError,
    find_tree_blocks,
    replace_tree_blocks,
)
from TreeMD.models import ParseMode, ParseOptions, TreeNode
from TreeMD.parser import parse_tree_block
from TreeMD.renderers.html import escape_html, render_html
from TreeMD.renderers.mermaid import render_mermaid
from TreeMD.renderers.text import render_text
from TreeMD.renderers.theme import DEFAULT_TREE_THEME
from TreeMD.url_parser import URLParseError, parse_document_url

MERMAID_JS = "https://cdn.jsdelivr.net/npm/mermaid@10/dist/mermaid.min.js"

SAMPLE_TREE = """\
src/
├── app/
│   ├── page.tsx
│   └── layout.tsx
├── components/
└── LICENSE
"""


def _qp(key: str, default: str = "") -> str:
    """Read a query parameter, returning *default* if absent."""
    params = st.query_params
    return params.get(key, default)


def main() -> None:
    st.set_page_config(
        page_title="TreeMD",
        page_icon="🌳",
        layout="wide",
    )

    # Hide Streamlit's default toolbar (Deploy, Stop, etc.)
    st.markdown(
        "<style>[data-testid='stToolbar'] { display: none; }</style>",
        unsafe_allow_html=True,
    )

    # --- Header with settings popover ---
    header_left, header_right = st.columns([8, 1])
    with header_left:
        st.title("TreeMD")
    with header_right:
        st.markdown("<div style='height: 1.5rem'></div>", unsafe_allow_html=True)
        with st.popover("", use_container_width=True):
            options, github_token = _settings()

    st.caption("Preview ASCII directory trees as collapsible HTML, Mermaid or text.")

    source_kind = st.radio(
        "Input",
        ["Tree text", "Markdown document"],
        horizontal=True,
        index=1 if _qp("url") else 0,
    )

    if source_kind == "Tree text":
        raw = st.text_area("Tree", value=SAMPLE_TREE, height=240)
        _show_tree(raw, options)
    else:
        _markdown_input(options, github_token)


def _settings() -> tuple[ParseOptions, str]:
    st.subheader("Settings")

    default_mode = _qp("mode", ParseMode.TOLERANT.value)
    strict = st.toggle(
        "Strict mode",
        value=default_mode == ParseMode.STRICT.value,
        help="Reject malformed trees instead of repairing them.",
    )
    tab_width = st.number_input("Tab width", min_value=1, max_value=8, value=2)
    indent_width = st.number_input("Indent width", min_value=1, max_value=8, value=2)

    saved_token = token_store.load() or ""
    github_token = st.text_input(
        "GitHub Token (optional)",
        value=saved_token,
        type="password",
        help="Required to load Markdown from private repositories.",
    )
    if token_store.is_available():
        remember = st.checkbox(
            "Save token to OS keychain",
            value=bool(saved_token),
        )
        if remember and github_token:
            token_store.save(github_token)
        elif saved_token and (not remember or not github_token):
            token_store.delete()

    options = ParseOptions(
        mode=ParseMode.STRICT if strict else ParseMode.TOLERANT,
        tab_width=int(tab_width),
        indent_width=int(indent_width),
    )
    return options, github_token.strip()


def _show_tree(raw: str, options: ParseOptions) -> None:
    try:
        tree = parse_tree_block(raw, options)
    except TreeParseError as exc:
        st.error(str(exc))
        return

    if not tree:
        st.info("Nothing to render yet.")
        return

    html_tab, mermaid_tab, text_tab = st.tabs(["HTML", "Mermaid", "Text"])
    with html_tab:
        _show_html(tree)
    with mermaid_tab:
        _show_mermaid(tree)
    with text_tab:
        st.code(render_text(tree), language="text")


def _show_html(tree: list[TreeNode]) -> None:
    st.markdown(
        f"<style>{DEFAULT_TREE_THEME}</style>{render_html(tree)}",
        unsafe_allow_html=True,
    )
    with st.expander("HTML source"):
        st.code(render_html(tree), language="html")


def _show_mermaid(tree: list[TreeNode]) -> None:
    source = render_mermaid(tree)
    height = min(120 + 40 * source.count("\n"), 900)
    st_html(
        f"""
        <pre class="mermaid">{escape_html(source)}</pre>
        <script src="{MERMAID_JS}"></script>
        <script>mermaid.initialize({{ startOnLoad: true }});</script>
        """,
        height=height,
        scrolling=True,
    )
    with st.expander("Mermaid source"):
        st.code(source, language="text")


def _markdown_input(options: ParseOptions, github_token: str) -> None:
    url = st.text_input(
        "Document URL (optional)",
        value=_qp("url"),
        placeholder="https://github.com/owner/repo/blob/main/README.md",
    )
    if st.button("Load", disabled=not url):
        _load_url(url, github_token)

    markdown = st.text_area(
        "Markdown",
        value=st.session_state.get("markdown", ""),
        height=320,
    )
    if not markdown.strip():
        return

    text_mode = st.checkbox("Render blocks as plain text")
    try:
        blocks = find_tree_blocks(markdown)
        processed = replace_tree_blocks(markdown, text=text_mode, options=options)
    except (MarkdownProcessError, TreeParseError) as exc:
        st.error(str(exc))
        return

    st.info(f"Found {len(blocks)} tree block(s).")
    st.download_button(
        label="Download Markdown",
        data=processed,
        file_name=st.session_state.get("filename", "rendered.md"),
        mime="text/markdown",
        use_container_width=True,
    )
    with st.expander("Preview", expanded=True):
        st.markdown(processed, unsafe_allow_html=True)
    with st.expander("Processed source"):
        st.code(processed, language="markdown")


def _load_url(url: str, github_token: str) -> None:
    try:
        source = parse_document_url(url)
    except URLParseError as exc:
        st.error(f"Invalid URL: {exc}")
        return

    try:
        with st.spinner(f"Fetching {source.display_name}..."):
            markdown = fetch_document(source, token=github_token or None)
    except FetchError as exc:
        st.error(str(exc))
        return

    stem = source.display_name.rsplit(".", maxsplit=1)[0] or "document"
    st.session_state["markdown"] = markdown
    st.session_state["filename"] = f"{stem}_rendered.md"


if __name__ == "__main__":
    main()
