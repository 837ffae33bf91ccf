from markdown_it import MarkdownIt

# Raw HTML in answers is escaped, not passed through
_md = MarkdownIt("commonmark", {"html": False}).enable("table")


def render_markdown(text: str) -> str:
    """Render an answer's Markdown to an HTML fragment"""
    return _md.render(text)
