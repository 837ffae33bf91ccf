"""
Answer panel state.

The panel is hidden until a TOC item is clicked; each click replaces the
state with a new value positioned at the pointer.
"""
from interview_qa.core.render import render_markdown
from interview_qa.models.schemas import TooltipState


def hidden_tooltip() -> TooltipState:
    return TooltipState()


def show_tooltip(content: str, x: int, y: int) -> TooltipState:
    return TooltipState(
        visible=True,
        content=content,
        html=render_markdown(content),
        x=x,
        y=y,
    )
