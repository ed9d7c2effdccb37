"""
Per-component preview rendering.

Every element is shown the same way (title, selector, preview, styles grid);
only the preview markup differs by component kind. PREVIEW_BUILDERS maps each
renderable ComponentKind to the function that builds it. UNRECOGNIZED has no
builder, so unknown categories show no previews.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional

from markupsafe import Markup

from sniffer_core.models import CategoryResult, RepresentativeElement
from sniffer_core.styles import visible_styles
from sniffer_core.taxonomy import ComponentKind

PreviewBuilder = Callable[[RepresentativeElement, str], Markup]


def style_attribute(styles: Mapping[str, str]) -> str:
    """Inline CSS declaration list from the meaningful styles."""
    return "; ".join(f"{prop}: {value}" for prop, value in visible_styles(styles).items())


def _button(element: RepresentativeElement, style: str) -> Markup:
    label = "Button" if "button" in element.selector else "Click Me"
    return Markup('<button class="button-demo component-object" style="{}">{}</button>').format(style, label)


def _input(element: RepresentativeElement, style: str) -> Markup:
    return Markup(
        '<input class="component-object" type="text" placeholder="Type something..." style="{}">'
    ).format(style)


def _card(element: RepresentativeElement, style: str) -> Markup:
    return Markup(
        '<div class="card-preview component-object" style="{}">'
        '<div class="card-content"><h4>Card Title</h4><p>This is a card</p></div>'
        '</div>'
    ).format(style)


def _modal(element: RepresentativeElement, style: str) -> Markup:
    return Markup(
        '<div class="modal-preview component-object" style="{}">'
        '<div class="modal-content"><h4>Modal Title</h4><p>This is a modal dialog</p></div>'
        '</div>'
    ).format(style)


def _navigation(element: RepresentativeElement, style: str) -> Markup:
    return Markup('<nav class="component-object" style="{}">Nav</nav>').format(style)


def _link(element: RepresentativeElement, style: str) -> Markup:
    return Markup('<a class="component-object" style="{}">Link</a>').format(style)


def _text(element: RepresentativeElement, style: str) -> Markup:
    return Markup('<p class="component-object" style="{}">Text</p>').format(style)


def _checkbox(element: RepresentativeElement, style: str) -> Markup:
    return Markup('<input class="component-object" type="checkbox" style="{}">').format(style)


def _radio(element: RepresentativeElement, style: str) -> Markup:
    return Markup('<input class="component-object" type="radio" style="{}">').format(style)


def _slider(element: RepresentativeElement, style: str) -> Markup:
    return Markup('<input class="component-object" type="range" style="{}">').format(style)


def _progress(element: RepresentativeElement, style: str) -> Markup:
    return Markup('<progress class="component-object" value="60" max="100" style="{}"></progress>').format(style)


def _tooltip(element: RepresentativeElement, style: str) -> Markup:
    return Markup(
        '<div class="tooltip-preview component-object" style="{}">'
        '<div class="tooltip-content">Tooltip Content</div>'
        '</div>'
    ).format(style)


PREVIEW_BUILDERS: Dict[ComponentKind, PreviewBuilder] = {
    ComponentKind.BUTTON: _button,
    ComponentKind.INPUT: _input,
    ComponentKind.CARD: _card,
    ComponentKind.MODAL: _modal,
    ComponentKind.NAVIGATION: _navigation,
    ComponentKind.LINK: _link,
    ComponentKind.TEXT: _text,
    ComponentKind.CHECKBOX: _checkbox,
    ComponentKind.RADIO: _radio,
    # Switches are previewed as checkboxes
    ComponentKind.SWITCH: _checkbox,
    ComponentKind.SLIDER: _slider,
    ComponentKind.PROGRESS: _progress,
    ComponentKind.TOOLTIP: _tooltip,
}


@dataclass
class ElementDemo:
    title: str
    selector: str
    preview: Markup
    styles: Dict[str, str]


def render_element_demo(
    kind: ComponentKind,
    element: RepresentativeElement,
    index: int,
) -> Optional[ElementDemo]:
    """Demo block for one element, or None when the kind has no preview."""
    builder = PREVIEW_BUILDERS.get(kind)
    if builder is None:
        return None
    return ElementDemo(
        title=f"{kind.value} Variant {index + 1}",
        selector=element.selector,
        preview=builder(element, style_attribute(element.styles)),
        styles=visible_styles(element.styles),
    )


def render_category(category: CategoryResult) -> List[ElementDemo]:
    kind = category.kind
    demos = []
    for index, element in enumerate(category.elements):
        demo = render_element_demo(kind, element, index)
        if demo is not None:
            demos.append(demo)
    return demos
