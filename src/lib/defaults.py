"""
Built-in Bootstrap 5.3 to Tailwind 3 mapping tables

The tables are written in the same document shape tables_load() reads from
YAML, so the defaults go through the same validation as user tables.

Scale entries marked exact=False only approximate Bootstrap's value. Those in
the spacing scales are reported under strict spacing; Bootstrap's spacers all
have exact Tailwind equivalents, so the built-in spacing scales pass strict
mode unchanged.
"""

from typing import Any, Dict, Iterable, List


def _approx(target: str) -> Dict[str, Any]:
    return {"target": target, "exact": False}


def _exact(match: str, *outputs: str, kind: str = "rename", responsive: bool = False,
           states: Iterable[str] = ()) -> Dict[str, Any]:
    return {
        "match": match,
        "kind": kind,
        "outputs": list(outputs),
        "exact": True,
        "responsive": responsive,
        "states": list(states),
    }


def _stem(match: str, kind: str, *outputs: str, **options: Any) -> Dict[str, Any]:
    rule = {"match": match, "kind": kind, "outputs": list(outputs)}
    rule.update(options)
    return rule


BOOTSTRAP_BREAKPOINTS = {"sm": 576, "md": 768, "lg": 992, "xl": 1200, "xxl": 1400}
TAILWIND_BREAKPOINTS = {"sm": 640, "md": 768, "lg": 1024, "xl": 1280, "2xl": 1536}

COLORS = {
    "primary": {"color": "blue", "shade": 600, "contrast": "white"},
    "secondary": {"color": "gray", "shade": 600, "contrast": "white"},
    "success": {"color": "green", "shade": 600, "contrast": "white"},
    "danger": {"color": "red", "shade": 600, "contrast": "white"},
    "warning": {"color": "yellow", "shade": 400, "contrast": "black"},
    "info": {"color": "cyan", "shade": 500, "contrast": "black"},
    "light": {"color": "gray", "shade": 100, "contrast": "black"},
    "dark": {"color": "gray", "shade": 900, "contrast": "white"},
    "white": {"color": "white", "contrast": "black"},
    "black": {"color": "black", "contrast": "white"},
    "transparent": {"color": "transparent", "contrast": "black"},
}

SPACING = {"0": "0", "1": "1", "2": "2", "3": "4", "4": "6", "5": "12"}

SCALES = {
    "spacing": SPACING,
    "margin": {**SPACING, "auto": "auto"},
    "font_size": {
        "1": _approx("4xl"),
        "2": _approx("3xl"),
        "3": "[1.75rem]",
        "4": "2xl",
        "5": "xl",
        "6": "base",
    },
    "line_height": {"1": "none", "sm": "tight", "base": "normal", "lg": "loose"},
    "radius": {
        "0": "rounded-none",
        "1": "rounded",
        "2": "rounded-md",
        "3": "rounded-lg",
        "4": "rounded-2xl",
        "5": _approx("rounded-3xl"),
    },
    "border_width": {
        "0": "border-0",
        "1": "border",
        "2": "border-2",
        "3": _approx("border-4"),
        "4": "border-4",
        "5": _approx("border-8"),
    },
    "position": {"0": "0", "50": "1/2", "100": "full"},
    "percent": {"25": "1/4", "50": "1/2", "75": "3/4", "100": "full", "auto": "auto"},
    "z_index": {
        "n1": _approx("-z-10"),
        "0": "z-0",
        "1": _approx("z-10"),
        "2": _approx("z-20"),
        "3": _approx("z-30"),
    },
    "order": {
        "0": "none",
        "1": "1",
        "2": "2",
        "3": "3",
        "4": "4",
        "5": "5",
        "first": _approx("first"),
        "last": _approx("last"),
    },
    "float": {"start": "left", "end": "right", "none": "none"},
    "link_offset": {"1": _approx("2"), "2": _approx("4"), "3": _approx("8")},
}

OPACITY = ["0", "25", "50", "75", "100"]
ALPHA = ["10", "25", "50", "75", "100"]


def _spacingRules() -> List[Dict[str, Any]]:
    rules = []
    for side in ("", "t", "b", "s", "e", "x", "y"):
        rules.append(_stem(f"m{side}", "scale", f"m{side}-{{scale}}", scale="margin", responsive=True))
        rules.append(_stem(f"p{side}", "scale", f"p{side}-{{scale}}", scale="spacing", responsive=True))
    for stem, target in (("gap", "gap"), ("row-gap", "gap-y"), ("column-gap", "gap-x"),
                         ("g", "gap"), ("gx", "gap-x"), ("gy", "gap-y")):
        rules.append(_stem(stem, "scale", f"{target}-{{scale}}", scale="spacing", responsive=True))
    return rules


def _displayRules() -> List[Dict[str, Any]]:
    return [
        _exact("d-none", "hidden", responsive=True, states=["print"]),
        _stem("d", "rename", "{value}", responsive=True, states=["print"], values=[
            "inline", "inline-block", "block", "grid", "inline-grid",
            "table", "table-row", "table-cell", "flex", "inline-flex",
        ]),
        _exact("visible", "visible"),
        _exact("invisible", "invisible"),
        _exact("visually-hidden", "sr-only"),
        _exact("visually-hidden-focusable", "sr-only", "focus:not-sr-only", kind="composite"),
        _exact("container", kind="passthrough"),
    ]


def _flexRules() -> List[Dict[str, Any]]:
    flex = {
        "flex-row": "flex-row",
        "flex-row-reverse": "flex-row-reverse",
        "flex-column": "flex-col",
        "flex-column-reverse": "flex-col-reverse",
        "flex-wrap": "flex-wrap",
        "flex-nowrap": "flex-nowrap",
        "flex-wrap-reverse": "flex-wrap-reverse",
        "flex-fill": "flex-1",
        "flex-grow-0": "grow-0",
        "flex-grow-1": "grow",
        "flex-shrink-0": "shrink-0",
        "flex-shrink-1": "shrink",
    }
    rules = [_exact(name, target, responsive=True) for name, target in flex.items()]
    rules += [
        _stem("justify-content", "rename", "justify-{value}", responsive=True,
              values=["start", "end", "center", "between", "around", "evenly"]),
        _stem("align-items", "rename", "items-{value}", responsive=True,
              values=["start", "end", "center", "baseline", "stretch"]),
        _stem("align-self", "rename", "self-{value}", responsive=True,
              values=["auto", "start", "end", "center", "baseline", "stretch"]),
        _stem("align-content", "rename", "content-{value}", responsive=True,
              values=["start", "end", "center", "between", "around", "stretch"]),
        _stem("order", "scale", "order-{scale}", scale="order", responsive=True),
        _exact("vstack", "flex", "flex-1", "flex-col", "self-stretch", kind="composite"),
        _exact("hstack", "flex", "flex-row", "items-center", "self-stretch", kind="composite"),
    ]
    return rules


def _colorRules() -> List[Dict[str, Any]]:
    return [
        _stem("text", "color", "text-{color}"),
        _stem("bg", "color", "bg-{color}"),
        _stem("border", "color", "border-{color}"),
        _stem("text-bg", "composite", "bg-{color}", "text-{contrast}"),
        _exact("text-muted", "text-gray-500"),
        _exact("text-body", "text-gray-900"),
        _exact("text-body-secondary", "text-gray-600"),
        _exact("text-body-tertiary", "text-gray-400"),
        _exact("text-white-50", "text-white/50"),
        _exact("text-black-50", "text-black/50"),
        _exact("text-reset", "text-inherit"),
        _exact("bg-body", "bg-white"),
        _exact("bg-body-secondary", "bg-gray-200"),
        _exact("bg-body-tertiary", "bg-gray-50"),
        _stem("opacity", "rename", "opacity-{value}", values=OPACITY),
        _stem("bg-opacity", "rename", "bg-opacity-{value}", values=ALPHA),
        _stem("text-opacity", "rename", "text-opacity-{value}", values=ALPHA),
        _stem("link-opacity", "rename", "text-opacity-{value}", values=ALPHA, states=["hover"]),
        _stem("link-offset", "scale", "underline-offset-{scale}", scale="link_offset", states=["hover"]),
    ]


def _borderRules() -> List[Dict[str, Any]]:
    rules = [
        _exact("border", "border"),
        _stem("border", "scale", "{scale}", scale="border_width"),
        _exact("rounded", "rounded-md"),
        _stem("rounded", "scale", "{scale}", scale="radius"),
        _exact("rounded-circle", "rounded-full"),
        _exact("rounded-pill", "rounded-full"),
        _exact("shadow", "shadow-md"),
        _exact("shadow-sm", "shadow-sm"),
        _exact("shadow-lg", "shadow-xl"),
        _exact("shadow-none", "shadow-none"),
    ]
    for side, short in (("top", "t"), ("end", "e"), ("bottom", "b"), ("start", "s")):
        rules.append(_exact(f"border-{side}", f"border-{short}"))
        rules.append(_exact(f"border-{side}-0", f"border-{short}-0"))
        rules.append(_exact(f"rounded-{side}", f"rounded-{short}-md"))
    return rules


def _typographyRules() -> List[Dict[str, Any]]:
    weights = {
        "bold": "bold", "bolder": "extrabold", "semibold": "semibold", "medium": "medium",
        "normal": "normal", "light": "light", "lighter": "extralight",
    }
    rules = [_exact(f"fw-{name}", f"font-{target}") for name, target in weights.items()]
    rules += [
        _stem("fs", "scale", "text-{scale}", scale="font_size"),
        _stem("lh", "scale", "leading-{scale}", scale="line_height"),
        _exact("fst-italic", "italic"),
        _exact("fst-normal", "not-italic"),
        _exact("font-monospace", "font-mono"),
        _exact("text-start", "text-left", responsive=True),
        _exact("text-end", "text-right", responsive=True),
        _exact("text-center", "text-center", responsive=True),
        _exact("text-uppercase", "uppercase"),
        _exact("text-lowercase", "lowercase"),
        _exact("text-capitalize", "capitalize"),
        _exact("text-wrap", "whitespace-normal"),
        _exact("text-nowrap", "whitespace-nowrap"),
        _exact("text-break", "break-words"),
        _exact("text-truncate", "truncate"),
        _exact("text-decoration-none", "no-underline"),
        _exact("text-decoration-underline", "underline"),
        _exact("text-decoration-line-through", "line-through"),
        _stem("align", "rename", "align-{value}",
              values=["baseline", "top", "middle", "bottom", "text-top", "text-bottom"]),
    ]
    return rules


def _layoutRules() -> List[Dict[str, Any]]:
    rules = [
        _stem("position", "rename", "{value}",
              values=["static", "relative", "absolute", "fixed", "sticky"]),
        _stem("w", "scale", "w-{scale}", scale="percent"),
        _stem("h", "scale", "h-{scale}", scale="percent"),
        _exact("mw-100", "max-w-full"),
        _exact("mh-100", "max-h-full"),
        _exact("vw-100", "w-screen"),
        _exact("vh-100", "h-screen"),
        _exact("min-vw-100", "min-w-screen"),
        _exact("min-vh-100", "min-h-screen"),
        _stem("z", "scale", "{scale}", scale="z_index"),
        _stem("float", "scale", "float-{scale}", scale="float", responsive=True),
        _stem("overflow", "rename", "overflow-{value}", values=[
            f"{axis}{mode}" for axis in ("", "x-", "y-")
            for mode in ("auto", "hidden", "visible", "scroll")
        ]),
        _stem("object-fit", "rename", "object-{value}", responsive=True,
              values=["contain", "cover", "fill", "none"]),
        _exact("object-fit-scale", "object-scale-down", responsive=True),
        _stem("user-select", "rename", "select-{value}", values=["all", "auto", "none"]),
        _exact("pe-none", "pointer-events-none"),
        _exact("pe-auto", "pointer-events-auto"),
        _exact("translate-middle", "-translate-x-1/2", "-translate-y-1/2", kind="composite"),
        _exact("translate-middle-x", "-translate-x-1/2"),
        _exact("translate-middle-y", "-translate-y-1/2"),
        _exact("fixed-top", "fixed", "inset-x-0", "top-0", "z-30", kind="composite"),
        _exact("fixed-bottom", "fixed", "inset-x-0", "bottom-0", "z-30", kind="composite"),
        _exact("sticky-top", "sticky", "top-0", "z-20", kind="composite", responsive=True),
        _exact("sticky-bottom", "sticky", "bottom-0", "z-20", kind="composite", responsive=True),
        _exact("img-fluid", "max-w-full", "h-auto", kind="composite"),
        _exact("ratio-1x1", "aspect-square"),
        _exact("ratio-16x9", "aspect-video"),
        _exact("ratio-4x3", "aspect-[4/3]"),
        _exact("ratio-21x9", "aspect-[21/9]"),
    ]
    for edge in ("top", "bottom", "start", "end"):
        rules.append(_stem(edge, "scale", f"{edge}-{{scale}}", scale="position"))
    return rules


DEFAULT_TABLES: Dict[str, Any] = {
    "breakpoints": {
        "bootstrap": BOOTSTRAP_BREAKPOINTS,
        "tailwind": TAILWIND_BREAKPOINTS,
    },
    "colors": COLORS,
    "scales": SCALES,
    # Stems with exact rules only, plus grid stems. Grid classes need the
    # sibling columns to convert, so they are parsed but left unmapped.
    "stems": ["flex", "sticky", "col", "row-cols", "offset"],
    "bare_responsive": ["col"],
    "spacing_scales": ["spacing", "margin"],
    "rules": (
        _displayRules()
        + _spacingRules()
        + _flexRules()
        + _colorRules()
        + _borderRules()
        + _typographyRules()
        + _layoutRules()
    ),
}
