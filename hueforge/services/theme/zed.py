"""
Zed theme serializer.

Maps ThemeRoles onto a Zed theme family document with a single appearance
variant, including the `players` list and the `syntax` sub-map.
"""

from typing import Any, Dict, List, Optional

from hueforge.services.colors.color import Color

from .roles import ThemeConfig, ThemeRoles

ZED_SCHEMA_URL = "https://zed.dev/schema/themes/v0.2.0.json"
TRANSPARENT = "#00000000"


def _syntax_style(color: Color, font_style: Optional[str] = None,
                  font_weight: Optional[int] = None) -> Dict[str, Any]:
    return {"color": color.hex, "font_style": font_style, "font_weight": font_weight}


def _players(roles: ThemeRoles) -> List[Dict[str, str]]:
    order = [roles.accent2, roles.red, roles.yellow, roles.magenta,
             roles.cyan, roles.red, roles.yellow, roles.green]
    return [
        {"cursor": c.hex, "background": c.hex, "selection": roles.alpha(c, "3D")}
        for c in order
    ]


def _syntax(roles: ThemeRoles) -> Dict[str, Dict[str, Any]]:
    fg = roles.foreground
    c2, c3, c4, c5, c6, c7 = (roles.accent2, roles.green, roles.red,
                              roles.yellow, roles.magenta, roles.cyan)
    recede = roles.recede
    emphasize = roles.emphasize

    return {
        "attribute": _syntax_style(c2),
        "boolean": _syntax_style(c5),
        "comment": _syntax_style(recede(fg, 0.6)),
        "comment.doc": _syntax_style(recede(fg, 0.4)),
        "constant": _syntax_style(c5),
        "constructor": _syntax_style(c2),
        "embedded": _syntax_style(fg),
        "emphasis": _syntax_style(c2),
        "emphasis.strong": _syntax_style(c5, font_weight=700),
        "enum": _syntax_style(c4),
        "function": _syntax_style(c2),
        "hint": _syntax_style(emphasize(c2, 0.1)),
        "keyword": _syntax_style(c6),
        "label": _syntax_style(c2),
        "link_text": _syntax_style(c2, font_style="normal"),
        "link_uri": _syntax_style(c7),
        "namespace": _syntax_style(fg),
        "number": _syntax_style(c5),
        "operator": _syntax_style(c7),
        "predictive": _syntax_style(recede(c2, 0.3), font_style="italic"),
        "preproc": _syntax_style(fg),
        "primary": _syntax_style(fg),
        "property": _syntax_style(c4),
        "punctuation": _syntax_style(fg),
        "punctuation.bracket": _syntax_style(emphasize(fg, 0.1)),
        "punctuation.delimiter": _syntax_style(emphasize(fg, 0.1)),
        "punctuation.list_marker": _syntax_style(c4),
        "punctuation.markup": _syntax_style(c4),
        "punctuation.special": _syntax_style(recede(c4, 0.2)),
        "selector": _syntax_style(c5),
        "selector.pseudo": _syntax_style(c2),
        "string": _syntax_style(c3),
        "string.escape": _syntax_style(recede(fg, 0.4)),
        "string.regex": _syntax_style(c5),
        "string.special": _syntax_style(c5),
        "string.special.symbol": _syntax_style(c5),
        "tag": _syntax_style(c2),
        "text.literal": _syntax_style(c3),
        "title": _syntax_style(c4, font_weight=400),
        "type": _syntax_style(c7),
        "variable": _syntax_style(fg),
        "variable.special": _syntax_style(c5),
        "variant": _syntax_style(c2),
    }


def _style(roles: ThemeRoles) -> Dict[str, Any]:
    c0 = roles.base
    bg = roles.background
    fg = roles.foreground
    c2, c3, c4, c5, c6, c7 = (roles.accent2, roles.green, roles.red,
                              roles.yellow, roles.magenta, roles.cyan)
    alpha = roles.alpha
    recede = roles.recede
    emphasize = roles.emphasize

    bg_dark = recede(c0, 0.92).hex
    bg_medium = recede(c0, 0.9).hex
    bg_light = recede(c0, 0.88).hex

    fg_muted = recede(fg, 0.25)
    fg_disabled = recede(fg, 0.45)

    border_base = emphasize(bg, 0.15).hex
    border_variant = emphasize(bg, 0.08).hex
    border_muted = emphasize(bg, 0.12).hex

    style: Dict[str, Any] = {
        "border": border_base,
        "border.variant": border_variant,
        "border.focused": c2.hex,
        "border.selected": recede(c2, 0.4).hex,
        "border.transparent": TRANSPARENT,
        "border.disabled": border_muted,
        "elevated_surface.background": bg_dark,
        "surface.background": bg_dark,
        "background": bg_medium,
        "element.background": bg_dark,
        "element.hover": border_variant,
        "element.active": bg_light,
        "element.selected": bg_light,
        "element.disabled": bg_dark,
        "drop_target.background": alpha(c2, "80"),
        "ghost_element.background": TRANSPARENT,
        "ghost_element.hover": border_variant,
        "ghost_element.active": bg_light,
        "ghost_element.selected": bg_light,
        "ghost_element.disabled": bg_dark,
        "text": fg.hex,
        "text.muted": fg_muted.hex,
        "text.placeholder": fg_disabled.hex,
        "text.disabled": fg_disabled.hex,
        "text.accent": c2.hex,
        "icon": fg.hex,
        "icon.muted": fg_muted.hex,
        "icon.disabled": fg_disabled.hex,
        "icon.placeholder": fg_muted.hex,
        "icon.accent": c2.hex,
        "status_bar.background": bg_medium,
        "title_bar.background": bg_medium,
        "title_bar.inactive_background": bg_dark,
        "toolbar.background": bg.hex,
        "tab_bar.background": bg_dark,
        "tab.inactive_background": bg_dark,
        "tab.active_background": bg.hex,
        "search.match_background": alpha(c2, "66"),
        "panel.background": bg_dark,
        "panel.focused_border": None,
        "pane.focused_border": None,
        "scrollbar.thumb.background": alpha(fg, "4C"),
        "scrollbar.thumb.hover_background": border_variant,
        "scrollbar.thumb.border": border_variant,
        "scrollbar.track.background": TRANSPARENT,
        "scrollbar.track.border": bg_dark,
        "editor.foreground": fg.hex,
        "editor.background": bg.hex,
        "editor.gutter.background": bg.hex,
        "editor.subheader.background": bg_dark,
        "editor.active_line.background": f"{bg_dark}BF",
        "editor.highlighted_line.background": bg_dark,
        "editor.line_number": fg_disabled.hex,
        "editor.active_line_number": fg.hex,
        "editor.hover_line_number": fg_muted.hex,
        "editor.invisible": fg_disabled.hex,
        "editor.wrap_guide": alpha(fg, "0D"),
        "editor.active_wrap_guide": alpha(fg, "1A"),
        "editor.document_highlight.read_background": alpha(c2, "1A"),
        "editor.document_highlight.write_background": alpha(c5, "66"),
        "terminal.background": bg.hex,
        "terminal.foreground": fg.hex,
        "terminal.bright_foreground": fg.hex,
        "terminal.dim_foreground": bg.hex,
        "terminal.ansi.black": bg.hex,
        "terminal.ansi.bright_black": emphasize(bg, 0.3).hex,
        "terminal.ansi.dim_black": fg.hex,
        "terminal.ansi.white": fg.hex,
        "terminal.ansi.bright_white": emphasize(fg, 0.2).hex,
        "terminal.ansi.dim_white": recede(fg, 0.4).hex,
    }

    # Bright variants sit closer to the background, dim ones further from it
    for name, color in (("red", c4), ("green", c3), ("yellow", c5),
                        ("blue", c2), ("magenta", c6), ("cyan", c7)):
        style[f"terminal.ansi.{name}"] = color.hex
        style[f"terminal.ansi.bright_{name}"] = recede(color, 0.5).hex
        style[f"terminal.ansi.dim_{name}"] = emphasize(color, 0.25).hex

    style.update({
        "link_text.hover": c2.hex,
        "version_control.added": c3.hex,
        "version_control.modified": c5.hex,
        "version_control.deleted": c4.hex,
        "version_control.conflict_marker.ours": alpha(c3, "1A"),
        "version_control.conflict_marker.theirs": alpha(c2, "1A"),
    })

    # Status colors: (foreground, background tint source, border)
    statuses = {
        "conflict": (c5, c5, recede(c5, 0.6).hex),
        "created": (c3, c3, recede(c3, 0.7).hex),
        "deleted": (c4, c4, recede(c4, 0.7).hex),
        "error": (c4, c4, recede(c4, 0.7).hex),
        "hidden": (fg_disabled, fg_disabled, border_muted),
        "hint": (emphasize(c2, 0.1), c2, recede(c2, 0.4).hex),
        "ignored": (fg_disabled, fg_disabled, border_base),
        "info": (c2, c2, recede(c2, 0.4).hex),
        "modified": (c5, c5, recede(c5, 0.6).hex),
        "predictive": (recede(c2, 0.3), c2, recede(c3, 0.7).hex),
        "renamed": (c2, c2, recede(c2, 0.4).hex),
        "success": (c3, c3, recede(c3, 0.7).hex),
        "unreachable": (fg_muted, fg_muted, border_base),
        "warning": (c5, c5, recede(c5, 0.6).hex),
    }
    for name, (color, tint, border) in statuses.items():
        style[name] = color.hex
        style[f"{name}.background"] = alpha(tint, "1A")
        style[f"{name}.border"] = border

    style["players"] = _players(roles)
    style["syntax"] = _syntax(roles)
    return style


def variant_name(theme_name: str, appearance: str) -> str:
    """'Custom Palette Theme' + dark -> 'Custom Palette Dark'."""
    base = theme_name[:-len(" Theme")] if theme_name.endswith(" Theme") else theme_name
    return f"{base} {appearance.title()}"


def build_zed_theme(roles: ThemeRoles, theme_config: Optional[ThemeConfig] = None) -> Dict[str, Any]:
    """
    Serialize theme roles as a Zed theme family document.

    Args:
        roles: Derived theme roles
        theme_config: Supplies theme name and author

    Returns:
        Dict with `$schema`, `name`, `author` and a one-element `themes` list
    """
    cfg = theme_config or ThemeConfig()
    return {
        "$schema": ZED_SCHEMA_URL,
        "name": cfg.name,
        "author": cfg.author,
        "themes": [
            {
                "name": variant_name(cfg.name, roles.appearance),
                "appearance": roles.appearance,
                "style": _style(roles),
            }
        ],
    }
