"""
VS Code color theme serializer.

Maps ThemeRoles onto the workbench `colors` table and TextMate `tokenColors`
rules of a VS Code color theme document.
"""

from typing import Any, Dict, List, Optional

from .roles import ThemeConfig, ThemeRoles

VSCODE_SCHEMA_URL = "vscode://schemas/color-theme"


def _token_colors(roles: ThemeRoles) -> List[Dict[str, Any]]:
    fg = roles.foreground
    alpha = roles.alpha
    return [
        {
            "scope": ["comment", "punctuation.definition.comment"],
            "settings": {"foreground": alpha(fg, "60"), "fontStyle": "italic"},
        },
        {
            "scope": ["keyword", "keyword.control", "keyword.operator.new",
                      "keyword.operator.expression", "keyword.other"],
            "settings": {"foreground": roles.magenta.hex, "fontStyle": "bold"},
        },
        {
            "scope": ["storage", "storage.type", "storage.modifier", "entity.name.tag", "meta.tag"],
            "settings": {"foreground": roles.magenta.hex},
        },
        {
            "scope": [
                "string", "string.quoted", "string.template", "string.regexp",
                "punctuation.definition.string", "support.constant.property-value",
                "support.constant.property-value.css", "markup.inline.raw",
                "markup.fenced_code", "markup.inserted",
            ],
            "settings": {"foreground": roles.green.hex},
        },
        {
            "scope": [
                "constant.numeric", "constant.character", "number", "constant.other",
                "variable.other.constant", "support.constant", "entity.other.inherited-class",
                "support.class", "support.type",
            ],
            "settings": {"foreground": roles.yellow.hex},
        },
        {
            "scope": ["constant.language", "constant.language.boolean", "constant.language.null",
                      "entity.name.class", "entity.name.type"],
            "settings": {"foreground": roles.yellow.hex, "fontStyle": "bold"},
        },
        {
            "scope": ["variable", "identifier", "variable.other.readwrite", "meta.definition.variable"],
            "settings": {"foreground": fg.hex},
        },
        {
            "scope": [
                "variable.other.property", "variable.other.object.property",
                "meta.object-literal.key", "support.variable", "support.other.variable",
                "support.type.property-name", "support.type.property-name.css",
            ],
            "settings": {"foreground": roles.accent1.hex},
        },
        {
            "scope": [
                "entity.name.function", "meta.function-call", "meta.method-call", "meta.method",
                "meta.parameter", "variable.parameter", "entity.other.attribute-name",
                "entity.name.module", "support.module", "support.function", "support.node",
            ],
            "settings": {"foreground": roles.accent2.hex},
        },
        {
            "scope": [
                "punctuation.definition.begin.bracket", "punctuation.definition.end.bracket",
                "punctuation.definition.begin.bracket.round", "punctuation.definition.end.bracket.round",
                "punctuation.definition.begin.bracket.square", "punctuation.definition.end.bracket.square",
                "punctuation.definition.begin.bracket.curly", "punctuation.definition.end.bracket.curly",
                "meta.brace", "punctuation.section.brackets", "punctuation.section.parens",
                "punctuation.section.braces",
            ],
            "settings": {"foreground": alpha(fg, "90" if roles.dark_base else "80")},
        },
        {
            "scope": ["punctuation", "punctuation.terminator", "punctuation.separator",
                      "punctuation.separator.comma", "punctuation.definition"],
            "settings": {"foreground": alpha(fg, "70" if roles.dark_base else "60")},
        },
        {
            "scope": ["keyword.operator", "punctuation.operator"],
            "settings": {"foreground": roles.emphasize(roles.magenta, 0.05).hex},
        },
        {
            "scope": ["markup.heading", "entity.name.section"],
            "settings": {"foreground": roles.accent2.hex, "fontStyle": "bold"},
        },
        {"scope": ["markup.italic"], "settings": {"fontStyle": "italic"}},
        {"scope": ["markup.bold"], "settings": {"fontStyle": "bold"}},
        {
            "scope": ["markup.underline.link", "string.other.link"],
            "settings": {"foreground": roles.accent2.hex, "fontStyle": "underline"},
        },
        {"scope": ["markup.deleted"], "settings": {"foreground": roles.red.hex}},
        {
            "scope": ["invalid", "invalid.illegal"],
            "settings": {"foreground": roles.red.hex, "fontStyle": "bold"},
        },
        {
            "scope": ["invalid.deprecated"],
            "settings": {"foreground": alpha(roles.red, "80"), "fontStyle": "italic"},
        },
    ]


def _workbench_colors(roles: ThemeRoles) -> Dict[str, str]:
    c0 = roles.base
    bg = roles.background.hex
    fg = roles.foreground.hex
    c1, c2 = roles.accent1, roles.accent2
    c3, c4, c5, c6, c7 = roles.green, roles.red, roles.yellow, roles.magenta, roles.cyan
    alpha = roles.alpha
    recede = roles.recede
    emphasize = roles.emphasize

    bg_very_dark = recede(c0, 0.95).hex
    bg_dark = recede(c0, 0.92).hex
    bg_medium = recede(c0, 0.9).hex
    bg_light = recede(c0, 0.88).hex
    bg_lighter = recede(c0, 0.85).hex
    bg_inactive = recede(c0, 0.97).hex
    button_fg = bg if roles.dark_base else emphasize(c0, 0.9).hex

    f = roles.foreground
    return {
        "editor.background": bg,
        "editor.foreground": fg,
        "foreground": fg,
        "disabledForeground": alpha(f, "60"),
        "focusBorder": alpha(c2, "60"),
        "descriptionForeground": alpha(f, "70"),
        "errorForeground": c4.hex,
        "icon.foreground": c1.hex,

        "widget.border": alpha(c1, "40"),
        "selection.background": alpha(c2, "50"),
        "sash.hoverBorder": c2.hex,

        "activityBar.background": bg_very_dark,
        "activityBar.foreground": c1.hex,
        "activityBar.activeBorder": c2.hex,
        "activityBarBadge.background": c2.hex,
        "activityBarBadge.foreground": fg,

        "sideBar.background": bg_dark,
        "sideBar.foreground": fg,
        "sideBar.border": alpha(c1, "20"),
        "sideBarTitle.foreground": c1.hex,

        "statusBar.background": bg_very_dark,
        "statusBar.foreground": fg,
        "statusBar.noFolderBackground": recede(c3, 0.8).hex,
        "statusBar.debuggingBackground": c4.hex,

        "titleBar.activeBackground": bg_very_dark,
        "titleBar.activeForeground": fg,
        "titleBar.inactiveBackground": bg_inactive,
        "titleBar.inactiveForeground": alpha(f, "99"),

        "tab.activeBackground": bg,
        "tab.activeForeground": fg,
        "tab.inactiveBackground": bg_very_dark,
        "tab.inactiveForeground": alpha(f, "AA"),
        "tab.activeBorder": c2.hex,
        "tab.border": alpha(c1, "20"),
        "editorGroupHeader.tabsBackground": bg_very_dark,

        "panel.background": bg,
        "panel.border": alpha(c1, "40"),
        "panelTitle.activeBorder": c2.hex,

        "terminal.foreground": fg,
        # Dark themes take a near-black from the base; light ones a muted base
        "terminal.ansiBlack": (recede(c0, 0.9) if roles.dark_base else emphasize(c0, 0.2)).hex,
        "terminal.ansiRed": c4.hex,
        "terminal.ansiGreen": c3.hex,
        "terminal.ansiYellow": c5.hex,
        "terminal.ansiBlue": c2.hex,
        "terminal.ansiMagenta": c6.hex,
        "terminal.ansiCyan": c7.hex,
        "terminal.ansiWhite": fg,
        "terminal.ansiBrightBlack": recede(f, 0.3).hex,
        "terminal.ansiBrightRed": emphasize(c4, 0.2).hex,
        "terminal.ansiBrightGreen": emphasize(c3, 0.2).hex,
        "terminal.ansiBrightYellow": emphasize(c5, 0.2).hex,
        "terminal.ansiBrightBlue": emphasize(c2, 0.2).hex,
        "terminal.ansiBrightMagenta": emphasize(c6, 0.2).hex,
        "terminal.ansiBrightCyan": emphasize(c7, 0.2).hex,
        "terminal.ansiBrightWhite": emphasize(f, 0.2).hex,

        "input.background": bg_lighter,
        "input.border": alpha(c1, "40"),
        "input.foreground": fg,
        "input.placeholderForeground": alpha(f, "50"),
        "inputOption.activeBorder": c2.hex,
        "inputOption.activeBackground": alpha(c2, "30"),
        "inputOption.activeForeground": fg,
        "inputValidation.errorBackground": recede(c4, 0.8).hex,
        "inputValidation.errorBorder": c4.hex,
        "inputValidation.errorForeground": fg,
        "inputValidation.warningBackground": recede(c5, 0.8).hex,
        "inputValidation.warningBorder": c5.hex,
        "inputValidation.warningForeground": fg,
        "inputValidation.infoBackground": recede(c2, 0.8).hex,
        "inputValidation.infoBorder": c2.hex,
        "inputValidation.infoForeground": fg,

        "dropdown.background": bg_light,
        "dropdown.foreground": fg,
        "dropdown.border": alpha(c1, "40"),
        "dropdown.listBackground": bg_lighter,

        "quickInput.background": bg_light,
        "quickInput.foreground": fg,
        "quickInputList.focusBackground": alpha(c2, "40"),
        "quickInputList.focusForeground": fg,
        "quickInputList.focusIconForeground": c2.hex,
        "quickInputTitle.background": bg_dark,

        "list.activeSelectionBackground": alpha(c2, "40"),
        "list.activeSelectionForeground": fg,
        "list.inactiveSelectionBackground": alpha(c1, "30"),
        "list.hoverBackground": alpha(c1, "20"),
        "list.focusBackground": alpha(c2, "30"),

        "button.background": c2.hex,
        "button.foreground": button_fg,
        "button.hoverBackground": emphasize(c2, 0.1).hex,
        "button.hoverForeground": button_fg,
        "button.secondaryBackground": bg_light,
        "button.secondaryForeground": fg,
        "button.secondaryHoverBackground": bg_lighter,

        "badge.background": c2.hex,
        "badge.foreground": button_fg,

        "breadcrumb.foreground": alpha(f, "70"),
        "breadcrumb.focusForeground": fg,
        "breadcrumb.activeSelectionForeground": c2.hex,
        "breadcrumb.background": bg,

        "scrollbarSlider.background": alpha(c1, "40"),
        "scrollbarSlider.hoverBackground": alpha(c1, "60"),
        "scrollbarSlider.activeBackground": alpha(c2, "60"),

        "editorLineNumber.foreground": alpha(f, "50"),
        "editorLineNumber.activeForeground": c2.hex,
        "editorCursor.foreground": c2.hex,
        "editor.selectionBackground": alpha(c2, "40"),
        "editor.inactiveSelectionBackground": alpha(c1, "30"),
        "editor.findMatchBackground": alpha(c5, "40"),
        "editor.findMatchHighlightBackground": alpha(c5, "20"),
        "editorBracketMatch.background": alpha(c2, "20"),
        "editorBracketMatch.border": c2.hex,
        "editorBracketHighlight.foreground1": alpha(c2, "80"),
        "editorBracketHighlight.foreground2": alpha(c3, "80"),
        "editorBracketHighlight.foreground3": alpha(c5, "80"),
        "editorBracketHighlight.foreground4": alpha(c6, "80"),
        "editorBracketHighlight.foreground5": alpha(c7, "80"),
        "editorBracketHighlight.foreground6": alpha(c1, "80"),
        "editorBracketPairGuide.activeBackground1": c2.hex,
        "editorBracketPairGuide.activeBackground2": c3.hex,
        "editorBracketPairGuide.activeBackground3": c5.hex,
        "editorBracketPairGuide.activeBackground4": c6.hex,
        "editorBracketPairGuide.activeBackground5": c7.hex,
        "editorBracketPairGuide.activeBackground6": c1.hex,
        "editorBracketPairGuide.background1": alpha(c2, "30"),
        "editorBracketPairGuide.background2": alpha(c3, "30"),
        "editorBracketPairGuide.background3": alpha(c5, "30"),
        "editorBracketPairGuide.background4": alpha(c6, "30"),
        "editorBracketPairGuide.background5": alpha(c7, "30"),
        "editorBracketPairGuide.background6": alpha(c1, "30"),
        "editorWhitespace.foreground": alpha(f, "30"),
        "editorWidget.background": bg_light,
        "editorWidget.foreground": fg,
        "editorWidget.border": alpha(c1, "40"),
        "editorWidget.resizeBorder": c2.hex,
        "editorSuggestWidget.background": bg_light,
        "editorSuggestWidget.foreground": fg,
        "editorSuggestWidget.border": alpha(c1, "40"),
        "editorSuggestWidget.highlightForeground": c2.hex,
        "editorSuggestWidget.focusHighlightForeground": c2.hex,
        "editorSuggestWidget.selectedBackground": alpha(c2, "40"),
        "editorSuggestWidget.selectedForeground": fg,
        "editorSuggestWidget.selectedIconForeground": c2.hex,
        "editorHoverWidget.background": bg_light,
        "editorHoverWidget.foreground": fg,
        "editorHoverWidget.border": alpha(c1, "40"),
        "editorHoverWidget.highlightForeground": c2.hex,
        "editorHoverWidget.statusBarBackground": bg_dark,
        "editorError.foreground": c4.hex,
        "editorWarning.foreground": c5.hex,
        "editorInfo.foreground": c2.hex,
        "editorGutter.addedBackground": c3.hex,
        "editorGutter.modifiedBackground": c5.hex,
        "editorGutter.deletedBackground": c4.hex,

        "gitDecoration.addedResourceForeground": c3.hex,
        "gitDecoration.modifiedResourceForeground": c5.hex,
        "gitDecoration.deletedResourceForeground": c4.hex,
        "gitDecoration.untrackedResourceForeground": c7.hex,
        "gitDecoration.ignoredResourceForeground": alpha(f, "60"),

        "peekView.border": c2.hex,
        "peekViewEditor.background": bg_light,
        "peekViewResult.background": bg_dark,
        "peekViewTitle.background": bg_very_dark,

        "notificationCenter.border": alpha(c1, "40"),
        "notificationCenterHeader.background": bg_dark,
        "notifications.background": bg_light,
        "notifications.border": alpha(c1, "40"),
        "notificationLink.foreground": c2.hex,

        "settings.headerForeground": fg,
        "settings.modifiedItemIndicator": c2.hex,
        "settings.focusedRowBackground": bg_medium,
        "settings.rowHoverBackground": bg_dark,
        "settings.focusedRowBorder": alpha(c2, "60"),
        "settings.numberInputBackground": bg,
        "settings.numberInputForeground": c6.hex,
        "settings.numberInputBorder": alpha(c1, "40"),
        "settings.textInputBackground": bg,
        "settings.textInputForeground": c2.hex,
        "settings.textInputBorder": alpha(c1, "40"),
        "settings.checkboxBackground": bg,
        "settings.checkboxForeground": c5.hex,
        "settings.checkboxBorder": alpha(c1, "40"),
        "settings.dropdownBackground": bg,
        "settings.dropdownForeground": c1.hex,
        "settings.dropdownBorder": alpha(c1, "40"),
        "settings.dropdownListBorder": alpha(c1, "40"),
    }


def build_vscode_theme(roles: ThemeRoles, theme_config: Optional[ThemeConfig] = None) -> Dict[str, Any]:
    """
    Serialize theme roles as a VS Code color theme document.

    Args:
        roles: Derived theme roles
        theme_config: Supplies the theme name

    Returns:
        Dict with `$schema`, `name`, `type`, `colors` and `tokenColors`
    """
    cfg = theme_config or ThemeConfig()
    return {
        "$schema": VSCODE_SCHEMA_URL,
        "name": cfg.name,
        "type": roles.appearance,
        "colors": _workbench_colors(roles),
        "tokenColors": _token_colors(roles),
    }
