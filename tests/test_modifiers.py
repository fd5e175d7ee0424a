from pagecraft.styles import DARK, FOCUS, HOVER, LG, MD, ModifierKind, Theme, combine_classes, combine_prefix, merge_classes
from pagecraft.styles.modifiers import as_modifier, normalize_modifiers


def test_prefix_orders_kinds_and_keeps_insertion_within_kind() -> None:
    assert combine_prefix([HOVER, MD]) == "md:hover:"
    assert combine_prefix(["focus", "hover", "focus"]) == "focus:hover:"
    assert combine_prefix([FOCUS, DARK]) == "dark:focus:"
    assert combine_prefix(None) == ""


def test_known_names_resolve_to_modifiers() -> None:
    assert normalize_modifiers("dark") == (DARK,)
    assert as_modifier("md") is MD


def test_unknown_names_become_custom_prefixes() -> None:
    modifier = as_modifier("group-hover:")

    assert modifier.kind is ModifierKind.CUSTOM
    assert modifier.name == "group-hover"
    assert combine_prefix([modifier, HOVER]) == "hover:group-hover:"


def test_combine_and_merge_classes() -> None:
    assert combine_classes(["a", "b"], None) == ["a", "b"]
    assert combine_classes(["a", ""], [LG]) == ["lg:a"]
    assert merge_classes(("a",), ["a", "b", ""]) == ("a", "b")


def test_theme_breakpoint_table() -> None:
    theme = Theme(breakpoints={"md": "50rem"})

    assert Theme().min_width(MD) == "48rem"
    assert theme.min_width("md") == "50rem"
    assert theme.min_width("xl") == "80rem"
    assert theme.min_width("huge") is None
    assert theme.media_query(LG) == "(min-width: 64rem)"
    assert theme.media_query(DARK) == "(prefers-color-scheme: dark)"


def test_theme_css_lists_overrides_only() -> None:
    assert Theme().css() == ""
    theme = Theme(breakpoints={"md": "50rem", "3xl": "120rem"})

    assert theme.css() == "@theme {\n  --breakpoint-md: 50rem;\n  --breakpoint-3xl: 120rem;\n}"
