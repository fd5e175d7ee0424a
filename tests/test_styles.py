import pytest

from pagecraft.markup import stack
from pagecraft.styles import (
    DARK,
    HOVER,
    MD,
    BorderStyle,
    Color,
    Edge,
    ResponsiveBuilder,
    RadiusSide,
    RadiusSize,
    ShadowSize,
    StyleParameters,
    TextSize,
    Weight,
)
from pagecraft.styles.background import BACKGROUND, BackgroundParameters
from pagecraft.styles.dsl import background, md
from pagecraft.styles.border import BORDER
from pagecraft.styles.opacity import OPACITY
from pagecraft.styles.spacing import MARGINS, PADDING
from pagecraft.styles.visibility import VISIBILITY
from pagecraft.styles.typography import FONT

BLUE = Color("blue", 500)


def test_background_color() -> None:
    assert stack().background(BLUE).classes == ("bg-blue-500",)
    assert stack().background("[#0af]").classes == ("bg-[#0af]",)


def test_hover_modifier_prefix() -> None:
    assert stack().background(BLUE, on=HOVER).classes == ("hover:bg-blue-500",)


@pytest.mark.parametrize(
    "modifiers",
    [[HOVER, MD], [MD, HOVER], [HOVER, MD, HOVER]],
)
def test_combined_prefix_is_canonical(modifiers) -> None:
    assert stack().background(BLUE, on=modifiers).classes == ("md:hover:bg-blue-500",)


def test_color_scheme_sits_between_breakpoint_and_state() -> None:
    assert stack().background(BLUE, on=[HOVER, DARK, MD]).classes == ("md:dark:hover:bg-blue-500",)


def test_custom_prefix() -> None:
    assert stack().background(BLUE, on="group-hover").classes == ("group-hover:bg-blue-500",)


def test_same_intent_yields_same_token_on_every_surface() -> None:
    direct = stack().background(BLUE, on=MD).classes
    built = stack().responsive(lambda b: b.md(lambda b: b.background(BLUE))).classes
    declared = stack().on(md(background(BLUE))).classes

    assert direct == built == declared == ("md:bg-blue-500",)


def test_repeated_style_does_not_duplicate_classes() -> None:
    node = stack().background(BLUE).background(BLUE)

    assert node.render() == '<div class="bg-blue-500"></div>'


def test_margins() -> None:
    assert stack().margins().classes == ("m-4",)
    assert stack().margins(2, at=[Edge.TOP, Edge.HORIZONTAL]).classes == ("mt-2", "mx-2")
    assert stack().margins(at=Edge.HORIZONTAL, auto=True).classes == ("mx-auto",)
    assert stack().margins(-3).classes == ("m-0",)


def test_padding() -> None:
    assert stack().padding().classes == ("p-4",)
    assert stack().padding(6, at="y").classes == ("py-6",)


def test_border() -> None:
    assert stack().border().classes == ("border",)
    node = stack().border(2, at=Edge.TOP, style=BorderStyle.DASHED, color=Color("gray", 300))
    assert node.classes == ("border-t-2", "border-dashed", "border-gray-300")
    assert stack().border(2, at=Edge.HORIZONTAL, style=BorderStyle.DIVIDE).classes == ("divide-x-2",)
    assert stack().border(-1).classes == ("border-0",)


def test_rounded() -> None:
    assert stack().rounded().classes == ("rounded-md",)
    assert stack().rounded(RadiusSize.FULL, sides=RadiusSide.TOP_LEFT).classes == ("rounded-tl-full",)
    assert stack().rounded(None).classes == ("rounded",)


def test_shadow() -> None:
    assert stack().shadow().classes == ("shadow-md",)
    node = stack().shadow(ShadowSize.LG, color=Color("black", opacity=0.5))
    assert node.classes == ("shadow-lg", "shadow-black/50")


def test_font() -> None:
    node = stack().font(
        size=TextSize.XL2,
        weight=Weight.BOLD,
        color=Color("slate", 700),
        family="Inter Tight",
    )

    assert node.classes == ("text-2xl", "font-bold", "text-slate-700", "font-[Inter_Tight]")


def test_opacity_is_clamped() -> None:
    assert stack().opacity(150).classes == ("opacity-100",)
    assert stack().opacity(-5).classes == ("opacity-0",)
    assert stack().opacity(40).classes == ("opacity-40",)


def test_hidden() -> None:
    assert stack().hidden().classes == ("hidden",)
    assert stack().hidden(False).classes == ()
    assert stack().hidden(on=MD).classes == ("md:hidden",)


def test_color_values() -> None:
    assert Color("blue", 420).value == "blue-400"
    assert Color("red", 500, opacity=1.5).value == "red-500"
    assert Color("white", opacity=0.25).value == "white/25"
    assert Color.custom("#0af").value == "[#0af]"


def test_parameter_bag() -> None:
    assert BACKGROUND.from_bag({"color": "blue-500"}) == BackgroundParameters(color=BLUE)
    node = stack().style(FONT, StyleParameters(size="lg", weight="unknown"))
    assert node.classes == ("text-lg",)


def test_unknown_edges_fall_back_to_all() -> None:
    assert MARGINS.class_names({"length": 2, "edges": ["nope"]}) == ["m-2"]
    assert MARGINS.class_names({"length": 2, "edges": ["top"]}, HOVER) == ["hover:mt-2"]


@pytest.mark.parametrize(
    ("operation", "values", "expected"),
    [
        (MARGINS, {"length": "wide"}, ["m-4"]),
        (MARGINS, {"length": "3"}, ["m-3"]),
        (PADDING, {"length": [2]}, ["p-4"]),
        (OPACITY, {"value": "half"}, ["opacity-100"]),
        (OPACITY, {"value": "40"}, ["opacity-40"]),
        (BORDER, {"width": "thick"}, ["border"]),
    ],
)
def test_unreadable_numbers_in_parameter_bag_fall_back_to_defaults(operation, values, expected) -> None:
    assert list(stack().style(operation, StyleParameters(values)).classes) == expected


def test_unreadable_numbers_in_direct_calls_fall_back_to_defaults() -> None:
    assert stack().margins("wide").classes == ("m-4",)
    assert stack().opacity(float("inf")).classes == ("opacity-100",)


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ({"auto": "false"}, ("m-4",)),
        ({"auto": "true"}, ("m-auto",)),
        ({"auto": "maybe"}, ("m-4",)),
    ],
)
def test_string_booleans_in_margins_bag(values, expected) -> None:
    assert stack().style(MARGINS, values).classes == expected


def test_string_booleans_in_visibility_bag() -> None:
    assert stack().style(VISIBILITY, {"is_hidden": "false"}).classes == ()
    assert stack().style(VISIBILITY, {"is_hidden": "yes"}).classes == ("hidden",)


@pytest.mark.parametrize("color", ["#0af", "[#0af]", "blue-500", "white/25", "brand"])
def test_color_strings_give_one_token_on_every_surface(color) -> None:
    direct = stack().background(color).classes
    bag = stack().style(BACKGROUND, {"color": color}).classes
    builder = ResponsiveBuilder().background(color).classes
    declarative = stack().on(background(color)).classes

    assert direct == bag == builder == declarative
    assert len(direct) == 1


def test_arbitrary_color_strings_are_bracketed() -> None:
    assert stack().background("#0af").classes == ("bg-[#0af]",)
    assert stack().font(color="rgb(0,0,0)").classes == ("text-[rgb(0,0,0)]",)
    assert stack().border(color="brand-500").classes == ("border", "border-brand-500")
    assert stack().shadow(color="black/50").classes == ("shadow-md", "shadow-black/50")
