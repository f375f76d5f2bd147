"""Tests for the TailwindRuntime facade."""

import pytest

from tailwind_runtime import RuntimeOptions, TailwindRuntime
from tailwind_runtime.errors import InvalidArgumentError
from tailwind_runtime.model import PropertyDescriptor, StyleNode

CSS = """
@layer theme {
  :root, :host {
    --spacing: 0.25rem;
    --color-red-500: #ef4444;
    --color-white: #fff;
    --breakpoint-sm: 40rem;
    --breakpoint-md: 768px;
    --breakpoint-xl: 80ch;
  }
}
@layer utilities {
  .m-4 { margin: calc(var(--spacing) * 4); }
  .mt-2 { margin-top: calc(var(--spacing) * 2); }
  .text-red-500 { color: var(--color-red-500); }
  .text-white { color: var(--color-white); }
  .hover\\:text-white { &:hover { @media (hover: hover) { color: var(--color-white); } } }
  .md\\:hover\\:m-4 { @media (width >= 48rem) { &:hover { margin: calc(var(--spacing) * 4); } } }
}
"""


@pytest.fixture()
def runtime() -> TailwindRuntime:
    return TailwindRuntime.from_css(CSS)


# ---------------------------------------------------------------------------
# to_object
# ---------------------------------------------------------------------------


class TestToObject:
    def test_single_class(self, runtime):
        assert runtime.to_object("m-4") == {"margin": "1rem"}

    def test_string_and_list_equivalent(self, runtime):
        assert runtime.to_object("m-4  text-red-500") == runtime.to_object(["m-4", "text-red-500"])

    def test_blank_entries_dropped(self, runtime):
        assert runtime.to_object(["", "  m-4 ", " "]) == {"margin": "1rem"}

    def test_camel_case_keys(self, runtime):
        assert runtime.to_object("mt-2") == {"marginTop": "0.5rem"}

    def test_unknown_class_ignored(self, runtime):
        assert runtime.to_object("m-4 does-not-exist") == {"margin": "1rem"}

    def test_empty_input(self, runtime):
        assert runtime.to_object("") == {}

    def test_stylesheet_order_wins_over_class_order(self, runtime):
        assert runtime.to_object(["text-white", "text-red-500"]) == {"color": "#fff"}
        assert runtime.to_object(["text-red-500", "text-white"]) == {"color": "#fff"}

    def test_output_order_follows_stylesheet(self, runtime):
        assert list(runtime.to_object("text-red-500 m-4")) == ["margin", "color"]


class TestVariants:
    def test_inactive_variant_excluded(self, runtime):
        assert runtime.to_object("text-red-500 hover:text-white") == {"color": "#ef4444"}

    def test_active_variant_overrides(self, runtime):
        result = runtime.to_object("text-red-500 hover:text-white", state=["hover"])
        assert result == {"color": "#fff"}

    def test_chain_requires_all_variants(self, runtime):
        assert runtime.to_object("md:hover:m-4", state=["hover"]) == {}
        assert runtime.to_object("md:hover:m-4", state=["hover", "md"]) == {"margin": "1rem"}

    def test_strict_excludes_unvaried(self, runtime):
        result = runtime.to_object("text-red-500 hover:text-white", state=["hover"], strict=True)
        assert result == {"color": "#fff"}

    def test_strict_rejects_extra_state(self, runtime):
        assert runtime.to_object("hover:text-white", state=["hover", "focus"], strict=True) == {}


# ---------------------------------------------------------------------------
# to_css
# ---------------------------------------------------------------------------


class TestToCSS:
    def test_format(self, runtime):
        assert runtime.to_css("m-4 text-red-500") == "margin: 1rem; color: #ef4444;"

    def test_kebab_case_keys(self, runtime):
        assert runtime.to_css("mt-2") == "margin-top: 0.5rem;"

    def test_same_arguments_as_to_object(self, runtime):
        assert runtime.to_css("hover:text-white", ["hover"], True) == "color: #fff;"

    def test_empty(self, runtime):
        assert runtime.to_css([]) == ";"


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


class TestLookups:
    def test_get_value(self, runtime):
        assert runtime.get_value("--spacing") == "0.25rem"
        assert runtime.get_value("--nope") is None

    def test_get_value_requires_prefix(self, runtime):
        with pytest.raises(InvalidArgumentError):
            runtime.get_value("spacing")

    def test_colors(self, runtime):
        assert dict(runtime.colors) == {"red-500": "#ef4444", "white": "#fff"}

    def test_breakpoints(self, runtime):
        assert list(runtime.breakpoints) == ["sm", "md", "xl"]

    def test_theme_namespace_rejects_prefixed_name(self, runtime):
        with pytest.raises(InvalidArgumentError):
            runtime.theme_namespace("--color")

    def test_find_utility_rule(self, runtime):
        assert runtime.find_utility_rule("m-4") == StyleNode(
            prelude=".m-4", declarations=("margin: calc(var(--spacing) * 4)",)
        )
        assert runtime.find_utility_rule("hover:text-white").prelude == ".hover\\:text-white"
        assert runtime.find_utility_rule("nope") is None


class TestActiveBreakpoints:
    def test_rem_and_px(self, runtime):
        assert runtime.active_breakpoints(700) == ["sm"]
        assert runtime.active_breakpoints(768) == ["sm", "md"]

    def test_below_all(self, runtime):
        assert runtime.active_breakpoints(0) == []

    def test_root_font_size(self):
        runtime = TailwindRuntime.from_css(CSS, RuntimeOptions(root_font_size=10))
        assert runtime.active_breakpoints(400) == ["sm"]

    def test_negative_width(self, runtime):
        with pytest.raises(InvalidArgumentError):
            runtime.active_breakpoints(-1)


# ---------------------------------------------------------------------------
# Explicit collaborators
# ---------------------------------------------------------------------------


class _Rules:
    def __init__(self, *rules):
        self.rules = rules

    def utility_rules(self):
        return iter(self.rules)


class _Store:
    def get_value(self, name):
        return {"--gap": "2px"}.get(name)

    def describe_property(self, name):
        if name == "--tw-x":
            return PropertyDescriptor(name=name, inherits=False)
        return None

    def theme_declaration(self):
        return {"--gap": "2px"}


class TestCollaborators:
    def test_custom_rule_source_and_store(self):
        runtime = TailwindRuntime(
            _Rules(
                StyleNode(prelude=".gap", declarations=("--tw-x: 3", "gap: calc(var(--gap) * 3)")),
                StyleNode(prelude=".other", declarations=("color: red",)),
            ),
            _Store(),
        )
        assert runtime.to_object("gap") == {"gap": "6px"}


# ---------------------------------------------------------------------------
# Values containing semicolons
# ---------------------------------------------------------------------------


class TestSemicolonValues:
    def test_quoted_semicolon_in_arbitrary_content(self):
        runtime = TailwindRuntime.from_css(
            r"""
            @layer utilities {
              .content-\[\'\;\'\] { --tw-content: ';'; content: var(--tw-content); }
            }
            @property --tw-content { syntax: "*"; inherits: false; initial-value: ""; }
            """
        )
        assert runtime.to_object("content-[';']") == {"content": "';'"}

    def test_data_url_background(self):
        runtime = TailwindRuntime.from_css(
            "@layer utilities { .bg-x { background-image: url(data:image/png;base64,AAAA); } }"
        )
        assert runtime.to_object("bg-x") == {"backgroundImage": "url(data:image/png;base64,AAAA)"}


# ---------------------------------------------------------------------------
# Theme snapshots
# ---------------------------------------------------------------------------


class _CountingStore(_Store):
    def __init__(self, theme):
        self.theme = theme
        self.declaration_calls = 0

    def theme_declaration(self):
        self.declaration_calls += 1
        return dict(self.theme)


class TestThemeSnapshot:
    def test_namespace_reads_theme_once(self):
        theme = {f"--color-c{i}": f"#{i:06x}" for i in range(50)}
        store = _CountingStore(theme)
        runtime = TailwindRuntime(_Rules(), store)
        colors = runtime.colors
        assert len(dict(colors)) == 50
        assert colors["c7"] == "#000007"
        assert store.declaration_calls == 1

    def test_active_breakpoints_reads_theme_once(self):
        store = _CountingStore({"--breakpoint-sm": "40rem", "--breakpoint-md": "48rem"})
        runtime = TailwindRuntime(_Rules(), store)
        assert runtime.active_breakpoints(700) == ["sm"]
        assert store.declaration_calls == 1
