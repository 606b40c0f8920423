"""Fixture stubs — wrap corpus snippets into named test cases.

Each stub embeds the snippet verbatim in a raw string literal and calls a
``run_test(name, js)`` entry point that the consuming test suite provides.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TestFixture:
    """One corpus statement, numbered from 1 in corpus order."""

    __test__ = False  # not a pytest test class

    ordinal: int
    snippet: str

    @property
    def name(self) -> str:
        return f"test{self.ordinal}"


@dataclass(frozen=True)
class FixtureTemplate:
    """Text placed before and after a snippet. ``{name}`` is substituted."""

    start: str
    end: str

    def render(self, fixture: TestFixture) -> str:
        return (
            self.start.format(name=fixture.name)
            + fixture.snippet
            + self.end.format(name=fixture.name)
        )


RUST_TEMPLATE = FixtureTemplate(
    start='#[test]\nfn {name}() {{\n    let js = r#"',
    end='"#;\n    run_test("{name}", js);\n}}\n',
)

PYTEST_TEMPLATE = FixtureTemplate(
    start='def {name}():\n    js = r"""',
    end='"""\n    run_test("{name}", js)\n\n\n',
)

TEMPLATES = {
    "rust": RUST_TEMPLATE,
    "pytest": PYTEST_TEMPLATE,
}


def get_template(name: str) -> FixtureTemplate:
    try:
        return TEMPLATES[name]
    except KeyError:
        raise ValueError(
            f"Unknown fixture template '{name}'. Must be one of: {sorted(TEMPLATES)}"
        ) from None
