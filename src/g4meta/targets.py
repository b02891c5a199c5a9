"""
Code generation targets.

A target describes the target-specific conventions the descriptor reader and
the name deriver need: which grammar filename variant to prefer and which
extension the generated files carry.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TargetConfig:
    """Configuration for one code generation target."""

    name: str

    # Inserted before the grammar extension to form the preferred variant,
    # e.g. ".GoTarget" turns Foo.g4 into Foo.GoTarget.g4. None disables it.
    variant_infix: str | None = None

    grammar_extension: str = ".g4"

    # Appended to each generated filename
    generated_extension: str = ""

    # Descriptor artifactId that marks the ANTLR build plugin
    plugin_artifact_id: str = "antlr4-maven-plugin"

    # Wildcard matched under the exampleFiles directory
    example_pattern: str = "*"

    def variant_of(self, path: str) -> str | None:
        """Return the variant filename for path, or None if it has none."""
        if not self.variant_infix or not path.endswith(self.grammar_extension):
            return None
        stem = path[: -len(self.grammar_extension)]
        return stem + self.variant_infix + self.grammar_extension


GO = TargetConfig(
    name="go",
    variant_infix=".GoTarget",
    generated_extension=".go",
)

PLAIN = TargetConfig(name="plain")

DEFAULT_TARGET = GO

_TARGETS = {t.name: t for t in (GO, PLAIN)}


def available_targets() -> list[str]:
    return sorted(_TARGETS)


def get_target(name: str) -> TargetConfig:
    """
    Get a target by name.

    Args:
        name: Target name (e.g., "go", "plain")

    Returns:
        The registered TargetConfig

    Raises:
        ValueError: If target not found
    """
    if name not in _TARGETS:
        available = ", ".join(available_targets())
        raise ValueError(f"Unknown target: {name}. Available: {available}")
    return _TARGETS[name]
