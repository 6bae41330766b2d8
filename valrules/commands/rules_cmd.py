"""Rule listing and explanation commands."""

from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

from ..messages import DEFAULT_MESSAGES
from ..schema import RULE_FACTORIES


def run_list_rules() -> int:
    """Print every rule usable from a schema file."""
    console = Console()

    table = Table(title="Registered rules")
    table.add_column("Rule", style="bold", no_wrap=True)
    table.add_column("Params")
    table.add_column("Default message", style="dim")

    for name in sorted(RULE_FACTORIES):
        entry = RULE_FACTORIES[name]
        params = ", ".join(entry.params + tuple(f"{p}?" for p in entry.optional_params))
        table.add_row(name, params or "-", DEFAULT_MESSAGES.get(name, ""))

    console.print(table)
    return 0


def run_explain(rule_name: str) -> int:
    """Explain a single rule.

    Args:
        rule_name: Rule name as used in schema files (e.g. startsWith)

    Returns:
        Exit code (0 = success, 1 = rule not found)
    """
    console = Console()

    entry = RULE_FACTORIES.get(rule_name.strip())
    if entry is None:
        console.print(f"Unknown rule: {rule_name}", style="bold red")
        console.print()
        console.print("Known rules:", style="bold")
        for name in sorted(RULE_FACTORIES):
            console.print(f"  - {name}")
        return 1

    explanation = f"# {entry.name}\n\n{entry.description}\n"
    if entry.params or entry.optional_params:
        explanation += "\n## Params\n\n"
        for p in entry.params:
            explanation += f"- `{p}` (required)\n"
        for p in entry.optional_params:
            explanation += f"- `{p}` (optional)\n"
    if entry.name in DEFAULT_MESSAGES:
        explanation += f"\n**Default message**: `{DEFAULT_MESSAGES[entry.name]}`\n"

    console.print(Markdown(explanation))
    return 0
