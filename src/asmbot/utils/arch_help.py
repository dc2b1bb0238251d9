from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..arch.resolver import ASSEMBLE_TABLE, DISASSEMBLE_TABLE, Direction, alias_groups

# Theme Colors (Mosaic)
C_BG = "#EBEEEE"
C_TEXT = "#191A1A"
C_ACCENT1 = "#45d3ee" # Cyan
C_ACCENT2 = "#9FBFC5" # Muted Blue
C_ACCENT3 = "#94bfc1" # Teal
C_ACCENT4 = "#fecd91" # Orange


def create_gradient_header(title: str) -> Text:
    text = Text(f" {title} ", style="bold italic")
    # Gradient between Cyan and Blue-Grey
    start_rgb = (69, 211, 238) # #45d3ee
    end_rgb = (159, 191, 197)   # #9FBFC5

    for i in range(len(text)):
        ratio = i / len(text)
        r = int(start_rgb[0] + (end_rgb[0] - start_rgb[0]) * ratio)
        g = int(start_rgb[1] + (end_rgb[1] - start_rgb[1]) * ratio)
        b = int(start_rgb[2] + (end_rgb[2] - start_rgb[2]) * ratio)
        text.stylize(f"#{r:02x}{g:02x}{b:02x}", i, i + 1)
    return text


def build_arch_table() -> Table:
    """One row per alias group, with the engine mode used in each direction."""
    table = Table(
        title="Supported Architectures",
        title_style=f"bold {C_ACCENT3}",
        header_style=f"bold {C_ACCENT1}",
        box=None,
        row_styles=["", "on #f5f7f7"],
        expand=True,
    )
    table.add_column("Names", style=f"bold {C_ACCENT1}", no_wrap=True)
    table.add_column("Family", style=C_TEXT)
    table.add_column("Keystone mode", style=f"bold {C_ACCENT4}")
    table.add_column("Capstone mode", style=C_ACCENT3)

    groups = alias_groups(Direction.ASSEMBLE)
    for extra in alias_groups(Direction.DISASSEMBLE):
        if extra not in groups:
            groups.append(extra)

    for names in groups:
        ks_spec = ASSEMBLE_TABLE.get(names[0])
        cs_spec = DISASSEMBLE_TABLE.get(names[0])
        family = (ks_spec or cs_spec).family
        table.add_row(
            "/".join(names),
            family,
            f"{ks_spec.mode:#x}" if ks_spec else "-",
            f"{cs_spec.mode:#x}" if cs_spec else "-",
        )
    return table


def display_arch_help(console: Console = None):
    console = console or Console()

    main_panel = Panel(
        build_arch_table(),
        title=create_gradient_header("ASMBOT ARCHITECTURE REFERENCE"),
        title_align="left",
        border_style=C_ACCENT2,
        padding=(1, 2),
        style=f"{C_TEXT} on {C_BG}",
    )

    console.print("\n")
    console.print(main_panel)
