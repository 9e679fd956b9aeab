"""
Basic example of using the dimkit unit engine.
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from dimkit.unit import (
    as_text,
    cm,
    convert,
    degC,
    degF,
    h,
    inch,
    km,
    m,
    minute,
    mod,
    qrange,
    s,
    μm,
)


def main():
    console = Console()

    # Exact conversions stay rational
    sheet = 1 * inch
    cruise = 54 * km / h
    boiling = 212 * degF
    expansion = 9 * μm / (m * degC)

    t = Table.grid(padding=(0, 2))
    t.add_row("[b]1 inch in cm[/b]: ", as_text(convert(sheet, cm)))
    t.add_row("[b]54 km/h in m/s[/b]: ", as_text(cruise.as_unit(m / s)))
    t.add_row("[b]212 °F in °C[/b]: ", as_text(boiling.as_unit(degC)))
    t.add_row("[b]Glass expansion[/b]: ", as_text(expansion.as_unit(μm / (m * degF))))

    t.add_section()
    elapsed = 1 * h + 3 * minute + 5 * s
    t.add_row("[b]Elapsed[/b]: ", as_text(elapsed.as_unit(s)))
    t.add_row("[b]Elapsed mod 24 s[/b]: ", as_text(mod(elapsed, 24 * s)))
    t.add_row("[b]1 m / 1 cm[/b]: ", as_text((1 * m) / (1 * cm)))

    t.add_section()
    for i, mark in enumerate(qrange(0 * m, 1 * m, 25 * cm)):
        t.add_row(f"[b]Mark {i}[/b]: ", as_text(mark))

    console.print(Panel(t, title="dimkit", padding=(1, 2)))


if __name__ == "__main__":
    main()
