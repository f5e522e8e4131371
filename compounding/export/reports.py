"""
Export functionality for calculator results.
"""
import io
from datetime import datetime

import pandas as pd

from compounding.simulation.calculator import CalculatorResults
from compounding.simulation.projection import round_currency

NBSP = "\u00a0"


def format_nok(value: float) -> str:
    """Compact axis format: 1.2M, 250k or the plain amount."""
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"{value / 1_000:.0f}k"
    return format_amount(value)


def format_amount(value: float) -> str:
    """Whole kroner with Norwegian digit grouping."""
    return f"{round_currency(value):,.0f}".replace(",", NBSP)


def format_nok_full(value: float) -> str:
    """Format a number as kroner, e.g. "1 234 567 kr"."""
    return f"{format_amount(value)} kr"


def format_percentage(value: float) -> str:
    """Format a share as percentage."""
    return f"{value:.0%}"


def _summary_frame(results: CalculatorResults) -> pd.DataFrame:
    projection = results.projection
    params = results.parameters
    rows = [
        ("Profil", params.profile.label),
        ("Avkastning (%)", results.rate),
        ("Månedlig sparing", params.monthly_contribution),
        ("Engangsbeløp", params.lump_sum),
        ("Tidshorisont (år)", params.horizon_years),
        ("Total verdi", projection.final_total),
        ("Investert", projection.final_invested),
        ("Avkastning", projection.final_interest),
        ("Andel avkastning", projection.interest_share),
    ]
    if results.tax is not None:
        rows.extend([
            ("Gevinst", results.tax.gain),
            ("Skatt", results.tax.tax),
            ("Etter skatt", results.tax.after_tax),
        ])
    return pd.DataFrame(rows, columns=["Metrikk", "Verdi"])


def create_excel_report(results: CalculatorResults) -> bytes:
    """
    Create an Excel report with one sheet per view.

    Args:
        results: Calculator results to export

    Returns:
        Excel file as bytes
    """
    output = io.BytesIO()

    with pd.ExcelWriter(output, engine='openpyxl') as writer:
        _summary_frame(results).to_excel(writer, sheet_name='Sammendrag', index=False)
        results.projection.to_dataframe().to_excel(writer, sheet_name='Vekst', index=False)
        results.delays.to_dataframe().to_excel(writer, sheet_name='Vente', index=False)
        results.fund_vs_account.to_dataframe().to_excel(
            writer, sheet_name='Sammenligning', index=False
        )
        results.retirement.to_dataframe().to_excel(writer, sheet_name='Pensjon', index=False)

        milestones_df = pd.DataFrame(
            [
                {"Beløp": m.threshold_amount, "Måneder": m.months_to_reach, "Tid": m.label}
                for m in results.milestones
            ],
            columns=["Beløp", "Måneder", "Tid"]
        )
        milestones_df.to_excel(writer, sheet_name='Milepæler', index=False)

    output.seek(0)
    return output.getvalue()


def create_csv_report(results: CalculatorResults) -> str:
    """
    Create a simple CSV summary report.

    Args:
        results: Calculator results to export

    Returns:
        CSV content as string
    """
    projection = results.projection
    lines = [
        "Rentes rente-kalkulator",
        f"Opprettet: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
        "",
        "=== Sammendrag ===",
    ]
    for _, row in _summary_frame(results).iterrows():
        lines.append(f"{row['Metrikk']},{row['Verdi']}")

    lines.extend(["", "=== Vekst ===", "År,Investert,Total,Avkastning"])
    for sample in projection.series:
        lines.append(f"{sample.year},{sample.invested:.0f},{sample.total:.0f},{sample.interest:.0f}")

    lines.extend(["", "=== Kostnaden av å vente ===", "Start,Sluttverdi,Tapt avkastning"])
    for cost in results.delays.costs:
        lines.append(f"{cost.label},{cost.final_total:.0f},{cost.lost_return:.0f}")

    if results.milestones:
        lines.extend(["", "=== Milepæler ===", "Beløp,Måneder,Tid"])
        for m in results.milestones:
            lines.append(f"{m.threshold_amount:.0f},{m.months_to_reach},{m.label}")

    return "\n".join(lines)
