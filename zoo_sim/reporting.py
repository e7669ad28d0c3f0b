"""
Zoo Simulation — Spreadsheet Report
Exports the day ledger and event history of a game to an .xlsx workbook.
"""

from typing import List, Tuple
import logging

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill, Border, Side
from openpyxl.utils import get_column_letter

from .core.simulation import ZooSimulation

logger = logging.getLogger(__name__)

HEADER_FILL = PatternFill(start_color="1F4E79", end_color="1F4E79", fill_type="solid")
HEADER_FONT = Font(bold=True, color="FFFFFF")
LOSS_FILL = PatternFill(start_color="FFC7CE", end_color="FFC7CE", fill_type="solid")
THIN_BORDER = Border(
    left=Side(style='thin'), right=Side(style='thin'),
    top=Side(style='thin'), bottom=Side(style='thin')
)

LEDGER_COLUMNS: List[Tuple[str, str]] = [
    ("Day", "day"),
    ("Money", "money"),
    ("Food", "food"),
    ("Popularity", "popularity"),
    ("Debt", "debt"),
    ("Loan Payment", "loan_payment"),
    ("Payroll", "payroll"),
    ("Revenue", "revenue"),
    ("Animals", "total_animals"),
    ("Infected", "infected"),
    ("New Infections", "new_infections"),
    ("Cured by Vets", "cured_by_vets"),
    ("Disease Deaths", "disease_deaths"),
    ("Old Age Deaths", "old_age_deaths"),
    ("Starved", "starvation_deaths"),
    ("Dirty Pens", "dirty_pens"),
    ("Outbreaks", "outbreaks"),
]


def _write_headers(ws, row: int, headers: List[str]):
    for col, header in enumerate(headers, 1):
        cell = ws.cell(row=row, column=col, value=header)
        cell.fill = HEADER_FILL
        cell.font = HEADER_FONT
        cell.border = THIN_BORDER


def build_workbook(sim: ZooSimulation) -> Workbook:
    """Create a workbook with a Ledger sheet and an Events sheet."""
    wb = Workbook()

    # ===== SHEET 1: Ledger =====
    ws1 = wb.active
    ws1.title = "Ledger"

    ws1['A1'] = f"{sim.name} - Day Ledger"
    ws1['A1'].font = Font(bold=True, size=14)
    outcome = sim.state.outcome.name if sim.state.outcome else "IN PROGRESS"
    ws1['A2'] = f"Outcome: {outcome}"
    if sim.state.end_reason:
        ws1['B2'] = sim.state.end_reason

    _write_headers(ws1, 4, [h for h, _ in LEDGER_COLUMNS])

    for row, summary in enumerate(sim.metrics.to_rows(), 5):
        for col, (_, key) in enumerate(LEDGER_COLUMNS, 1):
            cell = ws1.cell(row=row, column=col, value=summary[key])
            cell.border = THIN_BORDER
            if key == "money" and summary[key] < 0:
                cell.fill = LOSS_FILL

    for col in range(1, len(LEDGER_COLUMNS) + 1):
        ws1.column_dimensions[get_column_letter(col)].width = 14
    ws1.freeze_panes = "A5"

    # ===== SHEET 2: Events =====
    ws2 = wb.create_sheet("Events")
    _write_headers(ws2, 1, ["Day", "Type", "Message"])

    for row, entry in enumerate(sim.events.history, 2):
        ws2.cell(row=row, column=1, value=entry.day)
        ws2.cell(row=row, column=2, value=entry.event_type.name)
        ws2.cell(row=row, column=3, value=entry.message)

    ws2.column_dimensions['A'].width = 8
    ws2.column_dimensions['B'].width = 20
    ws2.column_dimensions['C'].width = 60

    return wb


def export_workbook(sim: ZooSimulation, output_path: str):
    """Write the ledger workbook to output_path."""
    wb = build_workbook(sim)
    wb.save(output_path)
    logger.info(f"Ledger workbook saved to {output_path}")
