from pathlib import Path
from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side

from core.reporting.contexts import UtilizationWorkbookContext
from core.services.analytics.service import OVERUTILIZED_ABOVE, UNDERUTILIZED_BELOW


class UtilizationWorkbookRenderer:
    def render(self, ctx: UtilizationWorkbookContext, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb = Workbook()

        header_font = Font(bold=True)
        title_font = Font(bold=True, size=14)
        center = Alignment(horizontal="center")
        thin_border = Border(
            left=Side(style="thin"),
            right=Side(style="thin"),
            top=Side(style="thin"),
            bottom=Side(style="thin"),
        )
        header_fill = PatternFill("solid", fgColor="DDDDDD")
        over_fill = PatternFill("solid", fgColor="FFCCCC")
        under_fill = PatternFill("solid", fgColor="FFF2CC")

        def header_row(sheet, headers):
            for col_index, h in enumerate(headers, start=1):
                cell = sheet.cell(row=1, column=col_index, value=h)
                cell.font = header_font
                cell.alignment = center
                cell.fill = header_fill
                cell.border = thin_border

        # ---------------- Summary ----------------
        ws = wb.active
        ws.title = "Summary"

        ws["A1"] = f"Team utilisation - {ctx.as_of.isoformat()}"
        ws["A1"].font = title_font

        row = 3

        def kv(key, value):
            nonlocal row
            ws[f"A{row}"] = key
            ws[f"B{row}"] = value
            ws[f"A{row}"].font = header_font
            ws[f"A{row}"].border = thin_border
            ws[f"B{row}"].border = thin_border
            row += 1

        summary = ctx.report.aggregated
        kv("Engineers", summary.total_engineers)
        kv("Average utilisation (%)", summary.average_utilization)
        kv("Total capacity (%)", summary.total_capacity)
        kv("Total allocated (%)", summary.total_allocated)
        kv(f"Over-utilised (> {OVERUTILIZED_ABOVE}%)", summary.overutilized_count)
        kv(f"Under-utilised (< {UNDERUTILIZED_BELOW}%)", summary.underutilized_count)

        ws.column_dimensions["A"].width = 30
        ws.column_dimensions["B"].width = 18

        # ---------------- Engineers ----------------
        ws_eng = wb.create_sheet("Engineers")
        header_row(ws_eng, ["Engineer ID", "Name", "Email", "Max (%)", "Allocated (%)", "Available (%)", "Utilisation (%)"])

        for r, e in enumerate(ctx.report.engineers, start=2):
            values = [
                e.engineer_id,
                e.name,
                e.email,
                e.max_capacity,
                e.allocated_capacity,
                e.available_capacity,
                round(float(e.utilization_percent), 1),
            ]
            for c, v in enumerate(values, 1):
                cell = ws_eng.cell(r, c, v)
                cell.border = thin_border
            if e.utilization_percent > OVERUTILIZED_ABOVE:
                ws_eng.cell(r, 7).fill = over_fill
            elif e.utilization_percent < UNDERUTILIZED_BELOW:
                ws_eng.cell(r, 7).fill = under_fill

        ws_eng.column_dimensions["A"].width = 36
        ws_eng.column_dimensions["B"].width = 28
        ws_eng.column_dimensions["C"].width = 30
        for col_letter in ("D", "E", "F", "G"):
            ws_eng.column_dimensions[col_letter].width = 15

        # ---------------- Skills ----------------
        ws_skills = wb.create_sheet("Skills")
        header_row(ws_skills, ["Skill", "Engineers"])
        for r, s in enumerate(ctx.skills, start=2):
            ws_skills.cell(r, 1, s.skill).border = thin_border
            ws_skills.cell(r, 2, s.count).border = thin_border

        ws_skills.column_dimensions["A"].width = 28
        ws_skills.column_dimensions["B"].width = 12

        wb.save(output_path)
        return output_path
