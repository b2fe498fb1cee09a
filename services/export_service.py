"""
services/export_service.py
---------------------------
Generates CSV and Excel exports of submissions for the manager.
"""

import io

import pandas as pd

from models.submission import View
from services.submission_service import SubmissionService
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = ["№", "Дата", "Текст", "Фото", "Избранное", "Отбор"]


class ExportService:
    """Generates downloadable submission lists in CSV and Excel formats."""

    def __init__(self, submissions: SubmissionService):
        self.submissions = submissions

    def _frame(self, view: View) -> pd.DataFrame:
        rows = [
            {
                "№": s.id,
                "Дата": s.created_at.strftime("%Y-%m-%d %H:%M"),
                "Текст": s.text,
                "Фото": s.photo or "",
                "Избранное": "да" if s.favorite else "",
                "Отбор": "да" if s.selected else "",
            }
            for s in self.submissions.list_view(view)
        ]
        return pd.DataFrame(rows, columns=_COLUMNS)

    def export_csv(self, view: View = View.ALL) -> io.BytesIO:
        """
        Export a view as a CSV file.

        Returns:
            A BytesIO buffer containing the CSV data (UTF-8 with BOM for Excel).
        """
        df = self._frame(view)
        buffer = io.BytesIO()
        df.to_csv(buffer, index=False, encoding="utf-8-sig")
        buffer.seek(0)
        logger.info(f"Exported {len(df)} submissions ({view.value}) as CSV")
        return buffer

    def export_excel(self, view: View = View.ALL) -> io.BytesIO:
        """
        Export a view as an Excel (.xlsx) file with a summary sheet.

        Returns:
            A BytesIO buffer containing the workbook.
        """
        df = self._frame(view)
        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name="Заявки", index=False)

            summary = pd.DataFrame(
                {
                    "Показатель": ["Всего", "С фото", "Избранное", "Отбор"],
                    "Количество": [
                        len(df),
                        int((df["Фото"] != "").sum()),
                        int((df["Избранное"] != "").sum()),
                        int((df["Отбор"] != "").sum()),
                    ],
                }
            )
            summary.to_excel(writer, sheet_name="Итого", index=False)

        buffer.seek(0)
        logger.info(f"Exported {len(df)} submissions ({view.value}) as Excel")
        return buffer
