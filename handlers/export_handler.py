"""
handlers/export_handler.py
---------------------------
Handles data export commands (CSV, Excel).
Delegates to ExportService.
"""

from telegram import Update
from telegram.ext import ContextTypes

from models.submission import View
from security.auth import manager_only
from services.export_service import ExportService
from utils.logger import get_logger

logger = get_logger(__name__)

USAGE_TEXT = "⚠️ Использование: /{command} [all|favorites|selected]"


def _parse_view(args: list[str]) -> View:
    """Read the optional view argument; raises ValueError for unknown names."""
    if not args:
        return View.ALL
    return View(args[0].lower())


@manager_only
async def export_csv_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /export command - send a view as CSV.
    Optional: /export favorites
    """
    try:
        view = _parse_view(context.args or [])
    except ValueError:
        await update.message.reply_text(USAGE_TEXT.format(command="export"))
        return

    export_service: ExportService = context.bot_data["export_service"]
    try:
        buffer = export_service.export_csv(view)
        await update.message.reply_document(
            document=buffer,
            filename=f"submissions_{view.value}.csv",
            caption=f"📄 Заявки ({view.value}) - CSV",
        )
    except Exception as e:
        logger.error(f"CSV export failed: {e}")
        await update.message.reply_text("❌ Не удалось выгрузить заявки. Попробуйте ещё раз.")


@manager_only
async def export_excel_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /export_excel command - send a view as an Excel workbook.
    Optional: /export_excel selected
    """
    try:
        view = _parse_view(context.args or [])
    except ValueError:
        await update.message.reply_text(USAGE_TEXT.format(command="export_excel"))
        return

    export_service: ExportService = context.bot_data["export_service"]
    try:
        buffer = export_service.export_excel(view)
        await update.message.reply_document(
            document=buffer,
            filename=f"submissions_{view.value}.xlsx",
            caption=f"📊 Заявки ({view.value}) - Excel",
        )
    except Exception as e:
        logger.error(f"Excel export failed: {e}")
        await update.message.reply_text("❌ Не удалось выгрузить заявки. Попробуйте ещё раз.")
