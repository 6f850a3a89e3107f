"""Mini README: FastAPI-powered entry form for Maintenance Maker.

Structure:
    * create_application - application factory wiring routes and templates.
    * Report session - one in-memory ``ReportSession`` per application.

The interface renders the entry form, the running report table and the
editable title, accepts new entries and removals, and hands the exported
``.xls`` document to the browser as a download. It is a thin layer: every
state change goes through the session and ledger.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Dict, List, Optional

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from ..configuration import MaintenanceMakerSettings, get_settings
from ..export import MEDIA_TYPE, ReportExporter
from ..formatting import Formatter
from ..ledger import EntryRequest, EntryStatus, InvalidEntryError
from ..logging_utils import configure_root_logger, get_logger
from ..session import ReportSession

LOGGER = get_logger(__name__)


def create_application(settings: Optional[MaintenanceMakerSettings] = None) -> FastAPI:
    """Create the FastAPI application with routes and a fresh report session."""

    settings = settings or get_settings()
    configure_root_logger(settings.log_level)
    app = FastAPI(title="Monthly Maintenance Maker", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

    formatter = Formatter.from_settings(settings)
    exporter = ReportExporter(formatter, worksheet_name=settings.worksheet_name)
    session = ReportSession.from_settings(settings)
    app.state.session = session

    def render_dashboard(
        request: Request,
        *,
        errors: Optional[List[str]] = None,
        form: Optional[Dict[str, str]] = None,
        status_code: int = 200,
    ) -> HTMLResponse:
        entries = session.ledger.list_entries()
        form = form or {
            "item": "",
            "month": session.last_period or "",
            "amount": "",
            "deadline": "",
            "status": EntryStatus.PENDING.value,
        }
        LOGGER.debug("Rendering dashboard with %s entries", len(entries))
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "title": session.title,
                "entries": entries,
                "formatter": formatter,
                "total": formatter.amount(session.ledger.total()),
                "month_options": formatter.month_options(date.today()),
                "form": form,
                "statuses": [status.value for status in EntryStatus],
                "errors": errors or [],
            },
            status_code=status_code,
        )

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request) -> HTMLResponse:
        """Render the entry form and the current report."""

        return render_dashboard(request)

    @app.post("/entries", response_class=HTMLResponse)
    async def add_entry(
        request: Request,
        item: str = Form(""),
        month: str = Form(""),
        amount: str = Form(""),
        deadline: str = Form(""),
        status: str = Form(EntryStatus.PENDING.value),
    ) -> Response:
        """Record a new entry; invalid submissions re-render the form with a message."""

        submitted = {
            "item": item,
            "month": month,
            "amount": amount,
            "deadline": deadline,
            "status": status,
        }
        errors: List[str] = []
        entry_request: Optional[EntryRequest] = None
        try:
            entry_request = EntryRequest(item, month, amount, deadline, status)
        except InvalidEntryError as error:
            errors.append(str(error))
        if not month.strip():
            errors.append("Select a bill month.")
        if errors or entry_request is None:
            LOGGER.info("Rejected entry submission: %s", "; ".join(errors))
            return render_dashboard(request, errors=errors, form=submitted, status_code=400)
        session.add_request(entry_request)
        return RedirectResponse("/", status_code=303)

    @app.post("/entries/{entry_id}/delete")
    async def delete_entry(entry_id: str) -> RedirectResponse:
        """Remove an entry; unknown identifiers are ignored."""

        session.remove_entry(entry_id)
        return RedirectResponse("/", status_code=303)

    @app.post("/title")
    async def rename_report(title: str = Form("")) -> RedirectResponse:
        """Replace the report title shown above the table and in the export."""

        session.rename(title)
        return RedirectResponse("/", status_code=303)

    @app.get("/api/entries")
    async def list_entries() -> JSONResponse:
        """Return the current entries, raw and formatted totals, and the title."""

        payload = session.ledger.export_snapshot()
        payload["formatted_total"] = formatter.amount(session.ledger.total())
        payload["title"] = session.title
        return JSONResponse(payload)

    @app.get("/export")
    async def export_report() -> Response:
        """Download the report as a spreadsheet-openable ``.xls`` document."""

        document = session.export(exporter)
        LOGGER.info(
            "Serving export %s with %s entries", settings.export_filename, len(session.ledger)
        )
        return Response(
            content=document,
            media_type=MEDIA_TYPE,
            headers={
                "Content-Disposition": f'attachment; filename="{settings.export_filename}"'
            },
        )

    return app
