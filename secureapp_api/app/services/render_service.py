"""
Response rendering in JSON, plain text or HTML.

Handlers build a *view* describing what to show (a list of customers,
a single customer, search results, a command answer or the command
table) and pass it to :func:`render` together with the ``format``
query value.  Each view knows how to express itself in the three
formats; :func:`render` picks the strategy from ``RENDERERS`` and
returns the body with its media type.

Unrecognised formats fall back to JSON without error.  Strings taken
from records or from the request are HTML-escaped in HTML output.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from html import escape
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response

from secureapp_api.app.schemas.command import CommandResult
from secureapp_api.app.schemas.customer import Customer, CustomerStatus

Link = Tuple[str, str]

STATUS_COLORS = {
    CustomerStatus.ACTIVE: "green",
    CustomerStatus.INACTIVE: "red",
}


class OutputFormat(str, Enum):
    JSON = "json"
    TEXT = "text"
    HTML = "html"

    @classmethod
    def parse(cls, value: Optional[str]) -> "OutputFormat":
        """Map a ``format`` query value onto an output format.

        ``plain`` is an alias of ``text``.  Missing or unknown values
        select JSON.
        """
        if value == "plain":
            return cls.TEXT
        try:
            return cls(value)
        except ValueError:
            return cls.JSON


def isoformat_z(moment: datetime) -> str:
    """Format ``moment`` as UTC ISO-8601 with milliseconds and a ``Z`` suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# ----------------------------------------------------------------------
# HTML building blocks
# ----------------------------------------------------------------------
def _page(title: str, body: Sequence[str], links: Sequence[Link] = ()) -> str:
    parts = [
        "<!DOCTYPE html>",
        "<html>",
        f"<head><meta charset=\"utf-8\"><title>{escape(title)}</title></head>",
        '<body style="font-family: Arial, sans-serif; padding: 20px;">',
        f"<h2>{escape(title)}</h2>",
        *body,
    ]
    if links:
        anchors = " | ".join(f'<a href="{escape(href)}">{escape(label)}</a>' for href, label in links)
        parts += ["<hr>", f"<p>{anchors}</p>"]
    parts += ["</body>", "</html>", ""]
    return "\n".join(parts)


def _status_cell(status: CustomerStatus) -> str:
    return f'<td style="color: {STATUS_COLORS[status]};">{escape(status.value)}</td>'


def _customer_table(customers: Sequence[Customer], show_status: bool) -> List[str]:
    headers = ["ID", "Name", "Email", "Phone"] + (["Status"] if show_status else [])
    rows = [
        '<table border="1" style="border-collapse: collapse; width: 100%;">',
        '<tr style="background-color: #f2f2f2;">' + "".join(f"<th>{h}</th>" for h in headers) + "</tr>",
    ]
    for customer in customers:
        cells = [
            f"<td>{customer.id}</td>",
            f"<td>{escape(customer.full_name)}</td>",
            f"<td>{escape(customer.email)}</td>",
            f"<td>{escape(customer.phone)}</td>",
        ]
        if show_status:
            cells.append(_status_cell(customer.status))
        rows.append("<tr>" + "".join(cells) + "</tr>")
    rows.append("</table>")
    return rows


def _summary_line(customer: Customer, show_status: bool) -> str:
    line = f"{customer.id}. {customer.full_name} ({customer.email})"
    if show_status:
        line += f" - {customer.status.value}"
    return line


def _format_address(customer: Customer) -> str:
    address = customer.address
    return f"{address.street}, {address.city}, {address.state} {address.zip_code}"


# ----------------------------------------------------------------------
# Views
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class CustomerListView:
    """A list of customers: the full list or a status subset.

    ``heading`` is the text-mode header, ``title`` and ``count_label``
    head the HTML page and ``count_key`` names the size field in JSON.
    """

    customers: Sequence[Customer]
    title: str
    heading: str
    count_label: str
    show_status: bool = True
    count_key: str = "count"
    links: Sequence[Link] = field(default_factory=tuple)

    def to_json(self, timestamp: str) -> Dict[str, Any]:
        return {
            "customers": [customer.to_json() for customer in self.customers],
            self.count_key: len(self.customers),
            "timestamp": timestamp,
        }

    def to_text(self) -> str:
        lines = [f"{self.heading}: {len(self.customers)}", ""]
        lines += [_summary_line(customer, self.show_status) for customer in self.customers]
        return "\n".join(lines) + "\n"

    def to_html(self) -> str:
        body = [f"<p><strong>{escape(self.count_label)}:</strong> {len(self.customers)}</p>"]
        body += _customer_table(self.customers, self.show_status)
        return _page(self.title, body, self.links)


@dataclass(frozen=True)
class SearchView:
    query: str
    results: Sequence[Customer]

    def to_json(self, timestamp: str) -> Dict[str, Any]:
        return {
            "query": self.query,
            "results": [customer.to_json() for customer in self.results],
            "count": len(self.results),
            "timestamp": timestamp,
        }

    def to_text(self) -> str:
        lines = [f'Search Results for "{self.query}": {len(self.results)} found', ""]
        lines += [_summary_line(customer, True) for customer in self.results]
        return "\n".join(lines) + "\n"

    def to_html(self) -> str:
        body = [f"<p><strong>Found:</strong> {len(self.results)} customers</p>"]
        if self.results:
            body += _customer_table(self.results, show_status=True)
        else:
            body.append(f"<p>No customers found matching &quot;{escape(self.query)}&quot;</p>")
        return _page(f'Search Results for "{self.query}"', body, [("/customers", "Back to All Customers")])


@dataclass(frozen=True)
class CustomerDetailView:
    customer: Customer

    def _fields(self) -> List[Tuple[str, str]]:
        customer = self.customer
        return [
            ("Name", customer.full_name),
            ("Email", customer.email),
            ("Phone", customer.phone),
            ("Address", _format_address(customer)),
            ("Date of Birth", customer.date_of_birth),
            ("Customer Since", customer.customer_since),
        ]

    def to_json(self, timestamp: str) -> Dict[str, Any]:
        return {"customer": self.customer.to_json(), "timestamp": timestamp}

    def to_text(self) -> str:
        lines = [f"Customer ID: {self.customer.id}"]
        lines += [f"{label}: {value}" for label, value in self._fields()]
        lines.append(f"Status: {self.customer.status.value}")
        return "\n".join(lines) + "\n"

    def to_html(self) -> str:
        status = self.customer.status
        body = [f"<p><strong>ID:</strong> {self.customer.id}</p>"]
        body += [f"<p><strong>{label}:</strong> {escape(value)}</p>" for label, value in self._fields()]
        body.append(
            f'<p><strong>Status:</strong> <span style="color: {STATUS_COLORS[status]}; '
            f'font-weight: bold;">{escape(status.value)}</span></p>'
        )
        return _page("Customer Details", body, [("/customers", "Back to All Customers")])


@dataclass(frozen=True)
class CommandView:
    result: CommandResult

    def to_json(self, timestamp: str) -> Dict[str, Any]:
        return {"command": self.result.command, "response": self.result.response}

    def to_text(self) -> str:
        return f"{self.result.command}: {self.result.response}\n"

    def to_html(self) -> str:
        body = [
            f"<p><strong>Command:</strong> {escape(self.result.command)}</p>",
            f"<p><strong>Response:</strong> {escape(self.result.response)}</p>",
        ]
        return _page("Command Result", body, [("/commands", "All Commands")])


@dataclass(frozen=True)
class CommandTableView:
    commands: Mapping[str, str]

    def to_json(self, timestamp: str) -> Dict[str, Any]:
        return {"commands": dict(self.commands), "count": len(self.commands), "timestamp": timestamp}

    def to_text(self) -> str:
        lines = [f"Total Commands: {len(self.commands)}", ""]
        lines += [f"{name}: {answer}" for name, answer in self.commands.items()]
        return "\n".join(lines) + "\n"

    def to_html(self) -> str:
        body = [
            f"<p><strong>Total Commands:</strong> {len(self.commands)}</p>",
            '<table border="1" style="border-collapse: collapse; width: 100%;">',
            '<tr style="background-color: #f2f2f2;"><th>Command</th><th>Response</th></tr>',
        ]
        body += [
            f"<tr><td>{escape(name)}</td><td>{escape(answer)}</td></tr>"
            for name, answer in self.commands.items()
        ]
        body.append("</table>")
        return _page("Command Table", body, [("/", "Service Info")])


# ----------------------------------------------------------------------
# Strategy table
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class Rendered:
    body: str
    media_type: str

    def to_response(self) -> Response:
        return Response(content=self.body, media_type=self.media_type)


def _render_json(view: Any, timestamp: str) -> str:
    # Same encoding as JSONResponse so both paths produce identical bytes.
    return json.dumps(view.to_json(timestamp), ensure_ascii=False, allow_nan=False, separators=(",", ":"))


def _render_text(view: Any, timestamp: str) -> str:
    return view.to_text()


def _render_html(view: Any, timestamp: str) -> str:
    return view.to_html()


RENDERERS: Dict[OutputFormat, Tuple[Callable[[Any, str], str], str]] = {
    OutputFormat.JSON: (_render_json, JSONResponse.media_type),
    OutputFormat.TEXT: (_render_text, PlainTextResponse.media_type),
    OutputFormat.HTML: (_render_html, HTMLResponse.media_type),
}


def render(view: Any, output_format: Optional[str] = None, now: Optional[datetime] = None) -> Rendered:
    """Render ``view`` in ``output_format`` and return body and media type."""
    renderer, media_type = RENDERERS[OutputFormat.parse(output_format)]
    timestamp = isoformat_z(now or datetime.now(timezone.utc))
    return Rendered(body=renderer(view, timestamp), media_type=media_type)
