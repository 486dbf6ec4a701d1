from __future__ import annotations

from typing import Any, List, Optional, Sequence, Union

from xlsxwriter import Workbook

from suffixsplit.common.domain import Domain
from suffixsplit.common.errors import DomainInvalid
from suffixsplit.common.rule import DEFAULT_RULE, Rule
from suffixsplit.reporting.format_manager import FormatManager

RESOLVED_HEADERS = ["Host", "Subdomain", "Domain", "Suffix", "Rule", "Private"]
REJECTED_HEADERS = ["Host", "Error"]


def _cell(value: Optional[str]) -> str:
    return value if value is not None else ""


class ResolutionReport:
    """
    Collects resolution outcomes and writes them to an xlsx workbook with a
    "Resolved" and a "Rejected" table sheet.
    """

    def __init__(self, output_file: str, *, table_style: str = "Table Style Medium 9"):
        self.output_file = output_file
        self._table_style = table_style
        self._workbook = Workbook(output_file)
        self._formats = FormatManager(self._workbook)
        self._resolved: List[List[Any]] = []
        self._rejected: List[List[Any]] = []

    @property
    def resolved_rows(self) -> List[List[Any]]:
        return self._resolved

    @property
    def rejected_rows(self) -> List[List[Any]]:
        return self._rejected

    def add(self, host: str, outcome: Union[Domain, DomainInvalid], rule: Optional[Rule] = None) -> None:
        if isinstance(outcome, DomainInvalid):
            self._rejected.append([host, str(outcome)])
            return

        rule = rule or DEFAULT_RULE
        self._resolved.append([
            host,
            _cell(outcome.trd),
            _cell(outcome.domain),
            _cell(outcome.tld),
            rule.text,
            "yes" if rule.private else "no",
        ])

    def _write_sheet(self, sheet_name: str, headers: Sequence[str], rows: List[List[Any]], table_name: str,
                     body_format) -> None:
        fm = self._formats
        sheet = self._workbook.add_worksheet(sheet_name)

        for c_index, value in enumerate(headers):
            sheet.write_string(0, c_index, value, fm.header_format)

        for r_index, row in enumerate(rows, start=1):
            for c_index, value in enumerate(row):
                sheet.write_string(r_index, c_index, str(value), body_format)

        if rows:
            sheet.add_table(0, 0, len(rows), len(headers) - 1, {
                "columns": [{"header": col} for col in headers],
                "name": table_name,
                "style": self._table_style,
            })

        sheet.autofit()

    def generate(self) -> None:
        fm = self._formats
        self._write_sheet("Resolved", RESOLVED_HEADERS, self._resolved, "Resolved", fm.data_cell_format)
        self._write_sheet("Rejected", REJECTED_HEADERS, self._rejected, "Rejected", fm.error_cell_format)

    def close(self) -> None:
        self._workbook.close()
