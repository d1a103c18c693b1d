"""Static configuration for the activity engine."""
from __future__ import annotations

import re
from datetime import date

# Spreadsheet serial dates count days from this epoch (1900 date system).
SERIAL_DATE_EPOCH = date(1899, 12, 30)

ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
MONTH_KEY = re.compile(r"^(\d{4})-(\d{2})$")

UNKNOWN_INSTITUTION = "Tidak diketahui"
UNCLASSIFIED_LEVEL = ""

DEFAULT_SAMPLE_LIMIT = 10

DISPLAY_DATE_FORMAT = "%d/%m/%Y"
OPEN_END_DISPLAY = "-"
MONTH_LABEL_FORMAT = "%b %Y"

SEMESTER_MONTHS = {
    1: (1, 6),
    2: (7, 12),
}

MONTHLY_CSV_HEADERS = ("Bulan (YYYY-MM)", "Jumlah_Aktif")
