"""Cross-module type aliases."""

from __future__ import annotations

from datetime import date, datetime
from typing import TypeAlias

DateInput: TypeAlias = datetime | date | int | float | str
HashInput: TypeAlias = str | bytes
