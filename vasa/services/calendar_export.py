# File: vasa/services/calendar_export.py
"""
iCalendar export of a planner day.
"""

import datetime
from pathlib import Path
from typing import Iterable, List, Optional, Union

from vasa.core.config_manager import Config
from vasa.models import TimeBlock, parse_iso_date
from vasa.utils.logger import setup_logger

logger = setup_logger(__name__)

ICS_TIMESTAMP_FORMAT = "%Y%m%dT%H%M%S"


class CalendarExporter:
    """Renders one planner day as an .ics document."""

    def __init__(self, prodid: str = Config.CALENDAR_PRODID,
                 description_prefix: str = Config.CALENDAR_DESCRIPTION_PREFIX):
        self.prodid = prodid
        self.description_prefix = description_prefix

    @staticmethod
    def _timestamp(day: datetime.date, minute_of_day: int) -> str:
        """Local (floating) compact timestamp; minute 1440 rolls into the next day."""
        moment = datetime.datetime.combine(day, datetime.time.min) + datetime.timedelta(minutes=minute_of_day)
        return moment.strftime(ICS_TIMESTAMP_FORMAT)

    @staticmethod
    def _escape(text: str) -> str:
        return (
            text.replace('\\', '\\\\')
            .replace(';', '\\;')
            .replace(',', '\\,')
            .replace('\n', '\\n')
        )

    def event_lines(self, day: datetime.date, block: TimeBlock) -> List[str]:
        return [
            "BEGIN:VEVENT",
            f"SUMMARY:{self._escape(block.label)}",
            f"DTSTART:{self._timestamp(day, block.start)}",
            f"DTEND:{self._timestamp(day, block.end)}",
            f"DESCRIPTION:{self._escape(f'{self.description_prefix} - {block.category.value}')}",
            "END:VEVENT",
        ]

    def export_day(self, day: Union[str, datetime.date], blocks: Iterable[TimeBlock]) -> str:
        """Build the calendar text for a day's blocks, in the order given."""
        parsed = parse_iso_date(day)
        if parsed is None:
            raise ValueError(f"Invalid export date: {day!r}")

        lines = ["BEGIN:VCALENDAR", "VERSION:2.0", f"PRODID:{self.prodid}"]
        count = 0
        for block in blocks:
            lines.extend(self.event_lines(parsed, block))
            count += 1
        lines.append("END:VCALENDAR")

        logger.info(f"Exported {count} events for {parsed.isoformat()}")
        return "\r\n".join(lines) + "\r\n"

    @staticmethod
    def file_name(day: Union[str, datetime.date]) -> str:
        return f"planner-{parse_iso_date(day).isoformat()}.ics"

    def write_day(self, day: Union[str, datetime.date], blocks: Iterable[TimeBlock],
                  directory: Optional[Path] = None) -> Path:
        """Export a day and save it as planner-<date>.ics."""
        directory = Path(directory or Config.OUTPUT_DIR)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / self.file_name(day)
        # newline='' keeps the CRLF line endings intact
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(self.export_day(day, blocks))
        logger.info(f"Calendar saved to {path}")
        return path
