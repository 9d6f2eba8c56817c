"""Key-value implementation for the current template."""

from dataclasses import dataclass

from daily_tracker.adapters.kv_records import (
    TEMPLATE_KEY,
    KeyValueRecords,
    dump_template,
    parse_template,
)
from daily_tracker.domain.templates import TemplateEntry
from daily_tracker.services.templates import TemplateRepository


@dataclass
class KeyValueTemplateRepository(TemplateRepository):
    records: KeyValueRecords

    def get_template(self) -> list[TemplateEntry] | None:
        return self.records.load(TEMPLATE_KEY, parse_template)

    def save_template(self, entries: list[TemplateEntry]) -> None:
        self.records.set(TEMPLATE_KEY, dump_template(entries))
