from bson import json_util
from typing import List
from index_audit.config.config import REPORT_WIDTH
from index_audit.models import AuditReport, Classification, CollectionAuditRecord

def _format_key_spec(key_spec: dict) -> str:
    return json_util.dumps(key_spec, separators=(",", ":"))

def render_record(record: CollectionAuditRecord) -> List[str]:
    lines = [f"Collection: {record.collection_name} [{record.outcome.value}]"]
    if record.note:
        lines.append(f"  ! {record.note}")
        return lines

    for index in record.indexes:
        descriptor = index.descriptor
        marker = "[TEXT]" if index.classification == Classification.DISALLOWED_TEXT else "[ok]  "
        line = f"  {marker} {descriptor.name}: {_format_key_spec(descriptor.key_spec)}"
        if index.classification == Classification.DISALLOWED_TEXT and descriptor.default_language:
            line += f" (language: {descriptor.default_language})"
        lines.append(line)

    for name in record.dropped_names:
        lines.append(f"  dropped: {name}")
    for name in record.skipped_names:
        lines.append(f"  would drop: {name}")
    for error in record.drop_errors:
        lines.append(f"  ! error dropping {error.name}: {error.message}")
    return lines

def render_report(report: AuditReport) -> List[str]:
    """Human-readable summary of a run, one entry per line."""
    separator = "=" * REPORT_WIDTH
    lines = [separator]
    for record in report.records:
        lines.extend(render_record(record))
    lines.append(separator)

    if report.connection_error is not None:
        lines.append(f"Connection failed: {report.connection_error}")
        if not report.records:
            return lines

    lines.append(
        f"Collections: {len(report.records)}, indexes: {report.total_indexes}, "
        f"text indexes: {report.total_disallowed}, dropped: {report.total_dropped}, "
        f"errors: {report.total_errors}"
    )
    partial = [
        record.collection_name for record in report.records
        if record.drop_errors or record.note
    ]
    if partial:
        lines.append(f"Needs follow-up: {', '.join(partial)}")
    if report.dry_run:
        lines.append("Dry run, no index was dropped.")
    elif report.succeeded:
        lines.append("Done! Restart your server now.")
        lines.append("The server will recreate indexes without language override.")
    return lines
