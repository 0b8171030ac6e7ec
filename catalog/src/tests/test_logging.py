import json
import logging

from catalog.core.logging import (
    ArchiveContextFilter,
    AuditLogger,
    CustomJSONFormatter,
    archive_logger,
    audit_logger,
    setup_logging,
)


def _record(msg="Data modification", **extra):
    record = logging.LogRecord(
        name="audit", level=logging.INFO, pathname=__file__, lineno=1,
        msg=msg, args=(), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_context_filter_sets_defaults():
    record = _record()

    assert ArchiveContextFilter().filter(record) is True
    assert record.event_type == "application"
    assert record.title is None
    assert record.material_type is None


def test_context_filter_keeps_existing_fields():
    record = _record(event_type="data_modification", title="Dune")

    ArchiveContextFilter().filter(record)

    assert record.event_type == "data_modification"
    assert record.title == "Dune"


def test_json_formatter_output():
    formatter = CustomJSONFormatter(fmt='%(timestamp)s %(level)s %(name)s %(message)s')
    record = _record(event_type="data_modification", title="Dune", action="add", count=1)

    payload = json.loads(formatter.format(record))

    assert payload["message"] == "Data modification"
    assert payload["level"] == "INFO"
    assert payload["app_name"] == "Material Archive"
    assert payload["title"] == "Dune"
    assert payload["action"] == "add"
    assert payload["count"] == 1
    assert payload["timestamp"].endswith("Z")


def test_setup_logging_replaces_handlers(tmp_path):
    log_file = tmp_path / "logs" / "archive.log"

    setup_logging(log_level="DEBUG", log_file=str(log_file), enable_json=False)
    setup_logging(log_level="DEBUG", log_file=str(log_file), enable_json=False)

    try:
        assert len(archive_logger.handlers) == 2
        assert len(audit_logger.handlers) == 2
        assert archive_logger.level == logging.DEBUG
        assert log_file.parent.exists()
    finally:
        for handler in archive_logger.handlers:
            handler.close()
        setup_logging()


def test_disabled_audit_logger_is_silent(audit_records):
    AuditLogger(enabled=False).log_data_modification(
        action="add", title="Dune", material_type="book", count=1
    )

    assert audit_records == []


def test_rejected_operation_is_warning(audit_records):
    AuditLogger().log_rejected_operation(action="add", title="Dune", reason="duplicate title")

    assert audit_records[0].levelno == logging.WARNING
    assert audit_records[0].reason == "duplicate title"
