import logging

from paramobject.core.logger import (
    _TargetFilter,
    configure_root_logger,
    get_logger,
    push_target,
    reset_target,
)


def _record() -> logging.LogRecord:
    return logging.LogRecord("paramobject.test", logging.INFO, __file__, 1, "msg", None, None)


def test_target_filter_injects_current_target():
    token = push_target("OrderQuery")
    try:
        record = _record()
        assert _TargetFilter().filter(record) is True
        assert record.target == "OrderQuery"
    finally:
        reset_target(token)

    record = _record()
    _TargetFilter().filter(record)
    assert record.target == "-"


def test_push_target_ignores_empty_values():
    assert push_target(None) is None
    assert push_target("") is None
    reset_target(None)


def test_configure_root_logger_is_idempotent():
    configure_root_logger("INFO")
    configure_root_logger("INFO")

    ours = [
        h
        for h in logging.getLogger().handlers
        if any(isinstance(f, _TargetFilter) for f in h.filters)
    ]
    assert len(ours) == 1


def test_level_applies_to_paramobject_namespace():
    configure_root_logger("DEBUG")
    try:
        assert logging.getLogger("paramobject").level == logging.DEBUG
    finally:
        configure_root_logger("INFO")


def test_get_logger_without_level_keeps_namespace_level():
    configure_root_logger("WARNING")
    try:
        logger = get_logger("paramobject.some_module")
        assert logger.getEffectiveLevel() == logging.WARNING
    finally:
        configure_root_logger("INFO")
