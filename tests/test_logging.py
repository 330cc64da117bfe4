import logging

from app.logging_config import APP_HANDLER_NAME, STORE_HANDLER_NAME, STORE_LOGGER_NAME, setup_logging


def _file_handlers(logger, name):
    return [h for h in logger.handlers if h.get_name() == name]


def test_setup_logging_follows_latest_log_dir(tmp_path):
    first, second = tmp_path / "first", tmp_path / "second"

    setup_logging(str(first))
    setup_logging(str(second))

    app_handlers = _file_handlers(logging.getLogger(), APP_HANDLER_NAME)
    store_handlers = _file_handlers(logging.getLogger(STORE_LOGGER_NAME), STORE_HANDLER_NAME)

    assert [h.baseFilename for h in app_handlers] == [str(second / "app.log")]
    assert [h.baseFilename for h in store_handlers] == [str(second / "store.log")]


def test_store_errors_written_to_latest_log_dir(tmp_path):
    first, second = tmp_path / "first", tmp_path / "second"
    setup_logging(str(first))
    setup_logging(str(second))

    logging.getLogger(STORE_LOGGER_NAME).error("STORE_ERROR", extra={"entity": "Category"})

    assert "STORE_ERROR" in (second / "store.log").read_text()
    assert not (first / "store.log").exists()
