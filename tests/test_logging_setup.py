import logging

from beam_load.services.logging_setup import LOGGER_NAME, setup_logging


def test_setup_logging_is_idempotent(tmp_path):
    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers)
    for h in saved:
        logger.removeHandler(h)
    try:
        lg = setup_logging(log_dir=str(tmp_path), log_name="t.log")
        n = len(lg.handlers)
        assert n == 2
        assert setup_logging(log_dir=str(tmp_path), log_name="t.log") is lg
        assert len(lg.handlers) == n

        logging.getLogger("beam_load.engine.analysis").info("hola")
        for h in lg.handlers:
            h.flush()
        assert "hola" in (tmp_path / "t.log").read_text(encoding="utf-8")
    finally:
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()
        for h in saved:
            logger.addHandler(h)
