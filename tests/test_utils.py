# tests/test_utils.py
import logging
from vehicles.utils import ROOT_LOGGER, configure_logging, get_logger


def test_module_loggers_are_children_of_service_logger():
    log = get_logger("clients")
    assert log.name == "vehicles-api.clients"
    assert log.parent is logging.getLogger(ROOT_LOGGER)


def test_configure_logging_attaches_one_handler():
    root = configure_logging("debug")
    configure_logging("debug")
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    configure_logging("INFO")
    assert root.level == logging.INFO
