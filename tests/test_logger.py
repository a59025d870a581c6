import logging

from stewartplatform.logger import Logger


def test_logger_is_shared():
    assert Logger() is Logger()


def test_component_loggers_share_the_file_handler():
    geometry_log = Logger().setup_logger('Geometry')
    solver_log = Logger().setup_logger('Solver')

    assert geometry_log.name.startswith('StewartPlatform Geometry')
    assert len(geometry_log.name) == 32
    assert geometry_log.level == logging.INFO
    assert Logger().logging_file_handler in geometry_log.handlers
    assert Logger().logging_file_handler in solver_log.handlers


def test_console_handler_is_opt_in():
    quiet = Logger().setup_logger('QuietComponent')
    assert Logger().logging_stream_handler not in quiet.handlers

    loud = Logger().setup_logger('LoudComponent', enable_stream_handler=True)
    assert Logger().logging_stream_handler in loud.handlers
