import logging

import pytest

from registry_lib.logging_config import configure_logging, read_log_level


@pytest.fixture
def restore_root_logging():
    handlers = logging.root.handlers[:]
    level = logging.root.level
    yield
    for handler in logging.root.handlers[:]:
        if handler not in handlers:
            logging.root.removeHandler(handler)
    logging.root.setLevel(level)


def test_read_log_level_defaults(tmp_path):
    assert read_log_level(tmp_path / 'missing.yml') == logging.WARNING

    empty = tmp_path / 'empty.yml'
    empty.write_text('', encoding='utf-8')
    assert read_log_level(empty) == logging.WARNING


def test_read_log_level_from_yaml(tmp_path):
    cfg = tmp_path / 'registry_config.yml'
    cfg.write_text('log_level: debug\n', encoding='utf-8')
    assert read_log_level(cfg) == logging.DEBUG


def test_read_log_level_bad_input_falls_back(tmp_path):
    broken = tmp_path / 'broken.yml'
    broken.write_text('log_level: [unclosed\n', encoding='utf-8')
    assert read_log_level(broken) == logging.WARNING

    unknown = tmp_path / 'unknown.yml'
    unknown.write_text('log_level: chatty\n', encoding='utf-8')
    assert read_log_level(unknown, default=logging.ERROR) == logging.ERROR


def test_configure_logging_sets_root_level(tmp_path, restore_root_logging):
    cfg = tmp_path / 'registry_config.yml'
    cfg.write_text('log_level: INFO\n', encoding='utf-8')

    logger = configure_logging(cfg)

    assert logger.name == 'registry_lib.logging_config'
    assert logging.root.level == logging.INFO
    assert len(logging.root.handlers) == 1


def test_container_logs_materialization(container, caplog):
    caplog.set_level(logging.DEBUG, logger='registry_lib.container')
    container.singleton('echo', lambda: 'echo')
    container.get('echo')
    assert 'Materializing singleton: echo' in caplog.text
