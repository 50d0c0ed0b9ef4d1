from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch):
    """Run each test from an empty working directory with no rs_clean env overrides."""

    workdir = tmp_path_factory.mktemp("work")
    monkeypatch.chdir(workdir)
    monkeypatch.delenv("RS_CLEAN_SETTINGS_FILE", raising=False)
    monkeypatch.delenv("RS_CLEAN_LOGGING__LEVEL", raising=False)
    monkeypatch.delenv("RS_CLEAN_LOGGING__LOG_FILE", raising=False)

    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    yield workdir
    for handler in list(root_logger.handlers):
        if handler not in saved_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in saved_handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)
