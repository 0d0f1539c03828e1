import importlib
import logging

import pytest

import hello
import hello_quiet

EXPECTED = {"statusCode": 200, "body": "Hello from Lambda! (go)"}


@pytest.fixture(params=[hello, hello_quiet], ids=["echo", "quiet"])
def handler_module(request):
    return request.param


@pytest.fixture
def reload_with_log_level(monkeypatch):
    """Reload a handler module as the runtime would load it with the given LOG_LEVEL."""
    reloaded = []

    def _reload(module, level):
        monkeypatch.setenv("LOG_LEVEL", level)
        reloaded.append(module)
        return importlib.reload(module)

    yield _reload

    monkeypatch.delenv("LOG_LEVEL", raising=False)
    for module in reloaded:
        importlib.reload(module)


@pytest.mark.parametrize("event", [None, {}, "", {"foo": "bar"}, [1, 2, 3], 42, {(1, 2): "x"}, object()])
def test_handler_returns_fixed_response(handler_module, event):
    assert handler_module.lambda_handler(event, None) == EXPECTED


def test_payload_does_not_affect_response(handler_module):
    first = handler_module.lambda_handler(None, None)
    second = handler_module.lambda_handler({"foo": "bar"}, object())
    assert first == second == EXPECTED


def test_each_call_returns_a_new_record(handler_module):
    resp = handler_module.lambda_handler(None, None)
    resp["body"] = "changed"
    assert handler_module.lambda_handler(None, None) == EXPECTED


def test_echo_handler_logs_greeting_and_event(caplog):
    caplog.set_level(logging.INFO)
    hello.lambda_handler({"foo": "bar"}, None)
    assert caplog.messages == ["hello from lambda", 'event {"foo":"bar"}']


def test_echo_handler_logs_absent_event_as_null(caplog):
    caplog.set_level(logging.INFO)
    hello.lambda_handler(None, None)
    assert caplog.messages[-1] == "event null"


def test_echo_handler_falls_back_to_repr_for_non_json_keys(caplog):
    caplog.set_level(logging.INFO)
    hello.lambda_handler({(1, 2): "x"}, None)
    assert caplog.messages[-1] == "event {(1, 2): 'x'}"


def test_quiet_handler_logs_greeting_only(caplog):
    caplog.set_level(logging.INFO)
    hello_quiet.lambda_handler({"foo": "bar"}, None)
    assert caplog.messages == ["hello from lambda"]


def test_unknown_log_level_falls_back_to_info(handler_module, reload_with_log_level):
    module = reload_with_log_level(handler_module, "verbose")
    assert logging.getLogger().level == logging.INFO
    assert module.lambda_handler({"foo": "bar"}, None) == EXPECTED


def test_warning_log_level_suppresses_greeting(handler_module, reload_with_log_level, caplog):
    module = reload_with_log_level(handler_module, "WARNING")
    assert logging.getLogger().level == logging.WARNING
    assert module.lambda_handler({"foo": "bar"}, None) == EXPECTED
    assert caplog.messages == []
