import base64
import json
import logging
from unittest.mock import Mock, patch

import pytest

from app.adapters.internal.cli.main import main
from app.domain.enums import ExitCode

REQUEST_TARGET = "app.adapters.external.coinbase.client.requests.request"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "BUY_FUNDING_CURRENCY",
        "BUY_TARGET_ASSET",
        "BUY_SETTLEMENT_TIMEOUT_SECONDS",
        "BUY_STRICT_PAIR_RESOLUTION",
        "BUY_REQUEST_TIMEOUT_SECONDS",
        "BUY_CONFIG_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("BUY_POLL_INTERVAL_SECONDS", "0.01")


@pytest.fixture(autouse=True)
def restore_root_handlers():
    """main()이 추가한 로깅 핸들러를 테스트마다 정리"""
    root = logging.getLogger()
    original = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in original:
            handler.close()
    root.handlers = original
    root.setLevel(level)


@pytest.fixture
def configured_home(tmp_path):
    config_dir = tmp_path / ".buy-bitcoin"
    config_dir.mkdir()
    (config_dir / "config.json").write_text(
        json.dumps(
            {
                "key": "test_key",
                "secret": base64.b64encode(b"test_secret").decode(),
                "passphrase": "test_passphrase",
                "apiURI": "https://api-public.sandbox.exchange.coinbase.com",
            }
        ),
        encoding="utf-8",
    )
    return tmp_path


def _response(data):
    response = Mock()
    response.ok = True
    response.status_code = 200
    response.json.return_value = data
    return response


def _fake_venue(accounts, products, placed, polls, calls):
    polls = iter(polls)

    def request(method, url, headers=None, data=None, timeout=None):
        calls.append((method, url, data))
        if url.endswith("/accounts"):
            return _response(accounts)
        if url.endswith("/products"):
            return _response(products)
        if method == "POST" and url.endswith("/orders"):
            return _response(placed)
        return _response(next(polls))

    return request


@patch(REQUEST_TARGET)
def test_no_arguments_prints_usage(mock_request, tmp_path, capsys):
    exit_code = main([], home=tmp_path)

    assert exit_code == ExitCode.USAGE
    assert "usage: buy-bitcoin" in capsys.readouterr().err
    mock_request.assert_not_called()


@patch(REQUEST_TARGET)
def test_init_creates_config_without_trading(mock_request, tmp_path, capsys):
    exit_code = main(["--init"], home=tmp_path)

    assert exit_code == ExitCode.OK
    assert (tmp_path / ".buy-bitcoin" / "config.json").exists()
    assert "Created" in capsys.readouterr().out
    mock_request.assert_not_called()


def test_init_with_amount_is_usage_error(tmp_path):
    assert main(["--init", "50"], home=tmp_path) == ExitCode.USAGE


@pytest.mark.parametrize("amount", ["abc", "0", "-5"])
def test_invalid_amount_is_usage_error(amount, tmp_path):
    assert main([amount], home=tmp_path) == ExitCode.USAGE


@patch(REQUEST_TARGET)
def test_missing_configuration(mock_request, tmp_path, capsys):
    exit_code = main(["50"], home=tmp_path)

    assert exit_code == ExitCode.CONFIGURATION
    assert "--init" in capsys.readouterr().err
    mock_request.assert_not_called()


def test_buy_end_to_end(
    configured_home, capsys, accounts_payload, products_payload, order_payload
):
    calls = []
    fake = _fake_venue(
        accounts_payload,
        products_payload,
        order_payload(),
        [
            order_payload(),
            order_payload(
                status="done", settled=True, filled_size="0.00112233", funds="50.00"
            ),
        ],
        calls,
    )

    with patch(REQUEST_TARGET, side_effect=fake):
        exit_code = main(["50"], home=configured_home)

    assert exit_code == ExitCode.OK
    assert "Done, bought 0.00112233 BTC for $50.000" in capsys.readouterr().out

    post = [call for call in calls if call[0] == "POST"]
    assert len(post) == 1
    assert json.loads(post[0][2])["funds"] == "50"
    assert [call[0] for call in calls] == ["GET", "GET", "POST", "GET", "GET"]


def test_buy_insufficient_funds_exit_code(
    configured_home, capsys, accounts_payload, products_payload, order_payload
):
    calls = []
    fake = _fake_venue(accounts_payload, products_payload, order_payload(), [], calls)

    with patch(REQUEST_TARGET, side_effect=fake):
        exit_code = main(["150"], home=configured_home)

    assert exit_code == ExitCode.PRECONDITION
    assert "is less than $150" in capsys.readouterr().err
    assert [call[1].rsplit("/", 1)[-1] for call in calls] == ["accounts"]


def test_buy_cancelled_order_exit_code(
    configured_home, capsys, accounts_payload, products_payload, order_payload
):
    calls = []
    fake = _fake_venue(
        accounts_payload,
        products_payload,
        order_payload(),
        [order_payload(status="cancelled", settled=False)],
        calls,
    )

    with patch(REQUEST_TARGET, side_effect=fake):
        exit_code = main(["50"], home=configured_home)

    assert exit_code == ExitCode.UNEXPECTED_ORDER_STATUS
    assert "unexpected status: cancelled" in capsys.readouterr().err


def test_venue_failure_prints_single_error_line(configured_home, capsys):
    """로그는 파일로만 가고 stderr에는 리포터 메시지 한 줄만 출력"""
    response = Mock()
    response.ok = False
    response.status_code = 401
    response.json.return_value = {"message": "invalid signature"}

    with patch(REQUEST_TARGET, return_value=response):
        exit_code = main(["50"], home=configured_home)

    assert exit_code == ExitCode.VENUE_REQUEST
    captured = capsys.readouterr()
    assert captured.err.splitlines() == [
        "buy-bitcoin: Request to get accounts failed: "
        "Failed to get accounts: invalid signature (HTTP 401)"
    ]
    log_file = configured_home / ".buy-bitcoin" / "logs" / "buy-bitcoin.log"
    assert "Coinbase API Error: invalid signature (HTTP 401)" in log_file.read_text(
        encoding="utf-8"
    )


def test_precondition_failure_prints_message_once(
    configured_home, capsys, accounts_payload, products_payload, order_payload
):
    fake = _fake_venue(accounts_payload, products_payload, order_payload(), [], [])

    with patch(REQUEST_TARGET, side_effect=fake):
        exit_code = main(["150"], home=configured_home)

    assert exit_code == ExitCode.PRECONDITION
    err_lines = capsys.readouterr().err.splitlines()
    assert err_lines == ["buy-bitcoin: Available balance ($100.00) is less than $150"]


def test_verbose_logs_to_stderr(
    configured_home, capsys, accounts_payload, products_payload, order_payload
):
    fake = _fake_venue(accounts_payload, products_payload, order_payload(), [], [])

    with patch(REQUEST_TARGET, side_effect=fake):
        exit_code = main(["--verbose", "150"], home=configured_home)

    assert exit_code == ExitCode.PRECONDITION
    err = capsys.readouterr().err
    assert "ERROR - Market buy failed" in err
    assert "buy-bitcoin: Available balance ($100.00) is less than $150" in (
        err.splitlines()
    )
