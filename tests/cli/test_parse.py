import json


def _lines(res):
    return [l for l in res.stdout.strip().split("\n") if l]


def test_parse_ipv4_with_port(invoke):
    res = invoke(["parse", "10.0.0.1:80"])
    assert res.exit_code == 0
    assert json.loads(_lines(res)[0]) == {
        "input": "10.0.0.1:80",
        "version": 4,
        "address": "10.0.0.1",
        "port": 80,
    }


def test_parse_bracketed_ipv6(invoke):
    res = invoke(["parse", "[2001:db8::1]"])
    assert res.exit_code == 0
    record = json.loads(_lines(res)[0])
    assert record["version"] == 6
    assert record["address"] == "2001:db8::1"
    assert record["port"] is None


def test_parse_many_arguments(invoke):
    res = invoke(["parse", "http://10.0.0.1", "tcp6:[::1]:22"])
    assert res.exit_code == 0
    records = [json.loads(l) for l in _lines(res)]
    assert [r["address"] for r in records] == ["10.0.0.1", "::1"]
    assert [r["port"] for r in records] == [None, 22]


def test_parse_from_stdin(invoke, sample_inputs):
    res = invoke(["parse"], input_data=sample_inputs)
    assert res.exit_code == 0
    records = [json.loads(l) for l in _lines(res)]
    assert len(records) == 2
    assert records[1]["input"] == "  tcp6:[::1]:22  "
    assert records[1]["port"] == 22


def test_parse_reports_errors(invoke):
    res = invoke(["parse", "invalid", "10.0.0.1"])
    assert res.exit_code == 1
    lines = _lines(res)
    assert json.loads(lines[0]) == {
        "input": "invalid",
        "_error": True,
        "message": "Invalid IP address: invalid",
    }
    assert json.loads(lines[1])["address"] == "10.0.0.1"


def test_parse_fail_fast(invoke):
    res = invoke(["parse", "--fail-fast", "[bogus]", "10.0.0.1"])
    assert res.exit_code == 1
    lines = _lines(res)
    assert len(lines) == 1
    assert json.loads(lines[0])["message"] == "Invalid IPv6 address in brackets: bogus"


def test_parse_text_format(invoke):
    res = invoke(["parse", "-f", "text", "tcp6:[::1]:8080", "1.2.3.4", "nope"])
    assert res.exit_code == 1
    assert _lines(res) == ["[::1]:8080", "1.2.3.4", "error: Invalid IP address: nope"]


def test_check_valid(invoke):
    res = invoke(["check", "fe80::1%eth0"])
    assert res.exit_code == 0
    assert res.output == ""


def test_check_invalid(invoke):
    res = invoke(["check", "192.168.1.1:99999"])
    assert res.exit_code == 1
    assert "Error: Invalid IP address: 192.168.1.1:99999" in res.output


def test_debug_logging_from_flag(invoke):
    res = invoke(["--log-level", "DEBUG", "check", "10.0.0.1"])
    assert res.exit_code == 0
    assert "Parsed '10.0.0.1' as 10.0.0.1" in res.output


def test_debug_logging_from_env(invoke, monkeypatch):
    monkeypatch.setenv("IPNORM_LOG", "DEBUG")
    res = invoke(["check", "[::1]:22"])
    assert res.exit_code == 0
    assert "Parsed '[::1]:22' as [::1]:22" in res.output


def test_unknown_log_level(invoke):
    res = invoke(["--log-level", "LOUD", "parse", "1.2.3.4"])
    assert res.exit_code == 2


def test_rejections_logged_at_info(invoke):
    res = invoke(["--log-level", "INFO", "parse", "nope"])
    assert res.exit_code == 1
    assert "INFO - Rejected 'nope': Invalid IP address: nope" in res.output


def test_rejections_silent_at_default_level(invoke):
    res = invoke(["check", "nope"])
    assert res.exit_code == 1
    assert "Rejected" not in res.output
