"""
CLI tests for the non-serving commands.
"""
from zerohour.base.config import ZeroHourConfig, set_config
from zerohour.cli import main, print_banner


def test_scenarios_command(capsys):
    set_config(ZeroHourConfig())
    try:
        assert main(["scenarios"]) == 0
    finally:
        set_config(None)

    out = capsys.readouterr().out
    assert "* cyber_breach_pre_disclosure" in out
    assert "Third Party Exposure Event" in out
    assert "normal → signal_convergence → exposure_window_open → escalation_imminent" in out


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage: zerohour" in capsys.readouterr().out


def test_banner_lists_admin_routes(capsys):
    print_banner("127.0.0.1", 3000)
    out = capsys.readouterr().out
    assert "http://127.0.0.1:3000" in out
    assert "/admin/setScenario" in out
