import pytest

from iris_matcher import cli, config
from iris_matcher.cli import InteractiveSession, IrisMatcherCLI


def test_session_happy_path(matcher, scripted_input):
    outputs = []
    answers = scripted_input(["Alice", "F0", "n", "Alice", "F0", "n"])

    InteractiveSession(matcher, input_func=answers, output_func=outputs.append).run()

    assert outputs == [
        cli.ENROLLMENT_BANNER,
        ">> Alice's iris code (in binary) = 11110000 recorded",
        cli.RECOGNITION_BANNER,
        "Hamming Distance = 0.00",
        "Access granted for Alice",
        cli.FAREWELL,
    ]
    assert answers.prompts == [
        cli.NAME_PROMPT,
        cli.CODE_PROMPT,
        cli.MORE_DATA_PROMPT,
        cli.NAME_PROMPT,
        cli.CODE_PROMPT,
        cli.MORE_DATA_PROMPT,
    ]


def test_session_reprompts_on_bad_input(matcher, scripted_input):
    outputs = []
    answers = scripted_input(
        ["", "Alice", "zz", "F0", "y", "Bob", "FF", "N", "Carol", "Bob", "G1", "0", "n"]
    )

    InteractiveSession(matcher, input_func=answers, output_func=outputs.append).run()

    assert answers.prompts == [
        cli.NAME_PROMPT,
        cli.EMPTY_NAME_PROMPT,
        cli.CODE_PROMPT,
        cli.INVALID_CODE_PROMPT,
        cli.MORE_DATA_PROMPT,
        cli.NAME_PROMPT,
        cli.CODE_PROMPT,
        cli.MORE_DATA_PROMPT,
        cli.NAME_PROMPT,
        cli.NAME_NOT_FOUND_PROMPT,
        cli.CODE_PROMPT,
        cli.INVALID_CODE_PROMPT,
        cli.MORE_DATA_PROMPT,
    ]
    assert "Hamming Distance = 1.00" in outputs
    assert "Access denied for Bob" in outputs
    assert matcher.store.names() == ["Alice", "Bob"]


def test_any_answer_but_n_continues(matcher, scripted_input):
    outputs = []
    answers = scripted_input(["Alice", "F0", "maybe", "Bob", "FF", " n ", "Bob", "FF", "n"])

    InteractiveSession(matcher, input_func=answers, output_func=outputs.append).run()

    assert matcher.store.names() == ["Alice", "Bob"]
    assert "Access granted for Bob" in outputs


def test_execute_phase_counts_operations(matcher, scripted_input):
    answers = scripted_input(["Alice", "1", "y", "Bob", "2", "n"])
    session = InteractiveSession(matcher, input_func=answers, output_func=lambda _: None)

    assert session.execute_phase(session.enroll_once) == 2


def test_cli_exit_code_zero(scripted_input):
    outputs = []
    app = IrisMatcherCLI(
        input_func=scripted_input(["Alice", "F0", "n", "Alice", "E0", "n"]),
        output_func=outputs.append,
    )

    assert app.run_from_args([]) == 0
    assert "Hamming Distance = 0.13" in outputs
    assert "Access granted for Alice" in outputs


def test_cli_end_of_input_is_fatal(capsys, scripted_input):
    app = IrisMatcherCLI(input_func=scripted_input(["Alice"]), output_func=print)

    assert app.run_from_args(["--log-level", "critical"]) == 1
    assert "Something wrong." in capsys.readouterr().err


def test_cli_unexpected_error_is_fatal(capsys, scripted_input, monkeypatch):
    def explode(self, name, raw_code):
        raise RuntimeError("boom")

    monkeypatch.setattr(cli.IrisMatcher, "enroll", explode)
    app = IrisMatcherCLI(input_func=scripted_input(["Alice", "F0"]), output_func=print)

    assert app.run_from_args(["--log-level", "CRITICAL"]) == 1
    err = capsys.readouterr().err
    assert "Something wrong." in err
    assert "boom" in err


def test_cli_keyboard_interrupt(capsys):
    def interrupt(prompt):
        raise KeyboardInterrupt

    app = IrisMatcherCLI(input_func=interrupt, output_func=lambda _: None)

    assert app.run_from_args(["--log-level", "CRITICAL"]) == 130
    assert "cancelled" in capsys.readouterr().err


@pytest.mark.parametrize(
    "enrolled, presented, shown",
    [("F0", "E0", "0.13"), ("F0", "1", "0.63"), ("FF", "0", "1.00"), ("F0", "F0", "0.00")],
)
def test_distance_ties_round_half_up(matcher, scripted_input, enrolled, presented, shown):
    outputs = []
    answers = scripted_input(["Alice", enrolled, "n", "Alice", presented, "n"])

    InteractiveSession(matcher, input_func=answers, output_func=outputs.append).run()

    assert f"Hamming Distance = {shown}" in outputs


def test_rejected_input_keeps_stderr_quiet(capsys, scripted_input, monkeypatch):
    monkeypatch.setattr(config, "LOG_LEVEL", "WARNING")
    outputs = []
    app = IrisMatcherCLI(
        input_func=scripted_input(
            ["Alice", "zz", "F0", "y", "Alice", "FF", "n", "Carol", "Alice", "G1", "FF", "n"]
        ),
        output_func=outputs.append,
    )

    assert app.run_from_args([]) == 0
    assert capsys.readouterr().err == ""
    assert "Access granted for Alice" in outputs


def test_invalid_log_level_setting_is_reported(capsys, scripted_input, monkeypatch):
    monkeypatch.setattr(config, "LOG_LEVEL", "LOUD")
    monkeypatch.setattr(cli, "DEBUG_MODE", False)
    app = IrisMatcherCLI(input_func=scripted_input([]), output_func=print)

    assert app.run_from_args([]) == 1
    err = capsys.readouterr().err
    assert "Something wrong." in err
    assert "LOG_LEVEL" in err
    assert "Traceback" not in err


def test_log_level_flag_overrides_invalid_setting(scripted_input, monkeypatch):
    monkeypatch.setattr(config, "LOG_LEVEL", "LOUD")
    app = IrisMatcherCLI(
        input_func=scripted_input(["Alice", "F0", "n", "Alice", "F0", "n"]),
        output_func=lambda _: None,
    )

    assert app.run_from_args(["--log-level", "ERROR"]) == 0
