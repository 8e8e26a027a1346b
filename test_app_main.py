from app_main import run_console
from exam_app.ui.console_io import ConsoleIO


def _console(*lines):
    inputs = iter(lines)
    outputs: list[str] = []
    return ConsoleIO(input_func=lambda prompt: next(inputs), output_func=outputs.append), outputs


def test_full_session_scores_two_true_false_questions():
    console, outputs = _console(
        "1", "10", "2",
        "1", "Earth is round", "5", "1",
        "1", "Sun is cold", "10", "2",
        "y",
        "1", "1",
    )

    run_console(console)

    assert "\nQ: Earth is round\n1. True / 2. False" in outputs
    assert outputs[-1].startswith("\nExam Results:\nScore: 5/15 (33%)\nTime taken: 0m ")


def test_practical_session_gives_feedback():
    console, outputs = _console(
        "2", "5", "1",
        "Pick the second", "10", "3", "a", "b", "c", "2",
        "y",
        "2",
    )

    run_console(console)

    assert "Correct!" in outputs
    assert "Score: 10/10 (100%)" in outputs[-1]


def test_declining_to_start_skips_the_exam():
    console, outputs = _console("1", "10", "1", "1", "Q", "1", "1", "n")

    run_console(console)

    assert not any("Exam Results" in line for line in outputs)


def test_huge_duration_is_reprompted_instead_of_crashing():
    console, outputs = _console(
        "1", "10000000000", "10", "1",
        "1", "Q", "1", "1",
        "y",
        "1",
    )

    run_console(console)

    assert "Invalid input. Please try again." in outputs
    assert "Duration: 10 minutes" in outputs
    assert "Score: 1/1 (100%)" in outputs[-1]
