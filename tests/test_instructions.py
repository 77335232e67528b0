import pytest

from apppop_bootstrap.instructions import next_steps, show_final_instructions
from apppop_bootstrap.models import SetupOptions

NONE_SELECTED = SetupOptions(
    include_supabase=False,
    include_analytics=False,
    include_theme_system=False,
    include_error_tracking=False,
)


def test_next_steps_with_everything_selected() -> None:
    text = "\n".join(next_steps("./demo", SetupOptions()))

    assert "cd ./demo" in text
    assert "3. Configure Authentication:" in text
    assert "4. Configure Theme System:" in text
    assert "emerald (Nature-inspired green)" in text
    assert "5. Run [cyan]npm run dev[/cyan]" in text
    assert "6. Set up additional services:" in text
    assert "Sentry for error monitoring" in text


def test_next_steps_are_numbered_consecutively_when_features_are_skipped() -> None:
    lines = next_steps("./demo", NONE_SELECTED)

    assert [line.split(".")[0] for line in lines] == ["1", "2", "3"]
    assert "Authentication" not in "\n".join(lines)
    assert "Theme" not in "\n".join(lines)


def test_next_steps_lists_only_selected_services() -> None:
    text = "\n".join(next_steps("./demo", SetupOptions(include_error_tracking=False)))

    assert "Google Tag Manager" in text
    assert "Sentry" not in text


def test_show_final_instructions_conditions_panels(capsys: pytest.CaptureFixture[str]) -> None:
    show_final_instructions("./demo", SetupOptions(include_supabase=False))

    out = capsys.readouterr().out
    assert "Project setup complete" in out
    assert "Theming Quick Reference" in out
    assert "Important Security Reminder" not in out
