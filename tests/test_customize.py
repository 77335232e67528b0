import json
from pathlib import Path

import pytest

from apppop_bootstrap.customize import (
    customize_content,
    customize_project,
    files_to_update,
    substitute_tokens,
)
from apppop_bootstrap.errors import BootstrapError

from helpers import TEMPLATE_FILES, VALID_PROJECT_ID, supabase_config, write_template


def test_generic_files_replace_lowercase_and_title_tokens() -> None:
    content = "<title>AppPop</title> apppop apppop-web AppPopButton"

    result = customize_content("index.html", content, "TEST-project")

    assert result == "<title>Test-project</title> test-project test-project-web Test-projectButton"


def test_generic_replacement_is_case_sensitive() -> None:
    assert customize_content("README.md", "APPPOP Apppop", "demo") == "APPPOP Apppop"


@pytest.mark.parametrize("name", ["test-project", "my-apppop-app", "AppPop", "apppop", "Pop"])
def test_substitution_is_idempotent(name: str) -> None:
    content = "# AppPop\napppop AppPop apppop/AppPop\n"

    once = customize_content("README.md", content, name)
    twice = customize_content("README.md", once, name)

    assert twice == once


def test_substitution_does_not_nest_when_name_contains_token() -> None:
    result = customize_content("README.md", "apppop and AppPop", "my-apppop-app")

    assert result == "my-apppop-app and My-apppop-app"


def test_protected_value_overlapping_a_token_takes_precedence() -> None:
    assert substitute_tokens("xapppop apppop", {"apppop": "xap", "AppPop": "Xap"}) == "xapppop xap"


def test_substitute_tokens_leaves_text_without_tokens_alone() -> None:
    assert substitute_tokens("nothing here", {"apppop": "demo", "AppPop": "Demo"}) == "nothing here"


def test_capacitor_config_rewrites_app_id_and_name() -> None:
    result = customize_content("capacitor.config.ts", TEMPLATE_FILES["capacitor.config.ts"], "Test-Project")

    assert "appId: 'com.test-project.app'" in result
    assert "appName: 'Test-project'" in result
    assert "webDir: 'dist'" in result


def test_capacitor_config_accepts_double_quotes() -> None:
    content = 'appId: "com.apppop.app",\nappName: "AppPop",\n'

    result = customize_content("capacitor.config.ts", content, "demo")

    assert result == "appId: 'com.demo.app',\nappName: 'Demo',\n"


def test_supabase_config_rewrites_project_id_and_service_name() -> None:
    result = customize_content(
        "supabase/config.toml", TEMPLATE_FILES["supabase/config.toml"], "Test-Project", supabase_config()
    )

    assert f'project_id = "{VALID_PROJECT_ID}"' in result
    assert 'name = "test-project"' in result
    assert "template-ref" not in result


def test_supabase_config_excluded_without_supabase() -> None:
    assert "supabase/config.toml" not in files_to_update(None)
    assert "supabase/config.toml" in files_to_update(supabase_config())


def test_customize_project_updates_present_files_and_skips_missing(tmp_path: Path) -> None:
    write_template(tmp_path, {
        "README.md": TEMPLATE_FILES["README.md"],
        "package.json": TEMPLATE_FILES["package.json"],
    })

    updated = customize_project(tmp_path, "Demo-App")

    assert updated == ["package.json", "README.md"]
    assert (tmp_path / "README.md").read_text() == "# Demo-app\n\nThe demo-app template.\n"
    assert not (tmp_path / "index.html").exists()


def test_customize_project_sets_package_name_and_version(tmp_path: Path) -> None:
    write_template(tmp_path, {"package.json": TEMPLATE_FILES["package.json"]})

    customize_project(tmp_path, "Demo-App")

    data = json.loads((tmp_path / "package.json").read_text())
    assert data == {"name": "demo-app", "version": "0.0.1", "private": True}


def test_customize_project_leaves_supabase_config_without_supabase(tmp_path: Path) -> None:
    write_template(tmp_path)

    customize_project(tmp_path, "demo")

    assert (tmp_path / "supabase/config.toml").read_text() == TEMPLATE_FILES["supabase/config.toml"]


def test_customize_project_twice_changes_nothing_the_second_time(tmp_path: Path) -> None:
    write_template(tmp_path)

    first = customize_project(tmp_path, "my-apppop-app", supabase_config())
    snapshot = {name: (tmp_path / name).read_text() for name in TEMPLATE_FILES}
    second = customize_project(tmp_path, "my-apppop-app", supabase_config())

    assert first
    assert second == []
    assert {name: (tmp_path / name).read_text() for name in TEMPLATE_FILES} == snapshot


def test_customize_project_fails_on_invalid_package_json(tmp_path: Path) -> None:
    write_template(tmp_path, {"package.json": "{not json"})

    with pytest.raises(BootstrapError, match="Failed to update project files"):
        customize_project(tmp_path, "demo")


def test_customize_project_fails_on_unreadable_entry(tmp_path: Path) -> None:
    (tmp_path / "index.html").mkdir()

    with pytest.raises(BootstrapError, match="Failed to update project files") as excinfo:
        customize_project(tmp_path, "demo")
    assert "index.html" in excinfo.value.detail
