"""Tests for the main window wiring."""

import pytest

from darkpig.config.settings import Settings
from darkpig.git_backend.repository import DarkPigRepository
from darkpig.ui.diff_pane import DiffPane
from darkpig.ui.title_bar import TitleBar
from darkpig.ui.workspace import Workspace


@pytest.fixture
def workspace(qtbot, merge_repo, tmp_path):
    path, ids = merge_repo
    settings = Settings(config_path=tmp_path / "settings.json")
    window = Workspace(DarkPigRepository(path), settings)
    qtbot.addWidget(window)
    return window, ids


class TestWorkspace:
    def test_graph_loaded_on_open(self, workspace):
        window, ids = workspace
        assert set(window.graph_view.graph_scene.oid_to_dot) == set(ids.values())
        assert window.windowTitle() == "Dark Pig Git"
        assert window.graph_dock.maximumWidth() == 300

    def test_selecting_commit_shows_details_and_diff(self, workspace, qtbot):
        window, ids = workspace

        window.graph_view.graph_scene.select_commit(ids["second"])

        assert window.detail_pane.commit.id == ids["second"]
        assert not window.diff_pane.isHidden()
        assert "+two" in window.diff_pane.diff_text()
        assert window.diff_pane.title().startswith(ids["second"][:7])

    def test_repository_error_shown_in_diff_pane(self, workspace):
        window, _ = workspace

        window.show_commit("0" * 40)

        assert window.diff_pane.title() == "Error"
        assert "failed" in window.diff_pane.diff_text()
        assert window.detail_pane.commit is None

    def test_closing_diff_clears_selection(self, workspace, qtbot):
        window, ids = workspace
        window.graph_view.graph_scene.select_commit(ids["root"])

        with qtbot.waitSignal(window.diff_pane.closed, timeout=1000):
            window.diff_pane._on_close_clicked()

        assert window.diff_pane.isHidden()
        assert window.detail_pane.commit is None


class TestPanes:
    def test_title_bar_quit(self, qtbot):
        bar = TitleBar("Dark Pig Git")
        qtbot.addWidget(bar)

        with qtbot.waitSignal(bar.quit_requested, timeout=1000):
            bar._quit_btn.click()
        assert bar.title() == "Dark Pig Git"

    def test_diff_pane_content(self, qtbot):
        pane = DiffPane("abc1234", "+added\n")
        qtbot.addWidget(pane)

        assert pane.title() == "abc1234"
        assert pane.diff_text() == "+added\n"

        pane.set_diff("-removed\n")
        assert pane.diff_text() == "-removed\n"
