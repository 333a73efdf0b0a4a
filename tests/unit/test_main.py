"""Unit tests for the separate-process run mode."""

from unittest.mock import MagicMock, patch

import pytest

from relaychat.main import run_separate


def fake_process(*poll_results: int | None) -> MagicMock:
    proc = MagicMock()
    proc.poll.side_effect = list(poll_results)
    return proc


class TestRunSeparate:
    """Tests for supervising the API and UI server processes."""

    @pytest.mark.parametrize(
        ("api_polls", "ui_polls"),
        [
            ((None, None), (None, 1)),
            ((None, 1), (None,)),
        ],
        ids=["ui-exits", "api-exits"],
    )
    def test_either_exit_stops_both(
        self, api_polls: tuple[int | None, ...], ui_polls: tuple[int | None, ...]
    ) -> None:
        api_proc = fake_process(*api_polls)
        ui_proc = fake_process(*ui_polls)

        with (
            patch("relaychat.main.subprocess.Popen", side_effect=[api_proc, ui_proc]),
            patch("relaychat.main.time.sleep") as mock_sleep,
        ):
            run_separate()

        mock_sleep.assert_called_once_with(1)
        api_proc.terminate.assert_called_once()
        ui_proc.terminate.assert_called_once()
        api_proc.wait.assert_called_once()
        ui_proc.wait.assert_called_once()

    def test_api_listens_on_port_env(self) -> None:
        api_proc = fake_process(1)
        ui_proc = fake_process()

        with (
            patch.dict("os.environ", {"PORT": "9000"}),
            patch("relaychat.main.subprocess.Popen", side_effect=[api_proc, ui_proc]) as popen,
            patch("relaychat.main.time.sleep"),
        ):
            run_separate()

        api_args = popen.call_args_list[0].args[0]
        assert api_args[api_args.index("--port") + 1] == "9000"
