# Area: Runner Tests
"""Tests for GameRunner effects, pacing and the interactive loop."""

from dataclasses import replace
from unittest.mock import Mock, patch

import pytest

from career_link.config import DEFAULT_CONFIG
from career_link.errors import GatewayTransportError
from career_link.runner import GameRunner, build_gateway
from career_link._game.enums import GameStatus
from career_link._game.events import (
    AnswerValidated,
    ChallengeLoaded,
    DismissError,
    Quit,
    Restart,
    RetryLoad,
    StartGame,
    SubmitAnswer,
)
from career_link._game.session import Challenge, ValidationResult
from career_link._gateway.demo_client import DemoLLMClient
from career_link._gateway.gateway import FALLBACK_CHALLENGE, Gateway
from career_link._gateway.llm_client import AnthropicClient, BaseLLMClient

RM_MU = {"subjectA": "Real Madrid", "subjectB": "Manchester United"}
RONALDO_OK = {"isCorrect": True, "message": "Played for both, 2003-2018."}
MESSI_WRONG = {
    "isCorrect": False,
    "message": "Lionel Messi never played for either club.",
    "alternativeAnswer": "Cristiano Ronaldo",
}


class FakeClock:
    """Monotonic clock advanced by the fake sleep."""

    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.now += seconds


class ScriptedClient(BaseLLMClient):
    """Returns queued replies in order; exceptions in the queue are raised."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def is_available(self):
        return True

    def generate_json(self, operation, system, prompt, schema, request_payload,
                      temperature=None):
        self.calls.append((operation, request_payload))
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


def make_config(tmp_path, **overrides):
    config = dict(DEFAULT_CONFIG)
    config.update(demo_mode=True, log_file=str(tmp_path / "career_link.log"))
    config.update(overrides)
    return config


def make_runner(tmp_path, *replies, strict=False, ui=None, **overrides):
    clock = FakeClock()
    client = ScriptedClient(*replies)
    runner = GameRunner(
        config=make_config(tmp_path, strict_gateway=strict, **overrides),
        gateway=Gateway(client, strict=strict),
        ui=ui,
        clock=clock,
        sleep=clock.sleep,
    )
    return runner, client, clock


@pytest.fixture(autouse=True)
def quiet_gateway_errors():
    with patch("career_link._gateway.gateway.log_gateway_error"):
        yield


class TestBuildGateway:
    """Tests for build_gateway()."""

    def test_demo_mode_uses_demo_client(self, tmp_path):
        gateway = build_gateway(make_config(tmp_path))
        assert isinstance(gateway.client, DemoLLMClient)
        assert gateway.strict is False

    def test_live_mode_uses_anthropic(self, tmp_path):
        config = make_config(tmp_path, demo_mode=False, anthropic_api_key="k",
                             strict_gateway=True)
        with patch("career_link._gateway.llm_client.anthropic.Anthropic"):
            gateway = build_gateway(config)
        assert isinstance(gateway.client, AnthropicClient)
        assert gateway.strict is True


class TestGameRunnerInit:
    """Tests for runner construction."""

    def test_invalid_config_rejected(self, tmp_path):
        with pytest.raises(ValueError):
            GameRunner(config=make_config(tmp_path, demo_mode=False))

    def test_starts_at_start(self, tmp_path):
        runner, _, _ = make_runner(tmp_path)
        assert runner.session.status == GameStatus.START


class TestScenarios:
    """End-to-end rounds through the runner with a scripted service."""

    def test_correct_answer_advances_after_pause(self, tmp_path):
        runner, client, clock = make_runner(
            tmp_path, RM_MU, RONALDO_OK, {"subjectA": "Arsenal", "subjectB": "Roma"},
        )
        runner.dispatch(StartGame())
        runner.settle()
        assert runner.session.status == GameStatus.PLAYING
        assert runner.session.current_challenge == Challenge("Real Madrid", "Manchester United")

        runner.dispatch(SubmitAnswer(answer="Cristiano Ronaldo"))
        runner.settle()
        session = runner.session
        assert session.status == GameStatus.ROUND_FEEDBACK
        assert session.score == 10
        assert len(session.history) == 1
        assert session.history[0].is_correct is True

        clock.now += 3.9
        runner.poll_timers()
        assert runner.session.status == GameStatus.ROUND_FEEDBACK

        clock.now += 0.2
        runner.poll_timers()
        assert runner.session.status == GameStatus.LOADING_CHALLENGE
        assert runner.session.level == 2

        runner.settle()
        assert runner.session.status == GameStatus.PLAYING
        assert client.calls[2] == (
            "request_challenge",
            {"level": 2, "avoid": ["Real Madrid", "Manchester United"]},
        )

    def test_incorrect_answer_ends_game(self, tmp_path):
        runner, _, _ = make_runner(tmp_path, RM_MU, MESSI_WRONG)
        runner.dispatch(StartGame())
        runner.settle()
        runner.dispatch(SubmitAnswer(answer="Lionel Messi"))
        runner.settle()

        session = runner.session
        assert session.status == GameStatus.GAME_OVER
        assert session.score == 0
        assert len(session.history) == 1
        assert session.history[0].is_correct is False
        assert session.last_feedback.alternative_answer == "Cristiano Ronaldo"
        assert runner.pause_timer.is_armed(session.session_id) is False

    def test_strict_fetch_failure_then_retry(self, tmp_path):
        failure = GatewayTransportError("request_challenge", {"level": 3}, "timeout")
        runner, client, _ = make_runner(tmp_path, failure, RM_MU, strict=True)
        runner.dispatch(StartGame())
        runner.machine.session = replace(runner.session, level=3, score=20)

        runner.settle()
        session = runner.session
        assert session.status == GameStatus.LOADING_CHALLENGE
        assert session.error is not None
        assert session.level == 3
        assert session.score == 20
        assert len(client.calls) == 1

        runner.dispatch(RetryLoad())
        runner.settle()
        assert runner.session.status == GameStatus.PLAYING
        assert runner.session.error is None
        assert len(client.calls) == 2

    def test_fallback_fetch_failure_uses_fallback_pair(self, tmp_path):
        failure = GatewayTransportError("request_challenge", {"level": 1}, "timeout")
        runner, _, _ = make_runner(tmp_path, failure)
        runner.dispatch(StartGame())
        runner.settle()
        assert runner.session.status == GameStatus.PLAYING
        assert runner.session.current_challenge == FALLBACK_CHALLENGE
        assert runner.session.error is None

    def test_fallback_validation_failure_ends_game(self, tmp_path):
        failure = GatewayTransportError("validate_answer", {}, "timeout")
        runner, _, _ = make_runner(tmp_path, RM_MU, failure)
        runner.dispatch(StartGame())
        runner.settle()
        runner.dispatch(SubmitAnswer(answer="Beckham"))
        runner.settle()
        assert runner.session.status == GameStatus.GAME_OVER
        assert runner.session.last_feedback.alternative_answer is None

    def test_strict_validation_failure_allows_new_answer(self, tmp_path):
        failure = GatewayTransportError("validate_answer", {}, "timeout")
        runner, _, _ = make_runner(tmp_path, RM_MU, failure, RONALDO_OK, strict=True)
        runner.dispatch(StartGame())
        runner.settle()
        runner.dispatch(SubmitAnswer(answer="Beckham"))
        runner.settle()
        assert runner.session.status == GameStatus.PLAYING
        assert runner.session.error is not None

        runner.dispatch(DismissError())
        assert runner.session.error is None
        runner.dispatch(SubmitAnswer(answer="Beckham"))
        runner.settle()
        assert runner.session.status == GameStatus.ROUND_FEEDBACK

    def test_victory_after_level_ten(self, tmp_path):
        replies = []
        for _ in range(10):
            replies.extend([RM_MU, RONALDO_OK])
        runner, _, clock = make_runner(tmp_path, *replies)

        runner.dispatch(StartGame())
        for _ in range(10):
            runner.settle()
            runner.dispatch(SubmitAnswer(answer="Cristiano Ronaldo"))
            runner.settle()
            clock.now += 4.0
            runner.poll_timers()

        session = runner.session
        assert session.status == GameStatus.VICTORY
        assert session.score == 100
        assert len(session.history) == 10
        assert session.last_feedback is None


class TestPacing:
    """Tests for the post-round pause and restarts."""

    def test_pause_armed_on_feedback(self, tmp_path):
        runner, _, _ = make_runner(tmp_path, RM_MU, RONALDO_OK, feedback_pause_seconds=2.0)
        runner.dispatch(StartGame())
        runner.settle()
        runner.dispatch(SubmitAnswer(answer="Ronaldo"))
        runner.settle()
        assert runner.pause_timer.remaining(runner.session.session_id) == 2.0

    def test_restart_cancels_pause(self, tmp_path):
        runner, _, clock = make_runner(tmp_path, RM_MU, RONALDO_OK, RM_MU)
        runner.dispatch(StartGame())
        runner.settle()
        runner.dispatch(SubmitAnswer(answer="Ronaldo"))
        runner.settle()
        old_id = runner.session.session_id

        runner.dispatch(Restart())
        assert runner.pause_timer.is_armed(old_id) is False

        clock.now += 10.0
        runner.poll_timers()
        assert runner.session.level == 1
        assert runner.session.score == 0

    def test_late_result_for_old_session_ignored(self, tmp_path):
        runner, _, _ = make_runner(tmp_path, RM_MU)
        runner.dispatch(StartGame())
        old_id = runner.session.session_id
        runner.dispatch(Restart())

        late = ChallengeLoaded(
            session_id=old_id, level=1,
            challenge=Challenge("Ajax", "Everton"),
        )
        session = runner.dispatch(late)
        assert session.status == GameStatus.LOADING_CHALLENGE
        assert session.current_challenge is None

    def test_late_verdict_ignored(self, tmp_path):
        runner, _, _ = make_runner(tmp_path, RM_MU)
        runner.dispatch(StartGame())
        runner.settle()
        old = runner.session
        runner.dispatch(Restart())
        runner.dispatch(AnswerValidated(
            session_id=old.session_id, level=1,
            result=ValidationResult(is_correct=True, message="late"),
        ))
        assert runner.session.score == 0
        assert runner.session.history == ()

    def test_listener_sees_each_change(self, tmp_path):
        runner, _, _ = make_runner(tmp_path, RM_MU)
        seen = []
        runner.add_listener(lambda s: seen.append(s.status))
        runner.dispatch(StartGame())
        runner.settle()
        runner.dispatch(SubmitAnswer(answer="   "))
        assert seen == [GameStatus.LOADING_CHALLENGE, GameStatus.PLAYING]


class TestRunLoop:
    """Tests for the blocking interactive loop."""

    def make_ui(self, *intents, polled=()):
        """Mock UI that records the status each call was made in."""
        ui = Mock()
        ui.read_statuses = []
        ui.poll_statuses = []
        read_queue = list(intents)
        poll_queue = list(polled)

        def read_intent(session):
            ui.read_statuses.append(session.status)
            return read_queue.pop(0)

        def poll_intent(session):
            ui.poll_statuses.append(session.status)
            return poll_queue.pop(0) if poll_queue else None

        ui.read_intent.side_effect = read_intent
        ui.poll_intent.side_effect = poll_intent
        return ui

    def test_run_requires_ui(self, tmp_path):
        runner, _, _ = make_runner(tmp_path)
        with pytest.raises(ValueError):
            runner.run()

    def test_plays_until_quit(self, tmp_path):
        ui = self.make_ui(
            StartGame(),
            SubmitAnswer(answer="Cristiano Ronaldo"),
            SubmitAnswer(answer="Lionel Messi"),
            Quit(),
        )
        runner, _, _ = make_runner(
            tmp_path, RM_MU, RONALDO_OK, RM_MU, MESSI_WRONG, ui=ui,
            poll_interval_seconds=1.0,
        )
        runner.run()

        session = runner.session
        assert session.status == GameStatus.GAME_OVER
        assert session.score == 10
        assert session.level == 2
        rendered = [call.args[0].status for call in ui.render.call_args_list]
        assert rendered[0] == GameStatus.START
        assert GameStatus.ROUND_FEEDBACK in rendered
        assert rendered[-1] == GameStatus.GAME_OVER
        assert ui.read_statuses == [
            GameStatus.START, GameStatus.PLAYING, GameStatus.PLAYING, GameStatus.GAME_OVER,
        ]

    def test_pause_polls_ui_for_commands(self, tmp_path):
        ui = self.make_ui(StartGame(), SubmitAnswer(answer="Cristiano Ronaldo"), Quit())
        runner, _, _ = make_runner(
            tmp_path, RM_MU, RONALDO_OK, RM_MU, ui=ui, poll_interval_seconds=1.0,
        )
        runner.run()

        assert ui.poll_statuses
        assert set(ui.poll_statuses) == {GameStatus.ROUND_FEEDBACK}
        assert runner.session.level == 2

    def test_restart_during_pause(self, tmp_path):
        ui = self.make_ui(
            StartGame(), SubmitAnswer(answer="Cristiano Ronaldo"), Quit(),
            polled=[None, Restart()],
        )
        runner, client, _ = make_runner(
            tmp_path, RM_MU, RONALDO_OK, RM_MU, ui=ui, poll_interval_seconds=1.0,
        )
        runner.run()

        session = runner.session
        assert session.status == GameStatus.PLAYING
        assert session.level == 1
        assert session.score == 0
        assert session.history == ()
        assert runner.pause_timer.check_expired() == []
        assert [op for op, _ in client.calls] == [
            "request_challenge", "validate_answer", "request_challenge",
        ]
        assert ui.read_statuses == [GameStatus.START, GameStatus.PLAYING, GameStatus.PLAYING]

    def test_quit_during_pause(self, tmp_path):
        ui = self.make_ui(
            StartGame(), SubmitAnswer(answer="Cristiano Ronaldo"), polled=[Quit()],
        )
        runner, client, _ = make_runner(tmp_path, RM_MU, RONALDO_OK, ui=ui)
        runner.run()

        assert runner.session.status == GameStatus.ROUND_FEEDBACK
        assert len(client.calls) == 2
        assert ui.read_intent.call_count == 2

    def test_keyboard_interrupt_stops_loop(self, tmp_path):
        ui = Mock()
        ui.read_intent.side_effect = KeyboardInterrupt
        runner, _, _ = make_runner(tmp_path, ui=ui)
        runner.run()
        assert runner.session.status == GameStatus.START
