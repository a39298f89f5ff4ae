"""Smoke tests for baseline agents, the arena and configuration."""

import json

import numpy as np
import pytest
from typer.testing import CliRunner

from hybridsearch.agents import HybridMinimaxAgent, RandomAgent, UCTAgent
from hybridsearch.cli import app
from hybridsearch.eval import Arena, play_match
from hybridsearch.games.connect4 import Connect4Game
from hybridsearch.search import NoLegalMovesError
from hybridsearch.utils import MatchLogger, make_rng
from hybridsearch.utils.config import AgentConfig, Config, MatchConfig

from conftest import RaceGame


class TestRandomAgent:
    def test_returns_legal_moves(self, tictactoe):
        agent = RandomAgent(rng=np.random.default_rng(0))
        agent.initialize(tictactoe, 0)
        state = tictactoe.initial_state()
        for _ in range(5):
            move = agent.decide(tictactoe, state, 0.0)
            assert move in tictactoe.legal_actions(state)
            state = tictactoe.next_state(state, move)

    def test_non_alternating_moves_are_own(self):
        game = RaceGame()
        agent = RandomAgent(rng=np.random.default_rng(0))
        agent.initialize(game, 1)
        for _ in range(10):
            assert agent.decide(game, game.initial_state(), 0.0)[0] == 1

    def test_name(self):
        assert RandomAgent().name == "RandomAgent"


class TestUCTAgent:
    def test_finds_winning_move(self, tictactoe, one_winning_move):
        agent = UCTAgent(rng=np.random.default_rng(0))
        agent.initialize(tictactoe, 0)
        move = agent.decide(tictactoe, one_winning_move, 60.0, max_iterations=500)
        assert move == 8
        assert agent.last_iterations == 500

    def test_runs_at_least_one_iteration(self, tictactoe):
        agent = UCTAgent(rng=np.random.default_rng(0))
        agent.initialize(tictactoe, 0)
        move = agent.decide(tictactoe, tictactoe.initial_state(), 0.0)
        assert move in range(9)
        assert agent.last_iterations == 1

    def test_configured_iteration_cap(self, tictactoe):
        agent = UCTAgent(max_iterations=5, rng=np.random.default_rng(0))
        agent.initialize(tictactoe, 0)
        state = tictactoe.initial_state()

        agent.decide(tictactoe, state, 60.0)
        assert agent.last_iterations == 5

        # An explicit hint takes precedence over the configured cap
        agent.decide(tictactoe, state, 60.0, max_iterations=3)
        assert agent.last_iterations == 3

    def test_no_legal_moves_raises(self, tictactoe):
        agent = UCTAgent()
        agent.initialize(tictactoe, 0)
        with pytest.raises(NoLegalMovesError):
            agent.decide(tictactoe, tictactoe.from_string("XXX OO. ..."), 1.0)


class TestArena:
    def test_play_match_finishes(self, tictactoe):
        agents = [RandomAgent(np.random.default_rng(1)), RandomAgent(np.random.default_rng(2))]
        result = play_match(tictactoe, agents, max_steps=100, thinking_time=0.0)
        assert result.finished
        assert 5 <= result.steps <= 9
        assert len(result.moves) == result.steps
        assert agents[0].player == 0 and agents[1].player == 1

    def test_step_cap_leaves_match_unfinished(self):
        game = Connect4Game()
        agents = [RandomAgent(np.random.default_rng(1)), RandomAgent(np.random.default_rng(2))]
        result = play_match(game, agents, max_steps=3, thinking_time=0.0)
        assert not result.finished
        assert result.steps == 3
        assert result.outcome_for(0) == "unfinished"

    def test_needs_two_agents(self, tictactoe):
        with pytest.raises(ValueError):
            play_match(tictactoe, [RandomAgent()])

    def test_alternates_seats_and_tallies(self, tictactoe, tmp_path):
        hybrid = HybridMinimaxAgent(AgentConfig(evaluation_playouts=5), rng=np.random.default_rng(0))
        opponent = RandomAgent(rng=np.random.default_rng(1))
        logger = MatchLogger(str(tmp_path), verbose=False)
        arena = Arena(hybrid, opponent, max_steps=100, thinking_time=0.0, logger=logger)

        seen = []
        result = arena.evaluate(tictactoe, num_games=4, progress_callback=lambda n, o: seen.append((n, o)))

        assert result.total_games == 4
        assert result.wins + result.losses + result.draws + result.unfinished == 4
        assert [m.hybrid_player for m in result.matches] == [0, 1, 0, 1]
        assert [n for n, _ in seen] == [1, 2, 3, 4]
        assert 0.0 <= result.score <= 1.0
        for m in result.matches:
            assert m.first_reached_depth == 1
            assert m.opponent == "RandomAgent"

        lines = logger.log_file.read_text().splitlines()
        assert len(lines) == 4
        assert json.loads(lines[0])["game"] == "tictactoe"

    def test_no_statistics_without_hybrid_moves(self, tictactoe):
        hybrid = HybridMinimaxAgent()
        arena = Arena(hybrid, RandomAgent(), max_steps=0, thinking_time=0.0)
        result = arena.evaluate(tictactoe, num_games=1)
        assert result.unfinished == 1
        assert result.matches[0].first_reached_depth is None


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.agent.evaluation_playouts == 25
        assert config.agent.max_playout_depth == 50
        assert config.match.games == ["tictactoe", "connect4"]

    def test_save_load(self, tmp_path):
        config = Config()
        config.agent = AgentConfig(evaluation_playouts=15, max_playout_depth=100)
        config.match = MatchConfig(games=["tictactoe"], num_games=2, opponent="random")
        path = tmp_path / "config.yaml"

        config.save(str(path))
        loaded = Config.load(str(path))

        assert loaded.agent == config.agent
        assert loaded.match == config.match
        assert loaded.seed == 42

    def test_validation(self):
        with pytest.raises(ValueError):
            AgentConfig(evaluation_playouts=0)
        with pytest.raises(ValueError):
            AgentConfig(max_playout_depth=-1)
        with pytest.raises(ValueError):
            MatchConfig(opponent="alphabeta")

    def test_unknown_key_is_value_error(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("agent:\n  playouts: 10\n")
        with pytest.raises(ValueError, match="playouts"):
            Config.load(str(path))

    def test_make_rng_offsets(self):
        assert np.array_equal(make_rng(7).integers(0, 1000, 5), make_rng(7).integers(0, 1000, 5))
        assert not np.array_equal(
            make_rng(7).integers(0, 2**32, 5), make_rng(7, offset=1).integers(0, 2**32, 5)
        )


class TestCli:
    def test_list_games(self):
        result = CliRunner().invoke(app, ["list-games"])
        assert result.exit_code == 0
        assert "tictactoe" in result.output

    def test_analyze(self):
        result = CliRunner().invoke(
            app, ["analyze", "tictactoe", "--moves", "0,1,2,4,5,3", "--time", "0", "--seed", "1"]
        )
        assert result.exit_code == 0
        assert "Reached depth" in result.output

    def test_unknown_game_exits(self):
        result = CliRunner().invoke(app, ["analyze", "chess"])
        assert result.exit_code == 1

    def test_match_random_opponent(self, tmp_path):
        result = CliRunner().invoke(
            app,
            [
                "match", "tictactoe",
                "--games", "2", "--time", "0", "--playouts", "3",
                "--opponent", "random", "--log-dir", str(tmp_path),
            ],
        )
        assert result.exit_code == 0
        assert list(tmp_path.glob("match_*.jsonl"))

    def test_match_passes_uct_iteration_cap(self, tmp_path, monkeypatch):
        seen = set()
        original = UCTAgent.decide

        def recording_decide(agent, *args, **kwargs):
            seen.add(agent.max_iterations)
            return original(agent, *args, **kwargs)

        monkeypatch.setattr(UCTAgent, "decide", recording_decide)
        config_path = tmp_path / "config.yaml"
        config_path.write_text(
            "uct:\n"
            "  max_iterations: 5\n"
            "match:\n"
            "  games: [tictactoe]\n"
            "  num_games: 1\n"
            "  thinking_time: 0\n"
        )

        result = CliRunner().invoke(
            app,
            ["match", "--config", str(config_path), "--playouts", "2", "--log-dir", str(tmp_path)],
        )
        assert result.exit_code == 0
        assert seen == {5}

    def test_match_bad_config_exits(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("uct:\n  iterations: 5\n")
        result = CliRunner().invoke(app, ["match", "--config", str(config_path)])
        assert result.exit_code == 1
        assert "Invalid config" in result.output

    def test_match_warns_on_step_cap(self, tmp_path):
        result = CliRunner().invoke(
            app,
            [
                "match", "tictactoe",
                "--games", "2", "--time", "0", "--playouts", "2", "--max-steps", "1",
                "--opponent", "random", "--log-dir", str(tmp_path),
            ],
        )
        assert result.exit_code == 0
        assert "step cap" in result.output
