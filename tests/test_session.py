import threading

import pytest
from packages.engine import GameOver, Status
from packages.session import App, Move, PlayerSession, Score


def _app(valid=("crane", "stare", "hello", "world", "bolts", "dumpy",
                "fight", "jocks", "wimpy", "vouch")):
    return App("Bad Wordle", ["crane", "hello"], valid, seed=1)


def test_score_display():
    assert str(Score()) == "0% (0/0)"
    assert str(Score(games=3, wins=2)) == "67% (2/3)"
    assert Score.from_record(Score(5, 1).to_record()) == Score(5, 1)


def test_start_game_picks_unplayed_targets_in_order():
    app = _app()
    assert app.start_game("ann") == "CRANE"
    assert app.start_game("ann") == "HELLO"
    # pool exhausted: falls back to a random target
    assert app.start_game("ann") in ("CRANE", "HELLO")
    assert app.score("ann").games == 3
    # other players have their own history
    assert app.start_game("bob") == "CRANE"


def test_start_game_without_targets():
    app = App("Bad Wordle", [])
    with pytest.raises(ValueError):
        app.start_game("ann")


def test_play_turn_moves():
    app = _app()
    app.start_game("ann")
    assert app.is_playing("ann")
    assert app.play_turn("ann", "xyzzy") is Move.INVALID_WORD
    assert app.play_turn("ann", "hello!") is Move.INVALID_WORD
    assert app.play_turn("ann", "stare") is Move.VALID
    assert app.play_turn("ann", "CRANE") is Move.WON
    assert not app.is_playing("ann")
    assert app.score("ann") == Score(games=1, wins=1)
    assert app.session("ann").won_words == {"CRANE"}


def test_invalid_length_does_not_consume_a_turn():
    app = App("Bad Wordle", ["crane"])  # no dictionary: every word accepted
    app.start_game("ann")
    assert app.play_turn("ann", "cranes") is Move.INVALID_LENGTH
    assert app.session("ann").wordle.attempts == ()


def test_losing_game():
    app = _app()
    app.start_game("ann")
    moves = [app.play_turn("ann", w) for w in
             ["bolts", "dumpy", "fight", "jocks", "wimpy", "vouch"]]
    assert moves[:-1] == [Move.VALID] * 5
    assert moves[-1] is Move.LOST
    assert app.board("ann").status is Status.LOST
    assert app.score("ann") == Score(games=1, wins=0)
    with pytest.raises(GameOver):
        app.play_turn("ann", "crane")


def test_play_turn_without_game():
    with pytest.raises(GameOver):
        _app().play_turn("ann", "crane")


def test_save_and_load_round_trip():
    app = _app()
    app.start_game("ann")
    app.play_turn("ann", "stare")
    record = app.save("ann")
    assert record["last_wordle"] == {"target_word": "CRANE", "attempts": ["STARE"]}

    other = _app()
    restored = other.load(record)
    assert isinstance(restored, PlayerSession)
    assert other.is_playing("ann")
    assert other.score("ann") == Score(games=1, wins=0)
    assert other.board("ann") == app.board("ann")
    assert other.play_turn("ann", "crane") is Move.WON


def test_load_falls_back_to_won_words():
    app = _app()
    app.load({"player_id": "ann", "won_words": ["crane"], "played_words": [],
              "score": {"games": 1, "wins": 1}, "last_wordle": None})
    assert app.session("ann").played_words == {"CRANE"}
    assert not app.is_playing("ann")
    assert app.start_game("ann") == "HELLO"


def test_players_play_concurrently():
    app = App("Bad Wordle", ["crane"])
    players = [f"p{i}" for i in range(8)]
    for p in players:
        app.start_game(p)

    results = {}

    def play(p):
        results[p] = [app.play_turn(p, w) for w in ("stare", "trace", "crane")]

    threads = [threading.Thread(target=play, args=(p,)) for p in players]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    for p in players:
        assert results[p] == [Move.VALID, Move.VALID, Move.WON]
        assert app.score(p) == Score(games=1, wins=1)


def test_finished_game_rejects_any_word():
    app = _app()
    app.start_game("ann")
    assert app.play_turn("ann", "crane") is Move.WON
    with pytest.raises(GameOver) as exc:
        app.play_turn("ann", "xyzzy")
    assert exc.value.status is Status.WON
    with pytest.raises(GameOver):
        app.play_turn("ann", "cat")
    assert app.session("ann").wordle.attempts == ("CRANE",)


@pytest.mark.parametrize("record", [{}, {"won_words": ["crane"]}, None])
def test_load_rejects_records_without_player(record):
    with pytest.raises(ValueError):
        _app().load(record)
