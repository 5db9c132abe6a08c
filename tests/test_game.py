from datetime import date

import pytest

from app.engine.errors import NotFoundError
from app.engine.game import BOOK_XP

TODAY = date(2026, 10, 19)


def test_state_shape(game):
    game.ledger.apply_delta(1, 7300, "Oct 19", "big day")
    state = game.state(1, TODAY)
    assert state["totalXP"] == 7300
    assert state["level"] == 2
    assert set(state["stats"]) == {"str", "dis", "vit", "wis", "end"}
    assert state["log"] == [{"date": "Oct 19", "note": "big day", "xp": 7300}]


def test_complete_quest_pays_reward_once(game, fakes):
    fakes["quests"].add(1, 10, "Hit gym 5 days in a week", "weekly", 200)

    assert game.complete_quest(1, 10, TODAY) == 200
    assert game.ledger.total_xp(1) == 200
    assert game.ledger.history(1)[0]["note"] == "Quest Complete: Hit gym 5 days in a week"

    with pytest.raises(NotFoundError):
        game.complete_quest(1, 10, TODAY)
    assert game.ledger.total_xp(1) == 200


def test_boss_quest_note(game, fakes):
    fakes["quests"].add(1, 11, "Secure a job offer", "boss", 1000)
    game.complete_quest(1, 11, TODAY)
    assert game.ledger.history(1)[0]["note"] == "Boss Defeated: Secure a job offer"


def test_zero_xp_quest_writes_no_log(game, fakes):
    fakes["quests"].add(1, 12, "Just because", "weekly", 0)
    assert game.complete_quest(1, 12, TODAY) == 0
    assert fakes["quests"].quests[12]["status"] == "completed"
    assert game.ledger.history(1) == []


def test_foreign_or_missing_quest_is_not_found(game, fakes):
    fakes["quests"].add(2, 13, "Not yours", "weekly", 100)
    with pytest.raises(NotFoundError):
        game.complete_quest(1, 13, TODAY)
    with pytest.raises(NotFoundError):
        game.complete_quest(1, 999, TODAY)
    assert fakes["quests"].quests[13]["status"] == "active"


def test_finish_book_awards_fixed_xp(game, fakes):
    fakes["books"].add(1, 1, "Meditations")
    assert game.finish_book(1, 1, TODAY) == BOOK_XP == 200
    assert game.ledger.history(1)[0] == {
        "date": "Oct 19, 2026", "note": "Tome Completed: Meditations", "xp": 200,
    }
    assert fakes["books"].books[1]["completed_at"] == "Oct 19, 2026"
    assert game.stats.compute(1, TODAY)["wis"] == 8

    with pytest.raises(NotFoundError):
        game.finish_book(1, 1, TODAY)
