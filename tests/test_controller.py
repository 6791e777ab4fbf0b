import asyncio

import pytest

from shadow_strike.controller import DifficultyController
from shadow_strike.difficulty import Difficulty, FLOOR_DIFFICULTY
from shadow_strike.exceptions import SuggestionUnavailable
from shadow_strike.suggestion import offline_suggestion, suggest_difficulty


HARD = {"enemy_spawn_rate": 4, "obstacle_complexity": 8, "game_speed_multiplier": 1.4}


class RecordingService:
    def __init__(self, result=None, gate=None):
        self.result = dict(HARD) if result is None else result
        self.gate = gate
        self.scores = []

    async def __call__(self, score):
        self.scores.append(score)
        if self.gate is not None:
            await self.gate.wait()
        return self.result


async def spin(times=10):
    for _ in range(times):
        await asyncio.sleep(0)


def test_unreachable_service_falls_back_to_floor():
    controller = DifficultyController(offline_suggestion)
    assert asyncio.run(controller.refresh(0)) == FLOOR_DIFFICULTY
    assert controller.difficulty == FLOOR_DIFFICULTY


def test_failure_after_success_falls_back_to_floor():
    controller = DifficultyController(suggest_difficulty)
    asyncio.run(controller.refresh(10000))
    assert controller.difficulty == Difficulty(5, 10, 1.5)

    async def broken(score):
        raise SuggestionUnavailable("down")

    controller.service = broken
    asyncio.run(controller.refresh(10000))
    assert controller.difficulty == FLOOR_DIFFICULTY


def test_result_is_clamped_and_partial_fields_filled():
    controller = DifficultyController(RecordingService({"enemy_spawn_rate": 50, "game_speed_multiplier": 0.2}))
    assert asyncio.run(controller.refresh(1234)) == Difficulty(5, 1, 1.0)


def test_score_sent_to_service_is_saturated():
    service = RecordingService()
    controller = DifficultyController(service)
    asyncio.run(controller.refresh(99999))
    asyncio.run(controller.refresh(-5))
    assert service.scores == [10000, 0]


def test_slow_service_times_out_to_floor():
    async def slow(score):
        await asyncio.sleep(5)
        return HARD

    controller = DifficultyController(slow, timeout=0.01)
    assert asyncio.run(controller.refresh(500)) == FLOOR_DIFFICULTY


def test_result_arriving_after_stop_is_discarded():
    async def scenario():
        gate = asyncio.Event()
        controller = DifficultyController(RecordingService(gate=gate))
        controller.start()
        task = asyncio.ensure_future(controller.refresh(9000))
        await spin()
        controller.stop()
        gate.set()
        return await task, controller.difficulty

    published, difficulty = asyncio.run(scenario())
    assert published is None
    assert difficulty == FLOOR_DIFFICULTY


def test_cadence_launches_refresh_every_interval():
    async def scenario():
        service = RecordingService()
        controller = DifficultyController(service, interval_ms=5000)
        controller.start()

        controller.advance(4999, 100)
        assert not controller.in_flight
        await spin()
        assert service.scores == []

        controller.advance(1, 100)
        await spin()
        assert service.scores == [100]
        assert controller.difficulty == Difficulty(4, 8, 1.4)

        for _ in range(5):
            controller.advance(1000, 700)
        await spin()
        return service.scores

    assert asyncio.run(scenario()) == [100, 700]


def test_inactive_controller_never_calls_service():
    async def scenario():
        service = RecordingService()
        controller = DifficultyController(service)
        controller.advance(20000, 100)
        await spin()
        return service.scores

    assert asyncio.run(scenario()) == []


def test_previous_values_hold_while_request_in_flight():
    async def scenario():
        gate = asyncio.Event()
        service = RecordingService(gate=gate)
        controller = DifficultyController(service, interval_ms=1000)
        controller.start()

        controller.advance(1000, 100)
        await spin()
        assert controller.in_flight
        assert controller.difficulty == FLOOR_DIFFICULTY

        # Second interval passes while the first request is still out
        controller.advance(1000, 200)
        await spin()
        assert service.scores == [100]

        gate.set()
        await spin()
        return controller

    controller = asyncio.run(scenario())
    assert not controller.in_flight
    assert controller.difficulty == Difficulty(4, 8, 1.4)


def test_stop_cancels_in_flight_request():
    async def scenario():
        gate = asyncio.Event()
        controller = DifficultyController(RecordingService(gate=gate), interval_ms=1000)
        controller.start()
        controller.advance(1000, 100)
        await spin()
        controller.stop()
        gate.set()
        await spin()
        return controller

    controller = asyncio.run(scenario())
    assert not controller.in_flight
    assert not controller.active
    assert controller.difficulty == FLOOR_DIFFICULTY


def test_reset_restores_floor():
    controller = DifficultyController(suggest_difficulty)
    asyncio.run(controller.refresh(10000))
    controller.reset()
    assert controller.difficulty == FLOOR_DIFFICULTY


def test_explicit_loop_is_used_without_running_loop():
    loop = asyncio.new_event_loop()
    try:
        service = RecordingService()
        controller = DifficultyController(service, interval_ms=100, loop=loop)
        controller.start()
        controller.advance(100, 300)
        assert controller.in_flight
        loop.run_until_complete(spin())
        assert service.scores == [300]
        assert controller.difficulty == Difficulty(4, 8, 1.4)
    finally:
        loop.close()


def test_no_loop_skips_refresh(caplog):
    service = RecordingService()
    controller = DifficultyController(service, interval_ms=100)
    controller.start()
    controller.advance(100, 300)
    assert not controller.in_flight
    assert controller.difficulty == FLOOR_DIFFICULTY
    assert "difficulty refresh skipped" in caplog.text
