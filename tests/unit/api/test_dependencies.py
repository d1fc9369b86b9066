#!/usr/bin/env python3
"""
Tests for the dependency container wiring.
"""
import threading

import pytest

from app.adapters.repositories.memory_reaction_repository import MemoryReactionRepository
from app.api.dependencies import (
    configure_dependencies,
    get_dependency_container,
    get_reaction_handler,
    get_reaction_repository
)
from tests.utils.mock_helpers import MockHelpers


@pytest.mark.unit
def test_handler_and_repository_share_one_buffer():
    handler = get_reaction_handler()
    handler.handle(MockHelpers.create_request(body={"reaction": "hello"}))
    assert get_reaction_repository().count() == 1
    assert get_reaction_handler() is handler


@pytest.mark.unit
@pytest.mark.parametrize("trial", range(10))
def test_concurrent_first_requests_share_one_buffer(trial):
    get_dependency_container().reset()
    thread_count = 8
    barrier = threading.Barrier(thread_count)
    status_codes = []

    def submit(n: int):
        barrier.wait()
        response = get_reaction_handler().handle(
            MockHelpers.create_request(body={"reaction": f"r{n}"})
        )
        status_codes.append(response.status_code)

    threads = [threading.Thread(target=submit, args=(n,)) for n in range(thread_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert status_codes == [200] * thread_count
    records = get_reaction_handler().snapshot()
    assert sorted(r.reaction for r in records) == sorted(f"r{n}" for n in range(thread_count))


@pytest.mark.unit
def test_override_replaces_buffer_for_handler():
    repository = MemoryReactionRepository(capacity=3)
    configure_dependencies(reaction_repository=repository)
    get_reaction_handler().handle(MockHelpers.create_request(body={"reaction": "hi"}))
    assert repository.count() == 1


@pytest.mark.unit
def test_unknown_override_rejected():
    with pytest.raises(ValueError, match="Unknown dependency override"):
        configure_dependencies(cache=object())
