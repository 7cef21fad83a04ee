"""
Integration tests for concurrent use of the registry.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

from reponame.repository_name import RepositoryName


class TestConcurrentCreate:
    """Many threads creating names at once."""

    def test_concurrent_first_insertions_converge(self, registry):
        """Racing requests for unseen names materialize each name once."""
        names = [f"@repo_{i}" for i in range(50)]
        barrier = threading.Barrier(8)

        def worker(offset):
            barrier.wait()
            return [registry.create(names[(offset + i) % len(names)]) for i in range(len(names))]

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(worker, range(8)))

        created = [repo_name for batch in results for repo_name in batch]
        assert len(created) == 8 * len(names)
        assert {repo_name.get_name() for repo_name in created} == set(names)
        stats = registry.get_stats()
        assert stats["misses"] == len(names)
        assert stats["hits"] == 7 * len(names)

    def test_concurrent_invalid_names(self, registry):
        """Invalid names fail in every thread and are never cached."""
        errors = []

        def worker():
            try:
                registry.create("@bad name")
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=worker) for _ in range(10)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(errors) == 10
        assert "@bad name" not in registry

    def test_concurrent_context_default(self, isolated_context):
        """RepositoryName.create() is safe to call from worker threads."""
        with ThreadPoolExecutor(max_workers=4) as executor:
            results = list(executor.map(RepositoryName.create, ["@x", "@y", "@x", "@y"] * 10))

        assert all(result == RepositoryName.create(result.get_name()) for result in results)
        assert isolated_context.registry.get_stats()["misses"] == 2


class TestLockFreeLookups:
    """Cached names are served without taking the insertion lock."""

    def test_cached_lookup_while_insert_lock_held(self, registry):
        """A hit completes even while another thread holds the insertion lock."""
        held = registry.create("@cached")
        executor = ThreadPoolExecutor(max_workers=1)
        try:
            with registry._lock:
                found = executor.submit(registry.create, "@cached").result(timeout=5)
                trusted = executor.submit(
                    registry.create_from_valid_stripped_name, "cached"
                ).result(timeout=5)
                assert "@cached" in registry
        finally:
            executor.shutdown(wait=True)

        assert found == held
        assert trusted == held
        assert registry.get_stats()["hits"] == 2

    def test_sentinels_never_take_the_lock(self, registry):
        """Default and main resolve while the insertion lock is held."""
        executor = ThreadPoolExecutor(max_workers=1)
        try:
            with registry._lock:
                assert executor.submit(RepositoryName.create, "").result(timeout=5).is_default()
                assert executor.submit(registry.create, "@").result(timeout=5).is_main()
        finally:
            executor.shutdown(wait=True)
