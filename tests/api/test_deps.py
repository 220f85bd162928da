from src.api.deps import SequenceRegistry


class TestSequenceRegistry:
    def test_same_session_same_sequence(self):
        registry = SequenceRegistry(seed=1)
        assert registry.get("a") is registry.get("a")

    def test_evicts_oldest_session_past_cap(self):
        registry = SequenceRegistry(seed=1, max_sessions=3)
        for session_id in ("a", "b", "c", "d"):
            registry.get(session_id)
        assert len(registry) == 3
        assert "a" not in registry
        assert registry.reset("a") is False

    def test_recent_use_protects_from_eviction(self):
        registry = SequenceRegistry(seed=1, max_sessions=2)
        first = registry.get("a")
        registry.get("b")
        assert registry.get("a") is first
        registry.get("c")
        assert "a" in registry
        assert "b" not in registry

    def test_evicted_session_starts_fresh(self):
        registry = SequenceRegistry(seed=1, max_sessions=1)
        draws = registry.get("a").get_or_regenerate(10)
        registry.get("b")
        assert len(registry.get("a")) == 0
        assert registry.get("a").get_or_regenerate(10) is not draws
