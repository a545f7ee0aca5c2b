"""Thread safety tests for shared selector nodes.

Nodes are documented as immutable. These tests verify that:
1. Many threads can extend one shared intermediate node without interference
2. The shared node is unchanged afterwards

These tests use real threading to catch actual concurrency bugs.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed

from katas import builder


class TestSharedNodes:
    """Verify extending a shared node is safe from many threads."""

    def test_concurrent_extension_of_shared_node(self) -> None:
        shared = builder.element("div").id("main")

        def extend(index: int) -> tuple[int, str]:
            node = shared
            for step in range(50):
                node = node.class_(f"c{index}-{step}")
            return index, node.render()

        with ThreadPoolExecutor(max_workers=8) as pool:
            futures = [pool.submit(extend, i) for i in range(32)]
            results = dict(future.result() for future in as_completed(futures))

        assert shared.render() == "div#main"
        for index, rendered in results.items():
            expected = "div#main" + "".join(f".c{index}-{step}" for step in range(50))
            assert rendered == expected

    def test_concurrent_render_of_combination(self) -> None:
        selector = builder.combine(
            builder.element("ul").class_("menu"),
            ">",
            builder.element("li").pseudo_class("first-child"),
        )
        expected = selector.render()

        with ThreadPoolExecutor(max_workers=8) as pool:
            rendered = list(pool.map(lambda _: selector.render(), range(100)))

        assert rendered == [expected] * 100
