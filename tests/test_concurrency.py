from concurrent.futures import ThreadPoolExecutor

from safecall import prepare


def test_shared_chain_applied_from_many_threads():
    chain = prepare(int).step(lambda x: x + 1).step(lambda x: None if x % 3 == 0 else x * 2)
    inputs = list(range(500)) + [None] * 20
    expected = [chain.on(v).get_or_default(-1) for v in inputs]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(chain.as_function(-1), inputs))

    assert results == expected
    assert len(chain) == 2
