import pytest

from kplot.data import DataType, KData, KPair


def _recorder(calls):
    def func(dep, index, x, y):
        calls.append((dep, index, x, y))
        dep.set(index, x, y)

    return func


def test_init_accepts_tuples_and_pairs():
    d = KData([(1, 2), KPair(3.0, 4.0)], DataType.ARRAY)
    assert len(d) == 2
    assert d[0] == KPair(1.0, 2.0)
    assert d[1] == KPair(3.0, 4.0)
    assert d.kind is DataType.ARRAY


def test_iteration_matches_pairs():
    d = KData([(0, 5), (1, 6), (2, 7)], DataType.BUFFER)
    assert list(d) == list(d.pairs)
    assert [p.y for p in d] == [5.0, 6.0, 7.0]


def test_set_replaces_pair():
    d = KData([(0, 0), (1, 0)], DataType.ARRAY)
    d.set(1, 9, 8)
    assert d[1] == KPair(9.0, 8.0)
    assert d[0] == KPair(0.0, 0.0)


@pytest.mark.parametrize("index", [-1, 2, 100])
def test_set_out_of_range(index):
    d = KData([(0, 0), (1, 0)], DataType.ARRAY)
    with pytest.raises(IndexError):
        d.set(index, 1, 1)


def test_dependant_receives_updates():
    src = KData([(0, 0), (1, 0)], DataType.ARRAY)
    dst = KData([(0, 0), (0, 0)], DataType.BUFFER)
    calls = []
    src.add_dependant(dst, _recorder(calls))
    src.set(1, 3, 4)
    assert calls == [(dst, 1, 3.0, 4.0)]
    assert dst[1] == src[1]
    assert src.dependants == (dst,)


def test_dependant_chain_propagates():
    a = KData([(0, 0)], DataType.ARRAY)
    b = KData([(0, 0)], DataType.BUFFER)
    c = KData([(0, 0)], DataType.BUFFER)
    a.add_dependant(b, _recorder([]))
    b.add_dependant(c, _recorder([]))
    a.set(0, 2, 5)
    assert c[0] == a[0]


def test_dependant_failure_propagates():
    src = KData([(0, 0)], DataType.ARRAY)
    dst = KData([], DataType.BUFFER)
    src.add_dependant(dst, lambda dep, i, x, y: dep.set(i, x, y))
    with pytest.raises(IndexError):
        src.set(0, 1, 1)


def test_run_dependants_out_of_range():
    d = KData([(0, 0)], DataType.ARRAY)
    with pytest.raises(IndexError):
        d.run_dependants(1)


def test_self_dependency_rejected():
    d = KData([(0, 0)], DataType.ARRAY)
    with pytest.raises(ValueError):
        d.add_dependant(d, lambda *a: None)


def test_pairs_is_snapshot():
    d = KData([(0, 1)], DataType.ARRAY)
    snap = d.pairs
    d.set(0, 7, 7)
    assert snap[0] == KPair(0.0, 1.0)
    assert d[0] == KPair(7.0, 7.0)