import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodrills.bitset import BitMap, Bitset


def test_bitmap_add_remove_toggle():
    bm = BitMap(70)
    bm.add(5)
    bm.add(64)
    assert bm.contains(5)
    assert bm.contains(64)
    assert not bm.contains(4)
    bm.remove(5)
    assert not bm.contains(5)
    bm.toggle(4)
    assert bm.contains(4)
    bm.toggle(4)
    assert not bm.contains(4)


def test_bitmap_out_of_range():
    bm = BitMap(10)
    with pytest.raises(IndexError):
        bm.add(10)
    with pytest.raises(IndexError):
        bm.contains(-1)


@given(st.lists(st.tuples(st.sampled_from(["add", "remove", "toggle"]), st.integers(0, 99))))
def test_bitmap_matches_set(ops):
    bm = BitMap(100)
    model = set()
    for op, num in ops:
        getattr(bm, op)(num)
        if op == "add":
            model.add(num)
        elif op == "remove":
            model.discard(num)
        else:
            model ^= {num}
    assert {i for i in range(100) if bm.contains(i)} == model


def test_bitset_source_example():
    b = Bitset(5)
    b.fix(3)
    b.fix(1)
    b.flip()
    assert b.all() is False
    b.unfix(0)
    b.flip()
    assert b.one() is True
    b.unfix(0)
    assert b.count() == 2
    assert str(b) == "01010"


def test_bitset_starts_clear():
    b = Bitset(4)
    assert str(b) == "0" * 4
    assert not b.one()
    b.flip()
    assert b.all()
    assert b.count() == 4


def test_bitset_fix_is_idempotent():
    b = Bitset(3)
    b.fix(2)
    b.fix(2)
    assert b.count() == 1
    b.unfix(2)
    b.unfix(2)
    assert b.count() == 0


def test_bitset_index_errors():
    b = Bitset(3)
    with pytest.raises(IndexError):
        b.fix(3)
    with pytest.raises(IndexError):
        b.unfix(-1)


@given(
    st.integers(1, 80),
    st.lists(st.tuples(st.sampled_from(["fix", "unfix", "flip"]), st.integers(0, 79))),
)
def test_bitset_matches_model(size, ops):
    b = Bitset(size)
    model = [False] * size
    for op, idx in ops:
        idx %= size
        if op == "fix":
            b.fix(idx)
            model[idx] = True
        elif op == "unfix":
            b.unfix(idx)
            model[idx] = False
        else:
            b.flip()
            model = [not bit for bit in model]
    text = str(b)
    assert text == "".join("1" if bit else "0" for bit in model)
    assert b.count() == sum(model) == text.count("1")
    assert b.all() == all(model)
    assert b.one() == any(model)