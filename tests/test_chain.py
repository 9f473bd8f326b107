import pytest

from solrcriteria import (
    AND_OPERATOR,
    OR_OPERATOR,
    Conjunction,
    CriteriaEntry,
    CriteriaFrozen,
    Field,
    InvalidChainLink,
    InvalidField,
    OperationKey,
    where,
)


def names(chain):
    return [c.field.name for c in chain]


def test_root_chain_contains_itself():
    a = where("a")
    assert a.chain == (a,)
    assert a.conjunction is Conjunction.AND
    assert a.conjunction_operator == AND_OPERATOR


def test_and_or_chain_order():
    a = where("a")
    b = a.and_("b")
    c = b.or_("c")
    assert names(a.chain) == ["a", "b", "c"]
    assert a.chain == b.chain == c.chain
    assert [n.conjunction for n in c.chain] == [Conjunction.AND, Conjunction.AND, Conjunction.OR]
    assert c.conjunction_operator == OR_OPERATOR


def test_and_returns_new_node_bound_to_field():
    a = where("a").is_(1)
    b = a.and_(Field("b")).is_(2)
    assert b is not a
    assert b.field.name == "b"
    assert a.entries == (CriteriaEntry(OperationKey.EQUALS, 1),)


def test_chain_is_shared_after_creation():
    a = where("a")
    b = a.and_("b")
    a.and_("c")
    assert names(b.chain) == ["a", "b", "c"]


def test_and_with_none_field_fails():
    with pytest.raises(InvalidField):
        where("a").and_(None)


def test_and_links_existing_criteria():
    a = where("a").is_(1)
    group = where("b").is_(2).or_("c").is_(3)
    assert a.and_(group) is a
    assert a.chain == (a, group)
    assert names(group.chain) == ["b", "c"]


def test_and_links_several_criteria():
    a = where("a")
    b = where("b")
    c = where("c")
    assert a.and_(b, c) is a
    assert a.chain == (a, b, c)


def test_ampersand_links_criteria():
    a = where("a")
    b = where("b")
    assert (a & b) is a
    assert a.chain == (a, b)


@pytest.mark.parametrize("other", [None, "not criteria"])
def test_and_rejects_invalid_links(other):
    with pytest.raises(InvalidChainLink):
        where("a").and_(where("b"), other)


def test_and_rejects_self_link():
    a = where("a")
    b = a.and_("b")
    with pytest.raises(InvalidChainLink):
        a.and_(a)
    with pytest.raises(InvalidChainLink):
        a.and_(b)


def test_and_rejects_linking_into_two_chains():
    shared = where("s")
    where("a").and_(shared)
    with pytest.raises(InvalidChainLink):
        where("b").and_(shared)


def test_and_rejects_same_node_twice():
    a = where("a")
    b = where("b")
    with pytest.raises(InvalidChainLink):
        a.and_(b, b)
    assert a.chain == (a,)


def test_and_rejects_cycles():
    a = where("a")
    b = where("b")
    b.and_(a)
    with pytest.raises(InvalidChainLink):
        a.and_(b)


def test_or_copies_entries():
    a = where("a")
    other = where("x").is_(1)
    copy = a.or_(other)
    assert copy is not other
    assert copy.field == other.field
    assert copy.conjunction is Conjunction.OR
    assert copy.entries == other.entries
    assert a.chain == (a, copy)

    other.is_(2)
    assert copy.entries == (CriteriaEntry(OperationKey.EQUALS, 1),)
    copy.is_(3)
    assert other.entries == (
        CriteriaEntry(OperationKey.EQUALS, 1),
        CriteriaEntry(OperationKey.EQUALS, 2),
    )


def test_or_copy_keeps_other_chain_untouched():
    other = where("x").is_(1)
    where("a").or_(other)
    assert other.chain == (other,)


def test_pipe_operator_copies_as_or():
    a = where("a")
    copy = a | where("b").is_(1)
    assert copy.conjunction is Conjunction.OR
    assert names(a.chain) == ["a", "b"]


def test_or_rejects_none():
    with pytest.raises(InvalidChainLink):
        where("a").or_(None)


def test_freeze_blocks_chain_extension():
    a = where("a")
    b = a.and_("b").freeze()
    assert a.frozen and b.frozen
    with pytest.raises(CriteriaFrozen):
        a.and_("c")
    with pytest.raises(CriteriaFrozen):
        b.or_("c")
    with pytest.raises(CriteriaFrozen):
        a.and_(where("d"))
    assert names(a.chain) == ["a", "b"]


def test_freeze_reaches_linked_groups():
    group = where("b")
    where("a").and_(group).freeze()
    with pytest.raises(CriteriaFrozen):
        group.is_(1)


def test_chain_view_is_a_snapshot():
    a = where("a")
    view = a.chain
    a.and_("b")
    assert view == (a,)


def test_and_rejects_group_linked_into_two_chains():
    b = where("b")
    c = b.and_("c")
    where("a").and_(c)
    x = where("x")
    with pytest.raises(InvalidChainLink):
        x.and_(b)
    assert x.chain == (x,)


def test_and_rejects_same_group_twice_in_one_call():
    a = where("a")
    b = where("b")
    c = b.and_("c")
    with pytest.raises(InvalidChainLink):
        a.and_(b, c)
    assert a.chain == (a,)


def test_freeze_stays_within_its_chain():
    b = where("b")
    a = where("a").and_(b)
    x = where("x")
    with pytest.raises(InvalidChainLink):
        x.and_(b)
    a.freeze()
    assert b.frozen
    assert not x.frozen
    x.is_(1)
