from __future__ import annotations

from households.registry import Address, HouseholdIndex, Individual

MAIN = Address("123 Main St", "Seattle", "WA")
ELM = Address("456 Elm St", "Tacoma", "WA")
OAK = Address("789 Oak Ave", "Spokane", "WA")


def person(first, last, address, age=30):
    return Individual(first_name=first, last_name=last, address=address, age=age)


def test_empty_index():
    index = HouseholdIndex()
    assert len(index) == 0
    assert index.occupant_count() == 0
    assert list(index.entries()) == []


def test_households_keep_first_seen_order():
    index = HouseholdIndex()
    index.insert(person("A", "One", ELM))
    index.insert(person("B", "Two", MAIN))
    index.insert(person("C", "Three", ELM))
    index.insert(person("D", "Four", OAK))

    assert index.addresses() == [ELM, MAIN, OAK]
    assert [address for address, _ in index.entries()] == [ELM, MAIN, OAK]


def test_occupants_are_sorted_by_last_then_first_name():
    index = HouseholdIndex()
    index.insert(person("John", "Doe", MAIN))
    index.insert(person("Alice", "Adams", MAIN))
    index.insert(person("Jane", "Doe", MAIN))

    names = [(p.first_name, p.last_name) for p in index.occupants(MAIN)]
    assert names == [("Alice", "Adams"), ("Jane", "Doe"), ("John", "Doe")]


def test_equal_sort_keys_are_all_kept_in_insertion_order():
    index = HouseholdIndex()
    first = person("John", "Doe", MAIN, age=40)
    second = person("John", "Doe", MAIN, age=10)
    index.insert(first)
    index.insert(person("Adam", "Doe", MAIN))
    index.insert(second)

    occupants = index.occupants(MAIN)
    assert len(occupants) == 3
    assert occupants[1] is first
    assert occupants[2] is second


def test_equal_addresses_built_separately_share_a_household():
    index = HouseholdIndex()
    index.insert(person("John", "Doe", Address("123 Main St", "Seattle", "WA")))
    index.insert(person("Jane", "Doe", Address("123 Main St", "Seattle", "WA")))

    assert len(index) == 1
    assert index.occupant_count() == 2
    assert MAIN in index


def test_entries_is_restartable():
    index = HouseholdIndex()
    index.insert(person("A", "One", MAIN))
    index.insert(person("B", "Two", ELM))

    assert list(index.entries()) == list(index.entries())
    assert list(index) == list(index.entries())


def test_entries_hand_out_snapshots():
    index = HouseholdIndex()
    index.insert(person("A", "One", MAIN))

    (_, occupants), = index.entries()
    index.insert(person("B", "Two", MAIN))

    assert len(occupants) == 1
    assert len(index.occupants(MAIN)) == 2


def test_occupant_total_matches_inserts():
    index = HouseholdIndex()
    for i in range(10):
        index.insert(person(f"P{i}", "Family", [MAIN, ELM, OAK][i % 3]))

    assert len(index) == 3
    assert index.occupant_count() == 10
    assert sum(len(o) for _, o in index.entries()) == 10


def test_unknown_address_has_no_occupants():
    assert HouseholdIndex().occupants(MAIN) == ()
