import pytest

from maventoys.models import Store
from maventoys.repositories import StoreRepository
from maventoys.specs import FilterSpec, MatchMode, is_blank, product_spec, store_spec


@pytest.fixture
def store_repo(session):
    session.add_all([
        Store(name="Maven Toys Guadalajara 1", city="Guadalajara", location="Downtown"),
        Store(name="Maven Toys Monterrey 2", city="Monterrey", location="Airport"),
        Store(name="Maven Toys Puebla 1", city="Puebla", location="Downtown"),
    ])
    session.commit()
    return StoreRepository(session)


def test_is_blank():
    assert is_blank(None)
    assert is_blank("")
    assert is_blank("   ")
    assert not is_blank("toys")
    assert not is_blank(0)


def test_empty_spec_matches_every_row(store_repo):
    spec = store_spec()
    assert spec.is_empty()
    assert store_repo.count(spec) == 3


def test_blank_text_is_ignored(store_repo):
    assert store_spec(name="  ", location="").is_empty()
    assert store_repo.count(store_spec(name="  ")) == 3


def test_text_match_is_case_insensitive_substring(store_repo):
    assert store_repo.count(store_spec(name="guadalajara")) == 1
    assert store_repo.count(store_spec(location="DOWN")) == 2


def test_criteria_are_combined_with_and(store_repo):
    assert store_repo.count(store_spec(name="1", location="downtown")) == 2
    assert store_repo.count(store_spec(name="puebla", location="airport")) == 0


def test_id_matches_exactly(store_repo):
    first = store_repo.find_all()[0]
    page = store_repo.find_page(store_spec(id=first.id), 0, 10)
    assert [store.id for store in page.items] == [first.id]


def test_like_wildcards_are_literal(store_repo):
    assert store_repo.count(store_spec(name="%")) == 0
    assert store_repo.count(store_spec(name="_")) == 0


def test_and_merges_criteria():
    spec = store_spec(name="toys").and_(FilterSpec(Store, [("city", MatchMode.EQUALS, "Puebla")]))
    assert len(spec.conditions()) == 2


def test_and_rejects_other_models():
    with pytest.raises(ValueError):
        store_spec(name="toys").and_(product_spec(name="lego"))
