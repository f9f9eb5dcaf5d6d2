import pytest

from promotions_ui.config import set_config_for_test
from promotions_ui.data.backends.memory_backend import InMemoryPromotionsApi
from promotions_ui.data.models import ApiFailure, Promotion, PromotionFilters
from promotions_ui.data.util import get_promotions_api


@pytest.fixture(autouse=True)
def config():
    set_config_for_test(log_level="WARNING")


@pytest.fixture
def api():
    return InMemoryPromotionsApi()


def test_create_then_retrieve_round_trip(api):
    submitted = Promotion(name="flash sale", category="electronics", available=True,
                          gender="unisex", birthday="2024-01-01")
    created = api.create(submitted).value
    assert created.id == 1

    fetched = api.retrieve(str(created.id)).value
    assert fetched.model_dump(exclude={"id"}) == submitted.model_dump(exclude={"id"})


def test_ids_are_sequential(api):
    assert api.create(Promotion(name="a")).value.id == 1
    assert api.create(Promotion(name="b")).value.id == 2


def test_update_replaces_fields(api):
    api.create(Promotion(name="a", category="toys"))
    updated = api.update("1", Promotion(name="b", category="books", available=True)).value
    assert updated.id == 1
    assert updated.name == "b"
    assert updated.available is True
    assert api.retrieve("1").value.category == "books"


@pytest.mark.parametrize("promotion_id", ["42", "", "abc"])
def test_unknown_id_is_not_found(api, promotion_id):
    result = api.retrieve(promotion_id)
    assert isinstance(result, ApiFailure)
    assert result.status_code == 404
    assert isinstance(api.update(promotion_id, Promotion(name="x")), ApiFailure)


def test_delete_removes_and_is_idempotent(api):
    api.create(Promotion(name="a"))
    assert api.delete("1").ok
    assert isinstance(api.retrieve("1"), ApiFailure)
    assert api.delete("1").ok


def test_search_filters_in_insertion_order(api):
    api.create(Promotion(name="a", category="toys", available=True))
    api.create(Promotion(name="b", category="toys", available=False))
    api.create(Promotion(name="a", category="books", available=True))

    assert [p.id for p in api.search(PromotionFilters()).value] == [1, 2, 3]
    assert [p.id for p in api.search(PromotionFilters(name="a")).value] == [1, 3]
    assert [p.id for p in api.search(PromotionFilters(category="toys", available=True)).value] == [1]
    assert api.search(PromotionFilters(name="zzz")).value == []


def test_seed_csv(tmp_path):
    seed = tmp_path / "promotions.csv"
    seed.write_text(
        "id,name,category,available,gender,birthday\n"
        "5,spring,garden,True,female,2020-03-01\n"
        "9,winter,outdoor,false,male,\n"
    )
    api = InMemoryPromotionsApi(seed_csv=seed)
    spring = api.retrieve("5").value
    assert spring.available is True
    assert spring.birthday == "2020-03-01"
    assert api.retrieve("9").value.birthday == ""
    assert api.create(Promotion(name="new")).value.id == 10


def test_missing_seed_csv(tmp_path):
    with pytest.raises(FileNotFoundError):
        InMemoryPromotionsApi(seed_csv=tmp_path / "missing.csv")


def test_factory_selects_backend():
    set_config_for_test(api_backend="memory", log_level="WARNING")
    assert isinstance(get_promotions_api(), InMemoryPromotionsApi)
    with pytest.raises(ValueError):
        get_promotions_api("carrier-pigeon")


def test_seed_csv_keeps_numeric_looking_text(tmp_path):
    seed = tmp_path / "promotions.csv"
    seed.write_text(
        "id,name,category,available,gender,birthday\n"
        "1,2024,123,true,0,20240101\n"
    )
    api = InMemoryPromotionsApi(seed_csv=seed)

    found = api.search(PromotionFilters(name="2024", category="123")).value
    assert [p.id for p in found] == [1]
    assert found[0].gender == "0"

    updated = api.update("1", Promotion(name="summer", category="toys", gender="f"))
    assert updated.value.name == "summer"
    assert api.search(PromotionFilters(name="summer")).value[0].category == "toys"


def test_factory_uses_configured_collection_url():
    set_config_for_test(api_backend="http", api_base_url="http://promo.test/", log_level="WARNING")
    api = get_promotions_api()
    assert api.collection_url == "http://promo.test/promotions"
