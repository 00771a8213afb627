from draft.config import MockStrategy
from draft.reflect.item import Item, Options, get
from draft.reflect.mock import detect_semantic_type, prepare_mock

SMART = Options(mock_strategy=MockStrategy.SMART, mock_seed=42)


class TestExampleStrategy:
    def test_replays_examples(self):
        value = {"id": 1, "name": "a", "tags": ["x", "y"], "owner": {"email": "a@b.c"}}
        mock = prepare_mock(get(value))
        assert mock == {"id": 1, "name": "a", "tags": ["x"], "owner": {"email": "a@b.c"}}

    def test_type_defaults_without_example(self):
        item = Item(
            type="object",
            nested=[
                Item(name="s", type="string"),
                Item(name="i", type="integer"),
                Item(name="n", type="number"),
                Item(name="b", type="boolean"),
                Item(name="z", type="null"),
                Item(name="l", type="array"),
            ],
        )
        assert prepare_mock(item) == {"s": "", "i": 0, "n": 0.0, "b": False, "z": None, "l": []}

    def test_scalar_root(self):
        assert prepare_mock(get("plain text")) == "plain text"


class TestSmartStrategy:
    def test_is_reproducible(self):
        item = get({"email": "x@y.z", "first_name": "A", "created_at": "2020-01-01T00:00:00Z"})
        assert prepare_mock(item, SMART) == prepare_mock(item, SMART)

    def test_generates_by_field_name(self):
        item = get({"user_email": "x", "id": 5, "uuid": "u", "price": 10.0, "city": "Oslo"})
        mock = prepare_mock(item, SMART)
        assert "@" in mock["user_email"]
        assert isinstance(mock["id"], int)
        assert len(mock["uuid"]) == 36
        assert 5.0 <= mock["price"] <= 15.0
        assert isinstance(mock["city"], str)

    def test_keeps_example_when_type_mismatches(self):
        mock = prepare_mock(get({"status": 200, "note": "kept"}), SMART)
        assert mock == {"status": 200, "note": "kept"}

    def test_array_elements_use_field_name(self):
        mock = prepare_mock(get({"emails": ["a@b.c"], "email_list": ["a@b.c"]}), SMART)
        assert mock["emails"] == ["a@b.c"]
        assert "@" in mock["email_list"][0]


class TestSemanticType:
    def test_detect(self):
        assert detect_semantic_type("user_id") == "id"
        assert detect_semantic_type("Email") == "email"
        assert detect_semantic_type("updated_at") == "datetime_recent"
        assert detect_semantic_type("page_size") == "positive_int"
        assert detect_semantic_type("zip") == "unknown"
