"""Tests for the model and view extensions."""

import pytest

from fieldcheck.extensions import FieldBinder, ValidatedModel, pick_all
from fieldcheck.services import EventBus


class Signup(ValidatedModel):
    validation = {
        "email": {"required": True, "format": "email"},
        "password": [{"minLength": 6, "message": "Too short"}],
        "confirm": {
            "fn": lambda value, model: value == model.get("password"),
            "message": "Passwords do not match",
        },
    }


@pytest.fixture
def signup(engine):
    return Signup(
        {"email": "a@b.com", "password": "secret", "confirm": "secret", "nickname": ""},
        engine=engine,
    )


def test_pick_all_keeps_missing_keys():
    assert pick_all({"a": 1, "b": 0}, ["a", "b", "c"]) == {"a": 1, "b": 0, "c": None}


class TestValidatedModel:

    def test_valid_model(self, signup):
        assert signup.validate() is None
        assert signup.errors is None
        assert signup.is_valid()

    def test_invalid_model(self, signup):
        signup.set(password="abc")

        errors = signup.validate()

        assert errors == {"password": ["Too short"], "confirm": ["Passwords do not match"]}
        assert signup.errors == errors
        assert not signup.is_valid()

    def test_configured_but_missing_attribute_is_validated(self, engine):
        model = Signup({"password": "secret", "confirm": "secret"}, engine=engine)

        assert model.validate() == {"email": ["Is required", "Does not match format"]}

    def test_validate_single_name(self, signup):
        signup.set(email="", password="abc")

        assert signup.validate("email") == {"email": ["Is required", "Does not match format"]}

    def test_validate_list_of_names(self, signup):
        signup.set(email="", password="abc")

        assert signup.validate(["password"]) == {"password": ["Too short"]}

    def test_validate_mapping_as_given(self, signup):
        assert signup.validate({"password": "abc"}) == {"password": ["Too short"]}
        assert signup.get("password") == "secret"

    def test_suppress_stores_but_returns_none(self, signup):
        signup.set(password="abc")

        assert signup.validate(suppress=True) is None
        assert signup.errors["password"] == ["Too short"]

    def test_instance_validation_overrides_class(self, engine):
        model = ValidatedModel({"name": ""}, validation={"name": {"required": True}}, engine=engine)

        assert model.validate() == {"name": ["Is required"]}

    def test_model_without_validation_is_valid(self, engine):
        assert ValidatedModel({"name": ""}, engine=engine).validate() is None

    def test_is_valid_subset(self, signup):
        signup.set(email="")

        assert signup.is_valid(["password"])
        assert not signup.is_valid("email")

    def test_is_valid_skips_unknown_names(self, signup):
        signup.set(email="")

        assert signup.is_valid(["unknown"])

    def test_validated_notifications_are_deferred(self, signup):
        received = []
        signup.events.subscribe("validated", lambda model, attrs, errors: received.append(("validated", errors)))
        signup.events.subscribe("validated:invalid", lambda model, attrs, errors: received.append(("invalid", errors)))
        signup.events.subscribe("validated:valid", lambda model, attrs, errors: received.append(("valid", errors)))

        signup.set(password="abc", confirm="abc")
        signup.validate("password")

        assert received == []

        signup.events.flush()

        assert received == [
            ("validated", {"password": ["Too short"]}),
            ("invalid", {"password": ["Too short"]}),
        ]

    def test_valid_notification(self, signup):
        received = []
        signup.events.subscribe("validated:valid", lambda model, attrs, errors: received.append((model, attrs)))

        signup.validate("email")
        signup.events.flush()

        assert received == [(signup, {"email": "a@b.com"})]

    def test_silent_skips_notifications(self, signup):
        signup.events.subscribe("validated", lambda model, attrs, errors: None)

        signup.validate(silent=True)

        assert signup.events.pending == 0

    def test_repeated_validation_without_listeners_queues_nothing(self, engine):
        model = ValidatedModel({"name": ""}, validation={"name": {"required": True}}, engine=engine)

        for _ in range(5000):
            model.validate()

        assert model.events.pending == 0

    def test_unflushed_notifications_are_capped(self, engine):
        model = ValidatedModel(
            {"name": ""},
            validation={"name": {"required": True}},
            engine=engine,
            event_bus=EventBus(max_pending=10),
        )
        received = []
        model.events.subscribe("validated", lambda model, attrs, errors: received.append(errors))
        model.events.subscribe("validated:invalid", lambda model, attrs, errors: None)

        for _ in range(50):
            model.validate()

        assert model.events.pending == 10
        assert model.events.flush() == 10
        assert received == [{"name": ["Is required"]}] * 5

    def test_model_in_collection(self, engine):
        members = [
            ValidatedModel({"name": "ann"}, validation={"name": {"required": True}}, engine=engine),
            ValidatedModel({"name": ""}, validation={"name": {"required": True}}, engine=engine),
        ]
        team = ValidatedModel({"members": members}, validation={"members": {"collection": True}}, engine=engine)

        assert team.validate() == {"members": [[[1, {"name": ["Is required"]}]]]}


class TestFieldBinder:

    def test_bind_requires_model(self):
        with pytest.raises(ValueError, match="Model is not provided"):
            FieldBinder().bind()

    def test_default_callbacks_track_invalid_fields(self, signup):
        binder = FieldBinder(signup)
        binder.bind()

        signup.set(email="")
        signup.validate()
        signup.events.flush()

        assert binder.invalid_fields == {"email": "Is required, Does not match format"}

        signup.set(email="a@b.com")
        signup.validate()
        signup.events.flush()

        assert binder.invalid_fields == {}

    def test_constructor_callbacks(self, signup):
        calls = []
        binder = FieldBinder(
            on_valid_field=lambda name, value, model: calls.append(("valid", name)),
            on_invalid_field=lambda name, value, errors, model: calls.append(("invalid", name, errors)),
        )
        binder.bind(signup)

        signup.set(password="abc")
        signup.validate(["email", "password"])
        signup.events.flush()

        assert calls == [("valid", "email"), ("invalid", "password", ["Too short"])]

    def test_subclass_callbacks(self, signup):
        class RecordingBinder(FieldBinder):
            def __init__(self, *args, **kwargs):
                super().__init__(*args, **kwargs)
                self.marked = []

            def on_invalid_field(self, name, value, errors, model):
                self.marked.append(name)

        binder = RecordingBinder(signup)
        binder.bind()

        signup.set(email="")
        signup.validate()
        signup.events.flush()

        assert binder.marked == ["email"]
        assert binder.invalid_fields == {}

    def test_unbind(self, signup):
        binder = FieldBinder(signup)
        binder.bind()
        binder.unbind()

        signup.set(email="")
        signup.validate()
        signup.events.flush()

        assert binder.invalid_fields == {}
