from appconf.lookup.errors import ConfigurationError
from appconf.lookup.values import LookupResult, SystemEnv


def test_success_is_truthy():
    result = LookupResult.success(0)
    assert result
    assert result.value == 0


def test_failure_is_falsy():
    result = LookupResult.failure()
    assert not result
    assert result.value is None


def test_success_with_falsy_payload_differs_from_failure():
    assert LookupResult.success(None) != LookupResult.failure()
    assert LookupResult.success(False).ok is True


def test_repr():
    assert repr(LookupResult.success("bar")) == "LookupResult.success('bar')"
    assert repr(LookupResult.failure()) == "LookupResult.failure()"


def test_system_env_equality():
    assert SystemEnv("BAZ") == SystemEnv("BAZ")
    assert SystemEnv("BAZ") != SystemEnv("QUX")


def test_configuration_error_messages():
    assert str(ConfigurationError("app", "foo")) == (
        "Configuration for application app for foo is missing"
    )
    assert str(ConfigurationError("app", "foo", "an integer")) == (
        "Configuration for application app for foo is missing or it is not an integer"
    )


def test_equality_distinguishes_value_types():
    assert LookupResult.success(1) != LookupResult.success(True)
    assert LookupResult.success(0) != LookupResult.success(False)
    assert LookupResult.success(23) == LookupResult.success(23)
    assert LookupResult.failure() == LookupResult.failure()


def test_equality_with_other_types():
    assert LookupResult.success("bar") != "bar"
