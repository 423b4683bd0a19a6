"""Tests for route handlers called directly with a service instance."""

from unittest.mock import patch

from coverage_demo import api
from coverage_demo.models.domain import TimeOfDay


class TestHelloHandler:
    """Tests for the root handler."""

    def test_returns_hello_world(self, service):
        assert api.get_hello(app_service=service) == "Hello World!"

    def test_delegates_to_service(self, service):
        with patch.object(service, "get_hello", wraps=service.get_hello) as spy:
            api.get_hello(app_service=service)
        spy.assert_called_once_with()

    def test_uses_mocked_service_response(self, service):
        with patch.object(service, "get_hello", return_value="Mocked hello"):
            assert api.get_hello(app_service=service) == "Mocked hello"


class TestInfoHandler:
    """Tests for the info handler."""

    def test_returns_application_information(self, service):
        result = api.get_info(app_service=service)
        assert result.model_dump() == {
            "name": "NestJS Code Coverage Demo",
            "version": "1.0.0",
            "description": "A simple NestJS application to demonstrate code coverage",
        }

    def test_delegates_to_service(self, service):
        with patch.object(service, "get_info", wraps=service.get_info) as spy:
            api.get_info(app_service=service)
        spy.assert_called_once_with()


class TestCalculateSumHandler:
    """Tests for the sum handler."""

    def test_calculates_sum(self, service):
        assert api.calculate_sum("5", "3", app_service=service).result == 8

    def test_non_numeric_input_returns_zero(self, service):
        assert api.calculate_sum("abc", "3", app_service=service).result == 0
        assert api.calculate_sum("5", "xyz", app_service=service).result == 0
        assert api.calculate_sum("abc", "xyz", app_service=service).result == 0

    def test_missing_input_returns_zero(self, service):
        assert api.calculate_sum(None, "3", app_service=service).result == 0
        assert api.calculate_sum(app_service=service).result == 0

    def test_passes_parsed_integers_to_service(self, service):
        with patch.object(service, "calculate_sum", wraps=service.calculate_sum) as spy:
            api.calculate_sum("5", "3", app_service=service)
        spy.assert_called_once_with(5, 3)

    def test_tolerant_parse_feeds_service(self, service):
        with patch.object(service, "calculate_sum", wraps=service.calculate_sum) as spy:
            result = api.calculate_sum("5px", " 3.7", app_service=service)
        spy.assert_called_once_with(5, 3)
        assert result.result == 8

    def test_fallback_skips_service(self, service):
        with patch.object(service, "calculate_sum") as spy:
            api.calculate_sum("abc", "3", app_service=service)
        spy.assert_not_called()


class TestCalculateProductHandler:
    """Tests for the product handler."""

    def test_calculates_product(self, service):
        assert api.calculate_product("4", "5", app_service=service).result == 20

    def test_non_numeric_input_returns_zero(self, service):
        assert api.calculate_product("abc", "5", app_service=service).result == 0
        assert api.calculate_product("4", "xyz", app_service=service).result == 0

    def test_passes_parsed_integers_to_service(self, service):
        with patch.object(service, "calculate_product", wraps=service.calculate_product) as spy:
            api.calculate_product("4", "5", app_service=service)
        spy.assert_called_once_with(4, 5)

    def test_fallback_skips_service(self, service):
        with patch.object(service, "calculate_product") as spy:
            api.calculate_product("4", None, app_service=service)
        spy.assert_not_called()


class TestIsEvenHandler:
    """Tests for the parity handler."""

    def test_identifies_even_and_odd_numbers(self, service):
        assert api.is_even("2", app_service=service).model_dump(by_alias=True) == {
            "number": 2, "isEven": True,
        }
        assert api.is_even("3", app_service=service).model_dump(by_alias=True) == {
            "number": 3, "isEven": False,
        }

    def test_negative_numbers(self, service):
        result = api.is_even("-3", app_service=service)
        assert result.number == -3
        assert result.is_even is False

    def test_non_numeric_input_reports_zero_as_even(self, service):
        assert api.is_even("abc", app_service=service).model_dump(by_alias=True) == {
            "number": 0, "isEven": True,
        }

    def test_passes_parsed_integer_to_service(self, service):
        with patch.object(service, "is_even", wraps=service.is_even) as spy:
            api.is_even("2", app_service=service)
        spy.assert_called_once_with(2)


class TestGreetingHandler:
    """Tests for the greeting handler."""

    def test_default_greeting_with_name_only(self, service):
        assert api.generate_greeting("John", app_service=service).greeting == "Hello, John!"

    def test_time_specific_greeting(self, service):
        result = api.generate_greeting("John", "morning", app_service=service)
        assert result.greeting == "Good morning, John!"

    def test_missing_name_defaults_to_guest(self, service):
        assert api.generate_greeting(app_service=service).greeting == "Hello, guest!"

    def test_unknown_time_is_normalized_before_service(self, service):
        with patch.object(service, "generate_greeting", wraps=service.generate_greeting) as spy:
            result = api.generate_greeting("John", "midnight", app_service=service)
        spy.assert_called_once_with("John", None)
        assert result.greeting == "Hello, John!"

    def test_passes_time_tag_to_service(self, service):
        with patch.object(service, "generate_greeting", wraps=service.generate_greeting) as spy:
            api.generate_greeting("John", "morning", app_service=service)
        spy.assert_called_once_with("John", TimeOfDay.MORNING)
