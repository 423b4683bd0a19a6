"""Arithmetic, parity and greeting operations."""

from typing import Optional, Union

from coverage_demo.models.domain import APP_INFO, InfoPayload, TimeOfDay

_GREETINGS = {
    TimeOfDay.MORNING: "Good morning, {name}!",
    TimeOfDay.AFTERNOON: "Good afternoon, {name}!",
    TimeOfDay.EVENING: "Good evening, {name}!",
}


class AppService:
    """Stateless service behind every demo endpoint."""

    def get_hello(self) -> str:
        return "Hello World!"

    def get_info(self) -> InfoPayload:
        return APP_INFO

    def calculate_sum(self, a: int, b: int) -> int:
        """Calculate the sum of two numbers."""
        return a + b

    def calculate_product(self, a: int, b: int) -> int:
        """Calculate the product of two numbers."""
        return a * b

    def is_even(self, num: int) -> bool:
        """Check whether a number is even (zero and negatives included)."""
        return num % 2 == 0

    def generate_greeting(
        self,
        name: str,
        time: Optional[Union[TimeOfDay, str]] = None,
    ) -> str:
        """Generate a greeting message for a user.

        Args:
            name: User's name, used verbatim
            time: Time of day; absent or unrecognized values give the
                  time-neutral greeting

        Returns:
            Personalized greeting message
        """
        if not time:
            return f"Hello, {name}!"

        try:
            template = _GREETINGS[TimeOfDay(time)]
        except ValueError:
            return f"Hello, {name}!"
        return template.format(name=name)


_app_service = None


def get_app_service() -> AppService:
    """Get singleton app service instance."""
    global _app_service
    if _app_service is None:
        _app_service = AppService()
    return _app_service
